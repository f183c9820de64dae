from django.apps import AppConfig
from django.conf import settings


class EventDBConfig(AppConfig):
    name = "eventdb"
    verbose_name = "Events database"

    def ready(self) -> None:
        # Load the snapshot at startup so an unreadable store stops the process
        # before it serves requests.
        if settings.EVENTDB_EAGER_LOAD:
            from eventdb.database import EventDB

            EventDB.create()
