"""Settings for the test suite: volatile store, nothing loaded at startup."""

from config.settings import *  # noqa: F401,F403

EVENTDB_DATA_STORE = ":memory:"
EVENTDB_EAGER_LOAD = False
ALLOWED_HOSTS = ["testserver", "localhost"]
