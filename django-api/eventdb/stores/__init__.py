from pathlib import Path

from eventdb.stores.interfaces import SnapshotBackend
from eventdb.stores.json_file import JsonFileBackend
from eventdb.stores.snapshot import Snapshot
from eventdb.stores.volatile import VolatileBackend

FILE_NAME = "events.json"
IN_MEMORY = ":memory:"


def backend_for(data_store: Path | str) -> SnapshotBackend:
    """Return the backend for a configured storage directory.

    The IN_MEMORY sentinel selects a VolatileBackend.
    """
    if str(data_store) == IN_MEMORY:
        return VolatileBackend()
    return JsonFileBackend(Path(data_store).resolve() / FILE_NAME)


__all__ = [
    "FILE_NAME",
    "IN_MEMORY",
    "JsonFileBackend",
    "Snapshot",
    "SnapshotBackend",
    "VolatileBackend",
    "backend_for",
]
