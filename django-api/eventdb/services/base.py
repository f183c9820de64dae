"""Shared write discipline for the event and guest services."""

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager

from eventdb.domain.errors import StoreWriteError
from eventdb.stores import Snapshot, SnapshotBackend

logger = logging.getLogger(__name__)


class SnapshotService:
    """Base for services that mutate a shared Snapshot.

    Every mutation is applied to the snapshot first, then the whole snapshot
    is persisted. If persisting fails the mutation is undone, so memory never
    runs ahead of the last successful write.
    """

    def __init__(
        self,
        snapshot: Snapshot,
        backend: SnapshotBackend,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._snapshot = snapshot
        self._backend = backend
        self._lock = lock or threading.RLock()

    def _commit(self, rollback: Callable[[], None], error_message: str) -> None:
        """Persist the snapshot, undoing the pending change on failure.

        Raises:
            StoreWriteError: If the backend could not write the snapshot.
        """
        try:
            self._backend.persist(self._snapshot)
        except (OSError, TypeError, ValueError) as exc:
            rollback()
            logger.exception(error_message)
            raise StoreWriteError(error_message) from exc
        except Exception:
            rollback()
            raise
