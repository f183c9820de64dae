"""In-memory backend used for tests: every persist is a successful no-op."""

import logging

from eventdb.stores.interfaces import SnapshotBackend
from eventdb.stores.snapshot import Snapshot

logger = logging.getLogger(__name__)


class VolatileBackend(SnapshotBackend):
    is_volatile = True

    def __repr__(self) -> str:
        return "VolatileBackend()"

    def initialize(self) -> Snapshot:
        logger.info("initializing in-memory events database")
        return Snapshot()

    def load(self) -> Snapshot:
        return Snapshot()

    def persist(self, snapshot: Snapshot) -> None:
        pass
