"""Store interfaces (repository pattern).

Backends must be swappable. They hold no state between calls: the snapshot
is owned by the EventDB facade and handed in on every persist.
"""

from abc import ABC, abstractmethod

from eventdb.stores.snapshot import Snapshot


class SnapshotBackend(ABC):
    """Interface for loading and persisting the full store snapshot."""

    is_volatile: bool = False

    @abstractmethod
    def initialize(self) -> Snapshot:
        """Prepare storage and return the snapshot to start from."""
        ...

    @abstractmethod
    def load(self) -> Snapshot:
        """Read the durable snapshot.

        Raises:
            StoreReadError: If the stored document cannot be read or parsed.
        """
        ...

    @abstractmethod
    def persist(self, snapshot: Snapshot) -> None:
        """Overwrite durable storage with the complete snapshot.

        I/O failures propagate (OSError) so the caller can roll back.
        """
        ...
