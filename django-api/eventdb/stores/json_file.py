"""JSON file implementation of the SnapshotBackend."""

import json
import logging
from pathlib import Path

from eventdb.domain.errors import StoreReadError
from eventdb.stores.codec import dump_snapshot, load_snapshot
from eventdb.stores.interfaces import SnapshotBackend
from eventdb.stores.snapshot import Snapshot

logger = logging.getLogger(__name__)


class JsonFileBackend(SnapshotBackend):
    """Keeps the whole store in a single UTF-8 JSON document."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonFileBackend({str(self.path)!r})"

    def initialize(self) -> Snapshot:
        logger.info("initializing events database at %s", self.path)
        directory = self.path.parent
        if not directory.exists():
            logger.info("creating data store directory %s", directory)
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StoreReadError(f"cannot create {directory}: {exc}") from exc

        if not self.path.exists():
            logger.info("events database file does not exist yet")
            return Snapshot()

        snapshot = self.load()
        logger.info(
            "completed reading events database",
            extra={"events": len(snapshot.events), "guests": len(snapshot.guests)},
        )
        return snapshot

    def load(self) -> Snapshot:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreReadError(f"cannot read {self.path}: {exc}") from exc

        if not text.strip():
            logger.info("events database file is empty")
            return Snapshot()

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreReadError(f"invalid JSON in {self.path}: {exc}") from exc
        return load_snapshot(data)

    def persist(self, snapshot: Snapshot) -> None:
        payload = json.dumps(dump_snapshot(snapshot), ensure_ascii=False)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp.write_text(payload, encoding="utf-8")
            tmp.replace(self.path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
