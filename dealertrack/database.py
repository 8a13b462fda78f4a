"""
JSON document storage.

Every entity collection lives in a single ``<name>.json`` file holding a
JSON array of objects.  The whole document is the unit of read and write:
callers load the full list, change it in memory and write the full list
back.  A per-collection lock lets callers in one process serialize that
read-modify-write cycle; separate processes sharing a data directory are
not coordinated.
"""
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List

from dealertrack.config import get_settings
from dealertrack.exceptions import StorageFormatError, StorageIOError, UnknownCollectionError

logger = logging.getLogger(__name__)

PARTS = "parts"
CUSTOMERS = "customers"
SERVICE_ORDERS = "service_orders"
INVOICES = "invoices"
INVENTORY_TRANSACTIONS = "inventory_transactions"

COLLECTIONS = (PARTS, CUSTOMERS, SERVICE_ORDERS, INVOICES, INVENTORY_TRANSACTIONS)

Record = Dict[str, Any]


class JsonStore:
    """Whole-collection JSON documents under one data directory."""

    def __init__(self, data_dir: str | os.PathLike):
        self.data_dir = Path(data_dir)
        self._locks = {name: threading.RLock() for name in COLLECTIONS}

    def path_for(self, collection: str) -> Path:
        if collection not in COLLECTIONS:
            raise UnknownCollectionError(collection)
        return self.data_dir / f"{collection}.json"

    def initialize(self) -> None:
        """Create the data directory and any missing collection document."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageIOError("data directory", str(exc)) from exc

        for collection in COLLECTIONS:
            if not self.path_for(collection).exists():
                logger.info("Creating empty collection %s", collection)
                self.write(collection, [])

    def read(self, collection: str) -> List[Record]:
        path = self.path_for(collection)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to read %s: %s", path, exc)
            raise StorageIOError(collection, str(exc)) from exc

        try:
            records = json.loads(raw)
        except ValueError as exc:
            logger.error("Collection %s is not valid JSON: %s", collection, exc)
            raise StorageFormatError(collection, f"invalid JSON ({exc})") from exc

        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            logger.error("Collection %s is not a JSON array of objects", collection)
            raise StorageFormatError(collection, "expected a JSON array of objects")

        return records

    def write(self, collection: str, records: List[Record]) -> None:
        """Replace the collection document with ``records``.

        The data is written to a temporary file next to the target and
        renamed over it, so an interrupted write leaves the previous
        document in place.
        """
        path = self.path_for(collection)
        try:
            payload = json.dumps(records, indent=2)
        except (TypeError, ValueError) as exc:
            raise StorageFormatError(collection, f"records are not serializable ({exc})") from exc

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{collection}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, path)
        except OSError as exc:
            logger.error("Failed to write %s: %s", path, exc)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageIOError(collection, str(exc)) from exc

        logger.debug("Wrote %d records to %s", len(records), collection)

    @contextmanager
    def lock(self, collection: str) -> Iterator[None]:
        """Hold the collection's lock for a read-modify-write cycle."""
        self.path_for(collection)
        with self._locks[collection]:
            yield


@lru_cache()
def _store_for(data_dir: str) -> JsonStore:
    return JsonStore(data_dir)


def get_store() -> JsonStore:
    """Return the process-wide store for the configured data directory."""
    return _store_for(get_settings().data_dir)


def init_db() -> JsonStore:
    """Initialize the configured store and return it."""
    store = get_store()
    store.initialize()
    return store
