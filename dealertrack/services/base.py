"""
Read-modify-write CRUD over one collection document.

Every operation loads the whole collection, changes an in-memory copy and
writes the whole collection back while holding the collection lock.
"""
import logging
from typing import Any, Dict, List

from dealertrack.database import JsonStore, Record
from dealertrack.exceptions import NotFoundError
from dealertrack.models.base import touch

logger = logging.getLogger(__name__)

# Never changed by an update, whatever the patch contains.
PROTECTED_FIELDS = ("id", "createdAt")


class CollectionService:
    """CRUD operations shared by parts, customers and service orders."""

    collection: str = ""
    entity_name: str = "Record"

    def __init__(self, store: JsonStore):
        self.store = store

    def build(self, data: Dict[str, Any], records: List[Record]) -> Record:
        raise NotImplementedError

    def after_merge(self, record: Record) -> Record:
        """Hook for recomputing derived fields after an update."""
        return record

    def list(self) -> List[Record]:
        return self.store.read(self.collection)

    def get(self, record_id: str) -> Record:
        for record in self.store.read(self.collection):
            if record.get("id") == record_id:
                return record
        raise NotFoundError(self.entity_name, record_id)

    def create(self, data: Dict[str, Any]) -> Record:
        with self.store.lock(self.collection):
            records = self.store.read(self.collection)
            record = self.build(data, records)
            records.append(record)
            self.store.write(self.collection, records)
        logger.info("Created %s %s", self.entity_name.lower(), record["id"])
        return record

    def update(self, record_id: str, patch: Dict[str, Any]) -> Record:
        with self.store.lock(self.collection):
            records = self.store.read(self.collection)
            for index, existing in enumerate(records):
                if existing.get("id") == record_id:
                    break
            else:
                raise NotFoundError(self.entity_name, record_id)

            changes = {k: v for k, v in patch.items() if k not in PROTECTED_FIELDS}
            merged = {**existing, **changes, "updatedAt": touch(existing.get("updatedAt"))}
            merged = self.after_merge(merged)
            records[index] = merged
            self.store.write(self.collection, records)
        logger.info("Updated %s %s (%s)", self.entity_name.lower(), record_id, ", ".join(sorted(changes)) or "no fields")
        return merged

    def delete(self, record_id: str) -> None:
        with self.store.lock(self.collection):
            records = self.store.read(self.collection)
            remaining = [r for r in records if r.get("id") != record_id]
            self.store.write(self.collection, remaining)
        if len(remaining) != len(records):
            logger.info("Deleted %s %s", self.entity_name.lower(), record_id)
