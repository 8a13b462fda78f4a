"""
Service layer for parts inventory.
"""
from typing import Any, Dict, List, Optional

from dealertrack.database import PARTS, Record
from dealertrack.models.part import build_part, matches_search
from dealertrack.services.base import CollectionService


class PartService(CollectionService):
    collection = PARTS
    entity_name = "Part"

    def build(self, data: Dict[str, Any], records: List[Record]) -> Record:
        return build_part(data)

    def list(self, q: Optional[str] = None) -> List[Record]:
        """Return all parts, optionally filtered by a case-insensitive
        substring of part number, name, manufacturer or category."""
        parts = super().list()
        term = (q or "").strip()
        if not term:
            return parts
        return [p for p in parts if matches_search(p, term)]
