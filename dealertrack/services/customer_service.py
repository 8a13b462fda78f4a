"""
Service layer for customer accounts.

``balance`` is set to zero at creation and is not touched by any
operation here; invoicing and payments live outside this service.
"""
from typing import Any, Dict, List, Optional

from dealertrack.database import CUSTOMERS, Record
from dealertrack.models.customer import build_customer, matches_search
from dealertrack.services.base import CollectionService


class CustomerService(CollectionService):
    collection = CUSTOMERS
    entity_name = "Customer"

    def build(self, data: Dict[str, Any], records: List[Record]) -> Record:
        return build_customer(data, (c.get("accountNumber") for c in records))

    def list(self, q: Optional[str] = None) -> List[Record]:
        customers = super().list()
        term = (q or "").strip()
        if not term:
            return customers
        return [c for c in customers if matches_search(c, term)]
