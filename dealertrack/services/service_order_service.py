"""
Service layer for service (repair) orders.

Totals are derived, never stored from input: ``subtotal``, ``tax`` and
``total`` are recomputed from ``partsUsed`` and ``laborLines`` on every
create and every update.  On update the line items come from the merged
record, so an update that omits them keeps the stored ones and their
totals.
"""
from typing import Any, Dict, List, Optional

from dealertrack.database import SERVICE_ORDERS, Record
from dealertrack.models.service_order import apply_totals, build_service_order
from dealertrack.services.base import CollectionService


class ServiceOrderService(CollectionService):
    collection = SERVICE_ORDERS
    entity_name = "Service order"

    def build(self, data: Dict[str, Any], records: List[Record]) -> Record:
        return build_service_order(data, (o.get("roNumber") for o in records))

    def after_merge(self, record: Record) -> Record:
        return apply_totals(record)

    def list(self, status: Optional[str] = None) -> List[Record]:
        """Return all orders, or only those whose status equals ``status``."""
        orders = super().list()
        if not status or status == "all":
            return orders
        return [o for o in orders if o.get("status") == status]
