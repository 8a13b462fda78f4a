"""
Service layer for dashboard statistics.

All figures are recomputed from the stored collections on every call;
nothing is cached and nothing is written.
"""
from decimal import Decimal
from typing import Any, Dict, List

from dealertrack.database import CUSTOMERS, PARTS, SERVICE_ORDERS, JsonStore, Record
from dealertrack.models.base import to_decimal
from dealertrack.models.part import is_low_stock
from dealertrack.models.service_order import ServiceOrderStatus


class DashboardService:
    """Read-only aggregates over parts, customers and service orders."""

    def __init__(self, store: JsonStore):
        self.store = store

    def get_dashboard_stats(self) -> Dict[str, Any]:
        """Return the headline counts and cumulative revenue.

        ``lowStockParts`` counts parts with ``quantity <= minStock`` where
        both values are present.  ``openServiceOrders`` counts orders whose
        status is exactly ``"Open"``.  ``totalRevenue`` sums ``total`` over
        every order ever stored.
        """
        parts = self.store.read(PARTS)
        customers = self.store.read(CUSTOMERS)
        orders = self.store.read(SERVICE_ORDERS)

        revenue = sum((to_decimal(o.get("total")) for o in orders), Decimal(0))
        return {
            "totalParts": len(parts),
            "lowStockParts": sum(1 for p in parts if is_low_stock(p)),
            "totalCustomers": len(customers),
            "openServiceOrders": sum(1 for o in orders if o.get("status") == ServiceOrderStatus.OPEN.value),
            "totalServiceOrders": len(orders),
            "totalRevenue": float(revenue),
        }

    def recent_service_orders(self, limit: int = 5) -> List[Record]:
        """The last ``limit`` orders created, newest first."""
        if limit <= 0:
            return []
        orders = self.store.read(SERVICE_ORDERS)
        return list(reversed(orders[-limit:]))

    def low_stock_parts(self) -> List[Record]:
        return [p for p in self.store.read(PARTS) if is_low_stock(p)]
