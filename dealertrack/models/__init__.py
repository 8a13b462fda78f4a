"""
Record builders and derived-field helpers for stored entities.
"""
from dealertrack.models.part import build_part, is_low_stock
from dealertrack.models.customer import build_customer
from dealertrack.models.service_order import (
    ServiceOrderStatus,
    TAX_RATE,
    apply_totals,
    build_service_order,
    compute_totals,
)

__all__ = [
    "build_part", "is_low_stock",
    "build_customer",
    "ServiceOrderStatus", "TAX_RATE", "apply_totals", "build_service_order", "compute_totals",
]
