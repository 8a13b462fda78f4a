"""
Service (repair) order records and their derived totals.
"""
import enum
from decimal import Decimal
from typing import Any, Dict, Iterable, List

from dealertrack.models.base import new_code, new_id, to_decimal, utc_now

RO_PREFIX = "RO"
TAX_RATE = Decimal("0.0825")


class ServiceOrderStatus(str, enum.Enum):
    """Statuses offered by the UI. Stored status is free-form."""
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    WAITING_PARTS = "Waiting Parts"
    COMPLETED = "Completed"


def compute_totals(parts_used: Iterable[Dict[str, Any]], labor_lines: Iterable[Dict[str, Any]]) -> Dict[str, float]:
    """Return ``subtotal``, ``tax`` and ``total`` for the given line items.

    subtotal = sum(price * quantity) + sum(rate * hours)
    tax = subtotal * TAX_RATE
    total = subtotal + tax
    """
    parts_total = sum(
        (to_decimal(line.get("price")) * to_decimal(line.get("quantity")) for line in parts_used or ()),
        Decimal(0),
    )
    labor_total = sum(
        (to_decimal(line.get("rate")) * to_decimal(line.get("hours")) for line in labor_lines or ()),
        Decimal(0),
    )
    subtotal = parts_total + labor_total
    tax = subtotal * TAX_RATE
    return {
        "subtotal": float(subtotal),
        "tax": float(tax),
        "total": float(subtotal + tax),
    }


def apply_totals(order: Dict[str, Any]) -> Dict[str, Any]:
    """Overwrite the order's derived fields from its own line items."""
    order["partsUsed"] = order.get("partsUsed") or []
    order["laborLines"] = order.get("laborLines") or []
    order.update(compute_totals(order["partsUsed"], order["laborLines"]))
    return order


def build_service_order(data: Dict[str, Any], existing_numbers: Iterable[str]) -> Dict[str, Any]:
    now = utc_now()
    parts_used: List[Dict[str, Any]] = data.get("partsUsed") or []
    labor_lines: List[Dict[str, Any]] = data.get("laborLines") or []
    order = {
        "id": new_id(),
        "roNumber": data.get("roNumber") or new_code(RO_PREFIX, existing_numbers),
        "customerId": data.get("customerId"),
        "customerName": data.get("customerName"),
        "vehicle": data.get("vehicle"),
        "vin": data.get("vin"),
        "mileage": data.get("mileage"),
        "status": data.get("status") or ServiceOrderStatus.OPEN.value,
        "serviceAdvisor": data.get("serviceAdvisor"),
        "technician": data.get("technician"),
        "concerns": data.get("concerns"),
        "partsUsed": parts_used,
        "laborLines": labor_lines,
        "subtotal": 0.0,
        "tax": 0.0,
        "total": 0.0,
        "promisedDate": data.get("promisedDate"),
        "createdAt": now,
        "updatedAt": now,
    }
    return apply_totals(order)
