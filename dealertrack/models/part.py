"""
Part records.
"""
from typing import Any, Dict

from dealertrack.models.base import new_id, to_float, to_int, utc_now

SEARCH_FIELDS = ("partNumber", "name", "manufacturer", "category")


def build_part(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a new part record.

    Numeric fields are coerced; absent or non-numeric values become 0.
    """
    now = utc_now()
    return {
        "id": new_id(),
        "name": data.get("name"),
        "partNumber": data.get("partNumber"),
        "manufacturer": data.get("manufacturer"),
        "category": data.get("category"),
        "location": data.get("location"),
        "laborTime": to_float(data.get("laborTime")),
        "quantity": to_int(data.get("quantity")),
        "minStock": to_int(data.get("minStock")),
        "dealerCost": to_float(data.get("dealerCost")),
        "laborCost": to_float(data.get("laborCost")),
        "salesCost": to_float(data.get("salesCost")),
        "retailPrice": to_float(data.get("retailPrice")),
        "createdAt": now,
        "updatedAt": now,
    }


def is_low_stock(part: Dict[str, Any]) -> bool:
    """True when on-hand quantity is at or below the reorder threshold.

    Parts missing either field, or holding a non-numeric value in one,
    are never low stock.
    """
    quantity = part.get("quantity")
    min_stock = part.get("minStock")
    if not _is_number(quantity) or not _is_number(min_stock):
        return False
    return quantity <= min_stock


def matches_search(part: Dict[str, Any], term: str) -> bool:
    term = term.lower()
    return any(
        isinstance(part.get(field), str) and term in part[field].lower()
        for field in SEARCH_FIELDS
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
