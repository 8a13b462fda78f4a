"""
Customer (account) records.
"""
from typing import Any, Dict, Iterable

from dealertrack.models.base import new_code, new_id, to_float, utc_now

ACCOUNT_PREFIX = "ACC"
SEARCH_FIELDS = ("accountNumber", "name", "email", "company", "phone")


def build_customer(data: Dict[str, Any], existing_numbers: Iterable[str]) -> Dict[str, Any]:
    """Return a new customer record.

    ``accountNumber`` is kept when supplied, otherwise generated so that
    it does not clash with ``existing_numbers``.  ``balance`` always
    starts at zero.
    """
    now = utc_now()
    return {
        "id": new_id(),
        "accountNumber": data.get("accountNumber") or new_code(ACCOUNT_PREFIX, existing_numbers),
        "type": data.get("type"),
        "name": data.get("name"),
        "company": data.get("company"),
        "email": data.get("email"),
        "phone": data.get("phone"),
        "address": data.get("address"),
        "city": data.get("city"),
        "state": data.get("state"),
        "zip": data.get("zip"),
        "taxExempt": bool(data.get("taxExempt", False)),
        "creditLimit": to_float(data.get("creditLimit")),
        "balance": 0.0,
        "notes": data.get("notes"),
        "createdAt": now,
        "updatedAt": now,
    }


def matches_search(customer: Dict[str, Any], term: str) -> bool:
    term = term.lower()
    return any(
        isinstance(customer.get(field), str) and term in customer[field].lower()
        for field in SEARCH_FIELDS
    )
