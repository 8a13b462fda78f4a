"""
Helpers shared by the record builders.
"""
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional


def new_id() -> str:
    """Collision-free opaque identifier."""
    return uuid.uuid4().hex


def new_code(prefix: str, taken: Iterable[str]) -> str:
    """Generate ``prefix`` + 10 uppercase hex characters not already in ``taken``."""
    taken = set(taken)
    while True:
        code = f"{prefix}{uuid.uuid4().hex[:10].upper()}"
        if code not in taken:
            return code


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def touch(previous: Optional[str]) -> str:
    """Timestamp for ``updatedAt`` that is strictly later than ``previous``."""
    now = datetime.now(timezone.utc)
    if previous:
        try:
            prev = datetime.fromisoformat(previous)
        except (TypeError, ValueError):
            prev = None
        if prev is not None and prev.tzinfo is not None and now <= prev:
            now = prev + timedelta(microseconds=1)
    return now.isoformat()


def to_decimal(value: Any) -> Decimal:
    """Coerce a loosely typed number, falling back to zero."""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal(0)
    return result if result.is_finite() else Decimal(0)


def to_float(value: Any) -> float:
    return float(to_decimal(value))


def to_int(value: Any) -> int:
    return int(to_decimal(value))
