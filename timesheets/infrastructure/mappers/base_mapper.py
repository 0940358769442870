"""
Shared conversion helpers for mappers.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Mapping, Optional


def to_storage_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to the naive UTC form stored in the database."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_storage_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """Convert a stored naive UTC datetime back to an aware one."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_decimal(value: Any, default: str = "0") -> Decimal:
    if value is None or value == "":
        return Decimal(default)
    return value if isinstance(value, Decimal) else Decimal(str(value))


def to_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()


def pick(row: Mapping[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    """
    Read a field from a raw row under either naming convention.
    Missing and falsy values fall through to the other spelling.
    """
    value = row.get(snake)
    if value is None or value == "":
        value = row.get(camel)
    return default if value is None else value
