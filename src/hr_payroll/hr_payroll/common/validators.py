from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError
from .periods import Period


def require_period(value: Any, field_name: str = "period") -> Period:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required (YYYY-MM)")
    return Period.parse(value)


def require_positive_int(value: Any, field_name: str) -> int:
    # bool is an int subclass, and True is not an id
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is invalid")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid")
    if number <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return number


def optional_positive_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    return require_positive_int(value, field_name)
