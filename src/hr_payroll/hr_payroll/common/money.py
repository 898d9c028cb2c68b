from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from ..core.constants import MONEY_QUANTUM

Number = Union[int, float, str, Decimal, None]


def to_money(value: Number) -> Decimal:
    """Convert a stored/submitted amount to Decimal (None -> 0).

    Floats go through ``str`` so 0.1 stays 0.1 instead of its binary expansion.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_money(value: Number) -> Decimal:
    """Round half-up to two decimal places."""
    return to_money(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def money_to_float(value: Decimal) -> float:
    return float(round_money(value))
