"""Decimal helpers shared by the primitives, the engine and the calculators."""
from __future__ import annotations

import calendar
from datetime import date
from decimal import ROUND_HALF_EVEN, Decimal

CENT = Decimal("0.01")
ZERO = Decimal(0)


def as_decimal(value) -> Decimal:
    """Coerce ``value`` to Decimal.

    Floats go through ``str`` so ``6.5`` becomes ``Decimal("6.5")`` rather than
    its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def to_dollar(value) -> Decimal:
    """Round to cents with banker's rounding."""
    return as_decimal(value).quantize(CENT, rounding=ROUND_HALF_EVEN)


def add_months(start: date, months: int) -> date:
    """Shift ``start`` by whole calendar months, clamping to the month's last day."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
