"""Decimal helpers for currency arithmetic."""

import calendar
from datetime import date
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from debt_planner.exceptions import InvalidConfigurationError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value: Any) -> Decimal:
    """Convert int, float, str or Decimal to a finite Decimal without float drift."""
    if isinstance(value, bool):
        raise InvalidConfigurationError(f"Expected a number, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidConfigurationError(f"Expected a number, got {value!r}") from exc
    if not amount.is_finite():
        raise InvalidConfigurationError(f"Expected a finite number, got {value!r}")
    return amount


def quantize(amount: Decimal, exp: Decimal = CENT) -> Decimal:
    """Round to the given exponent (cents by default), half up."""
    return amount.quantize(exp, rounding=ROUND_HALF_UP)


def floor_cents(amount: Decimal) -> Decimal:
    """Truncate to whole cents, never rounding a budget up."""
    return amount.quantize(CENT, rounding=ROUND_DOWN)


def snap_to_zero(amount: Decimal) -> Decimal:
    """Return zero for amounts within one minor unit of zero."""
    if abs(amount) < CENT:
        return ZERO
    return amount


def add_months(start: date, months: int) -> date:
    """Add calendar months, clamping the day to the target month's length."""
    year = start.year + (start.month - 1 + months) // 12
    month = (start.month - 1 + months) % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
