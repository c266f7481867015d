"""Debt-to-income ratio calculator."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable

from debt_planner.models import Debt, DebtType, DtiResult, DtiStatus
from debt_planner.money import ZERO, quantize, to_decimal

HUNDRED = Decimal("100")

# (healthy upper bound, caution upper bound), inclusive, in percent
FRONTEND_THRESHOLDS = (Decimal("28"), Decimal("36"))
BACKEND_THRESHOLDS = (Decimal("36"), Decimal("44"))


def classify(ratio: Decimal, thresholds: tuple[Decimal, Decimal]) -> DtiStatus:
    healthy, caution = thresholds
    if ratio <= healthy:
        return DtiStatus.HEALTHY
    if ratio <= caution:
        return DtiStatus.CAUTION
    return DtiStatus.DANGER


def _ratio(payments: Decimal, income: Decimal) -> Decimal:
    if income <= ZERO:
        return ZERO
    return payments / income * HUNDRED


def compute_dti(
    monthly_income: Any,
    total_monthly_debt_payments: Any,
    housing_payments: Any,
) -> DtiResult:
    """Compute front-end and back-end DTI and classify both.

    Parameters
    ----------
    monthly_income : Decimal | int | float | str
        Gross monthly income. Ratios are 0 when this is 0 or negative.
    total_monthly_debt_payments : Decimal | int | float | str
        All monthly debt obligations, housing included.
    housing_payments : Decimal | int | float | str
        Monthly housing payments.

    Returns
    -------
    DtiResult
        Ratios rounded to two decimals. Classification uses the
        unrounded ratio.
    """
    income = to_decimal(monthly_income)
    total = to_decimal(total_monthly_debt_payments)
    housing = to_decimal(housing_payments)

    frontend = _ratio(housing, income)
    backend = _ratio(total, income)

    return DtiResult(
        frontend_dti=quantize(frontend),
        backend_dti=quantize(backend),
        frontend_status=classify(frontend, FRONTEND_THRESHOLDS),
        backend_status=classify(backend, BACKEND_THRESHOLDS),
        monthly_income=income,
        total_monthly_debt_payments=total,
        housing_payments=housing,
    )


def dti_for_debts(debts: Iterable[Debt], monthly_income: Any) -> DtiResult:
    """DTI from a ledger, using monthly-equivalent minimums of active debts.

    Home loans count as housing payments.
    """
    active = [d for d in debts if d.is_active]
    total = sum((d.monthly_minimum for d in active), ZERO)
    housing = sum((d.monthly_minimum for d in active if d.debt_type == DebtType.HOME_LOAN), ZERO)
    return compute_dti(monthly_income, total, housing)
