"""Debt ledger validation, normalization and summaries."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Iterable

from debt_planner.exceptions import InvalidConfigurationError
from debt_planner.models import Debt, DebtSummary, DebtType, PaymentFrequency
from debt_planner.money import ZERO, quantize, to_decimal

MAX_APR = Decimal("100")


def validate_debts(debts: Iterable[Debt]) -> list[Debt]:
    """Range-check a ledger and return it as a list.

    Raises
    ------
    InvalidConfigurationError
        On duplicate ids, negative balances, an APR outside ``[0, 100)``
        or a non-positive minimum payment on a debt with a balance.
    """
    ledger = list(debts)
    seen: set[str] = set()
    for debt in ledger:
        if not debt.debt_id:
            raise InvalidConfigurationError("Debt id must be a non-empty string")
        if debt.debt_id in seen:
            raise InvalidConfigurationError(f"Duplicate debt id {debt.debt_id!r}")
        seen.add(debt.debt_id)

        balance = to_decimal(debt.balance)
        apr = to_decimal(debt.apr)
        minimum = to_decimal(debt.minimum_payment)
        if balance < ZERO:
            raise InvalidConfigurationError(
                f"Debt {debt.debt_id!r} has a negative balance ({balance})"
            )
        if not ZERO <= apr < MAX_APR:
            raise InvalidConfigurationError(
                f"Debt {debt.debt_id!r} APR must be in [0, 100), got {apr}"
            )
        if balance > ZERO and minimum <= ZERO:
            raise InvalidConfigurationError(
                f"Debt {debt.debt_id!r} needs a positive minimum payment while it has a balance"
            )
    return ledger


def active_debts(debts: Iterable[Debt]) -> list[Debt]:
    return [d for d in debts if d.is_active]


def total_minimum_payments(debts: Iterable[Debt]) -> Decimal:
    """Sum of monthly-equivalent minimums over debts with a balance."""
    return sum((d.monthly_minimum for d in debts if d.is_active), ZERO)


def summarize_debts(debts: Iterable[Debt]) -> DebtSummary:
    """Compute portfolio totals for the active debts in a ledger."""
    active = active_debts(debts)
    if active:
        average_rate = quantize(sum((to_decimal(d.apr) for d in active), ZERO) / len(active))
    else:
        average_rate = ZERO

    return DebtSummary(
        total_debt=sum((to_decimal(d.balance) for d in active), ZERO),
        total_minimum_payments=total_minimum_payments(active),
        average_interest_rate=average_rate,
        debt_count=len(active),
        high_priority_count=sum(1 for d in active if d.is_high_priority),
    )


def _pick(row: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if row.get(key) is not None:
            return row[key]
    return None


def debts_from_dicts(rows: Iterable[dict[str, Any]]) -> list[Debt]:
    """Build a ledger from loosely-shaped JSON rows.

    Accepts the dashboard's field names (``id``, ``current_balance``,
    ``interest_rate``) as well as the model's own.
    """
    debts = []
    for position, row in enumerate(rows):
        if not isinstance(row, dict):
            raise InvalidConfigurationError(f"Debt row {position} must be an object")
        debt_id = _pick(row, "debt_id", "id")
        balance = _pick(row, "balance", "current_balance")
        apr = _pick(row, "apr", "interest_rate")
        minimum = _pick(row, "minimum_payment", "min_payment")
        if debt_id is None or balance is None or minimum is None:
            raise InvalidConfigurationError(
                f"Debt row {position} needs an id, a balance and a minimum payment"
            )

        due_date = row.get("due_date")
        try:
            debt = Debt(
                debt_id=str(debt_id),
                balance=to_decimal(balance),
                apr=to_decimal(apr if apr is not None else 0),
                minimum_payment=to_decimal(minimum),
                due_date=date.fromisoformat(due_date) if due_date else None,
                name=row.get("name", ""),
                debt_type=DebtType(row.get("debt_type", DebtType.OTHER.value)),
                payment_frequency=PaymentFrequency(
                    row.get("payment_frequency", PaymentFrequency.MONTHLY.value)
                ),
                is_high_priority=bool(row.get("is_high_priority", False)),
            )
        except ValueError as exc:
            raise InvalidConfigurationError(f"Debt row {position}: {exc}") from exc
        debts.append(debt)

    return validate_debts(debts)
