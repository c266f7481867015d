"""Payoff strategy ordering.

The resolver decides which debt receives the monthly surplus first. It is
called again every period by the simulator, so that when a debt is cleared
the surplus rolls over to the next target in the re-evaluated order.

Anything with ``debt_id``, ``balance`` and ``apr`` attributes can be
ordered: :class:`~debt_planner.models.Debt` snapshots as well as the
simulator's running balances.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from debt_planner.exceptions import InvalidConfigurationError
from debt_planner.models import PaymentOrderEntry, Strategy


def _avalanche_key(debt: Any) -> tuple:
    return (-debt.apr, -debt.balance, debt.debt_id)


def _snowball_key(debt: Any) -> tuple:
    return (debt.balance, -debt.apr, debt.debt_id)


def coerce_strategy(strategy: Strategy | str) -> Strategy:
    """Accept a Strategy or its string value."""
    try:
        return Strategy(strategy)
    except ValueError as exc:
        raise InvalidConfigurationError(f"Unknown payoff strategy {strategy!r}") from exc


def validate_custom_order(debts: Iterable[Any], custom_order: Sequence[str] | None) -> None:
    """Check that a custom order is a permutation covering every active debt.

    Ids of debts already at zero balance may appear in the order or not;
    ids that are not in the ledger, repeated ids and missing active ids
    are rejected.
    """
    if custom_order is None:
        raise InvalidConfigurationError("Custom strategy requires a custom_order")

    ledger_ids = {d.debt_id for d in debts}
    active_ids = {d.debt_id for d in debts if d.balance > 0}

    if len(set(custom_order)) != len(custom_order):
        raise InvalidConfigurationError("custom_order contains duplicate debt ids")
    unknown = [debt_id for debt_id in custom_order if debt_id not in ledger_ids]
    if unknown:
        raise InvalidConfigurationError(f"custom_order references unknown debt ids: {unknown}")
    missing = sorted(active_ids.difference(custom_order))
    if missing:
        raise InvalidConfigurationError(f"custom_order is missing active debt ids: {missing}")


def resolve_order(
    active_debts: Iterable[Any],
    strategy: Strategy | str,
    custom_order: Sequence[str] | None = None,
) -> list[str]:
    """Return debt ids in surplus-priority order.

    Parameters
    ----------
    active_debts : Iterable
        Debts still carrying a balance.
    strategy : Strategy | str
        ``avalanche``, ``snowball`` or ``custom``.
    custom_order : Sequence[str] | None
        Priority order, required for ``custom``.

    Returns
    -------
    list[str]
        Ordered debt ids. Ties are broken deterministically, ending on
        the debt id.
    """
    debts = list(active_debts)
    strategy = coerce_strategy(strategy)

    if strategy == Strategy.AVALANCHE:
        return [d.debt_id for d in sorted(debts, key=_avalanche_key)]
    if strategy == Strategy.SNOWBALL:
        return [d.debt_id for d in sorted(debts, key=_snowball_key)]

    if custom_order is None:
        raise InvalidConfigurationError("Custom strategy requires a custom_order")
    active_ids = {d.debt_id for d in debts}
    missing = sorted(active_ids.difference(custom_order))
    if missing:
        raise InvalidConfigurationError(f"custom_order is missing active debt ids: {missing}")
    return [debt_id for debt_id in custom_order if debt_id in active_ids]


def explain_order(
    debts: Iterable[Any],
    strategy: Strategy | str,
    custom_order: Sequence[str] | None = None,
) -> list[PaymentOrderEntry]:
    """Describe the resolved order of the active debts, one reason per position."""
    active = [d for d in debts if d.balance > 0]
    by_id = {d.debt_id: d for d in active}
    strategy = coerce_strategy(strategy)
    order = resolve_order(active, strategy, custom_order)

    entries = []
    for position, debt_id in enumerate(order, start=1):
        debt = by_id[debt_id]
        if strategy == Strategy.AVALANCHE:
            lead = "Highest APR" if position == 1 else f"APR rank {position}"
            reason = f"{lead} ({debt.apr:.2f}%)"
        elif strategy == Strategy.SNOWBALL:
            lead = "Smallest balance" if position == 1 else f"Balance rank {position}"
            reason = f"{lead} ({debt.balance:.2f})"
        else:
            reason = f"Custom priority {position}"
        entries.append(
            PaymentOrderEntry(
                debt_id=debt_id,
                name=getattr(debt, "name", "") or debt_id,
                reason=reason,
            )
        )
    return entries
