"""Reductions from a period-by-period trace to summary figures."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from debt_planner.models import PeriodRecord, SimulationResult, Strategy, TimelineEntry
from debt_planner.money import ZERO


def aggregate(
    records: Iterable[PeriodRecord],
    *,
    monthly_payment: Decimal,
    strategy: Strategy | None = None,
    converged: bool = True,
) -> SimulationResult:
    """Reduce a simulation trace to a SimulationResult.

    Parameters
    ----------
    records : Iterable[PeriodRecord]
        Full trace, ordered by period.
    monthly_payment : Decimal
        Budget the trace was simulated with.
    strategy : Strategy | None
        Strategy used, carried through for reporting.
    converged : bool
        False when the trace stopped at the safety bound.

    Returns
    -------
    SimulationResult
        ``total_interest_paid`` is the sum of ``interest_portion`` over
        every record.
    """
    trace = list(records)
    total_interest = ZERO
    total_accrued = ZERO
    total_paid = ZERO
    last_period = 0
    payoff_periods: dict[str, int] = {}

    for record in trace:
        total_interest += record.interest_portion
        total_accrued += record.interest_accrued
        total_paid += record.payment_applied
        last_period = max(last_period, record.period_index)
        if record.closing_balance == ZERO and record.debt_id not in payoff_periods:
            payoff_periods[record.debt_id] = record.period_index

    return SimulationResult(
        records=trace,
        periods_to_payoff=last_period,
        total_interest_paid=total_interest,
        monthly_payment=monthly_payment,
        converged=converged,
        strategy=strategy,
        total_paid=total_paid,
        total_interest_accrued=total_accrued,
        payoff_periods=payoff_periods,
    )


def build_timeline(records: Iterable[PeriodRecord]) -> list[TimelineEntry]:
    """Roll a trace up into one entry per period across all debts."""
    timeline: dict[int, TimelineEntry] = {}
    for record in records:
        entry = timeline.get(record.period_index)
        if entry is None:
            entry = TimelineEntry(
                period_index=record.period_index,
                total_debt=ZERO,
                payment=ZERO,
                interest_paid=ZERO,
                principal_paid=ZERO,
                remaining_balance=ZERO,
            )
            timeline[record.period_index] = entry
        entry.total_debt += record.opening_balance
        entry.payment += record.payment_applied
        entry.interest_paid += record.interest_portion
        entry.principal_paid += record.principal_portion
        entry.remaining_balance += record.closing_balance

    return [timeline[period] for period in sorted(timeline)]
