"""Simulation request and result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from debt_planner.exceptions import NonConvergenceError
from debt_planner.models.enums import Strategy
from debt_planner.money import ZERO, add_months


@dataclass(frozen=True)
class SimulationConfig:
    """Budget and payoff strategy for one simulation run."""

    monthly_budget: Decimal
    strategy: Strategy = Strategy.AVALANCHE
    custom_order: tuple[str, ...] | None = None


@dataclass(frozen=True)
class PeriodRecord:
    """Outcome of one billing period for one debt."""

    debt_id: str
    period_index: int  # 1, 2, 3, ...
    opening_balance: Decimal
    interest_accrued: Decimal
    payment_applied: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    closing_balance: Decimal


@dataclass
class SimulationResult:
    """Aggregate of a single simulation run.

    ``converged`` is False when the safety bound was reached before every
    balance hit zero; ``records`` then holds the partial trace and
    ``periods_to_payoff`` the number of periods simulated.
    """

    records: list[PeriodRecord]
    periods_to_payoff: int
    total_interest_paid: Decimal
    monthly_payment: Decimal
    converged: bool = True
    strategy: Strategy | None = None
    total_paid: Decimal = ZERO
    total_interest_accrued: Decimal = ZERO
    payoff_periods: dict[str, int] = field(default_factory=dict)

    @property
    def payoff_order(self) -> tuple[str, ...]:
        """Debt ids in the order they were paid off."""
        return tuple(sorted(self.payoff_periods, key=lambda debt_id: self.payoff_periods[debt_id]))

    def payoff_date(self, start: date) -> date | None:
        """Date the last debt is cleared when the plan starts on ``start``."""
        if not self.converged:
            return None
        return add_months(start, self.periods_to_payoff)

    def records_for(self, debt_id: str) -> list[PeriodRecord]:
        return [r for r in self.records if r.debt_id == debt_id]

    def ensure_converged(self) -> SimulationResult:
        """Return self, or raise NonConvergenceError for a truncated run."""
        if not self.converged:
            raise NonConvergenceError(
                f"Plan did not pay off within {self.periods_to_payoff} periods",
                periods_simulated=self.periods_to_payoff,
            )
        return self


@dataclass
class ComparisonResult:
    """Baseline plan versus optimized plan, with savings deltas."""

    baseline_plan: SimulationResult
    optimized_plan: SimulationResult
    time_periods_saved: int
    interest_saved: Decimal
    percentage_improvement: Decimal


@dataclass
class StrategyComparison:
    """Avalanche and snowball run side by side at the same budget."""

    avalanche: SimulationResult
    snowball: SimulationResult
    recommended: Strategy
    time_difference: int  # snowball periods minus avalanche periods
    interest_difference: Decimal  # snowball interest minus avalanche interest


@dataclass
class TimelineEntry:
    """Per-period roll-up of all debts in a plan."""

    period_index: int
    total_debt: Decimal
    payment: Decimal
    interest_paid: Decimal
    principal_paid: Decimal
    remaining_balance: Decimal


@dataclass
class PaymentOrderEntry:
    """Why a debt holds its position in a resolved payoff order."""

    debt_id: str
    name: str
    reason: str
