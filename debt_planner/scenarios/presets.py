"""Preset payoff plans built from the user's current monthly payment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from debt_planner.comparison import compare_to_baseline
from debt_planner.ledger import total_minimum_payments
from debt_planner.models import ComparisonResult, Debt, SimulationConfig, Strategy
from debt_planner.money import quantize, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanPreset:
    """A named budget multiplier paired with a strategy."""

    name: str
    description: str
    budget_multiplier: Decimal
    strategy: Strategy

    def build_config(self, current_budget: Decimal) -> SimulationConfig:
        """Scale the current budget by this preset's multiplier."""
        budget = quantize(to_decimal(current_budget) * self.budget_multiplier)
        return SimulationConfig(monthly_budget=budget, strategy=self.strategy)


AGGRESSIVE = PlanPreset(
    name="aggressive",
    description="Maximum payment, fastest debt freedom",
    budget_multiplier=Decimal("1.5"),
    strategy=Strategy.AVALANCHE,
)
BALANCED = PlanPreset(
    name="balanced",
    description="Moderate increase, sustainable pace",
    budget_multiplier=Decimal("1.2"),
    strategy=Strategy.SNOWBALL,
)
CONSERVATIVE = PlanPreset(
    name="conservative",
    description="Minimal increase, steady progress",
    budget_multiplier=Decimal("1.1"),
    strategy=Strategy.SNOWBALL,
)

PRESETS = {preset.name: preset for preset in (AGGRESSIVE, BALANCED, CONSERVATIVE)}


def run_presets(
    debts: Iterable[Debt],
    current_budget: Decimal | None = None,
    *,
    max_periods: int | None = None,
) -> dict[str, ComparisonResult]:
    """Compare every preset against the minimum-payments-only baseline.

    Parameters
    ----------
    debts : Iterable[Debt]
        Ledger snapshot.
    current_budget : Decimal | None
        What the user pays today; defaults to the sum of minimums.
    max_periods : int | None
        Safety bound for every run.

    Returns
    -------
    dict[str, ComparisonResult]
        Keyed by preset name.
    """
    ledger = list(debts)
    if current_budget is None:
        current_budget = total_minimum_payments(ledger)

    results = {}
    for name, preset in PRESETS.items():
        logger.info("Running %s preset (%s)", name, preset.description)
        results[name] = compare_to_baseline(
            ledger, preset.build_config(current_budget), max_periods=max_periods
        )
    return results
