"""Baseline-versus-optimized plan comparison."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import Iterable

from debt_planner.ledger import total_minimum_payments, validate_debts
from debt_planner.models import (
    ComparisonResult,
    Debt,
    SimulationConfig,
    SimulationResult,
    Strategy,
    StrategyComparison,
)
from debt_planner.money import ZERO, quantize
from debt_planner.simulator import simulate
from debt_planner.strategies import coerce_strategy

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


def baseline_config(
    debts: Iterable[Debt],
    strategy: Strategy | str = Strategy.CUSTOM,
    custom_order: tuple[str, ...] | None = None,
) -> SimulationConfig:
    """Minimum-payments-only plan.

    The budget is the sum of monthly minimums, so no surplus exists until
    a debt is cleared; its freed minimum then rolls over by ``strategy``.
    By default that is the ledger's current ordering. Pass a plan's own
    strategy to get the minimum-only run of that plan.
    """
    ledger = list(debts)
    strategy = coerce_strategy(strategy)
    if strategy == Strategy.CUSTOM and custom_order is None:
        custom_order = tuple(d.debt_id for d in ledger)
    return SimulationConfig(
        monthly_budget=total_minimum_payments(ledger),
        strategy=strategy,
        custom_order=custom_order,
    )


def _savings(baseline: SimulationResult, optimized: SimulationResult) -> ComparisonResult:
    interest_saved = baseline.total_interest_paid - optimized.total_interest_paid
    if baseline.total_interest_paid > ZERO:
        improvement = quantize(interest_saved / baseline.total_interest_paid * HUNDRED)
    else:
        improvement = ZERO

    return ComparisonResult(
        baseline_plan=baseline,
        optimized_plan=optimized,
        time_periods_saved=baseline.periods_to_payoff - optimized.periods_to_payoff,
        interest_saved=interest_saved,
        percentage_improvement=improvement,
    )


def compare(
    debts: Iterable[Debt],
    baseline: SimulationConfig,
    optimized: SimulationConfig,
    *,
    max_periods: int | None = None,
    parallel: bool = False,
) -> ComparisonResult:
    """Simulate two plans from the same ledger snapshot and diff them.

    Parameters
    ----------
    debts : Iterable[Debt]
        Ledger snapshot shared by both runs.
    baseline : SimulationConfig
        Reference plan, usually :func:`baseline_config`.
    optimized : SimulationConfig
        Plan being evaluated.
    max_periods : int | None
        Safety bound passed to both runs.
    parallel : bool
        Run the two simulations on a two-worker thread pool.

    Returns
    -------
    ComparisonResult
        Positive savings mean the optimized plan is better.
    """
    ledger = validate_debts(debts)

    if parallel:
        with ThreadPoolExecutor(max_workers=2) as pool:
            baseline_future = pool.submit(simulate, ledger, baseline, max_periods=max_periods)
            optimized_future = pool.submit(simulate, ledger, optimized, max_periods=max_periods)
            baseline_plan = baseline_future.result()
            optimized_plan = optimized_future.result()
    else:
        baseline_plan = simulate(ledger, baseline, max_periods=max_periods)
        optimized_plan = simulate(ledger, optimized, max_periods=max_periods)

    result = _savings(baseline_plan, optimized_plan)
    logger.info(
        "Optimized plan saves %d periods and %s interest (%s%%)",
        result.time_periods_saved,
        result.interest_saved,
        result.percentage_improvement,
    )
    return result


def compare_to_baseline(
    debts: Iterable[Debt],
    optimized: SimulationConfig,
    *,
    max_periods: int | None = None,
    parallel: bool = False,
) -> ComparisonResult:
    """Compare a plan against the ledger's minimum-payments-only baseline."""
    ledger = list(debts)
    return compare(
        ledger,
        baseline_config(ledger),
        optimized,
        max_periods=max_periods,
        parallel=parallel,
    )


def compare_strategies(
    debts: Iterable[Debt],
    monthly_budget: Decimal,
    *,
    max_periods: int | None = None,
) -> StrategyComparison:
    """Run avalanche and snowball at the same budget.

    Avalanche is recommended unless snowball pays strictly less interest.
    """
    ledger = list(debts)
    avalanche = simulate(
        ledger, SimulationConfig(monthly_budget, Strategy.AVALANCHE), max_periods=max_periods
    )
    snowball = simulate(
        ledger, SimulationConfig(monthly_budget, Strategy.SNOWBALL), max_periods=max_periods
    )

    if snowball.total_interest_paid < avalanche.total_interest_paid:
        recommended = Strategy.SNOWBALL
    else:
        recommended = Strategy.AVALANCHE

    return StrategyComparison(
        avalanche=avalanche,
        snowball=snowball,
        recommended=recommended,
        time_difference=snowball.periods_to_payoff - avalanche.periods_to_payoff,
        interest_difference=snowball.total_interest_paid - avalanche.total_interest_paid,
    )
