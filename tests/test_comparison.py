"""Tests for baseline and strategy comparisons."""

from decimal import Decimal

import pytest

from debt_planner.comparison import (
    baseline_config,
    compare,
    compare_strategies,
    compare_to_baseline,
)
from debt_planner.exceptions import InvalidConfigurationError
from debt_planner.models import Debt, SimulationConfig, Strategy


class TestBaselineConfig:
    """Tests for the minimum-payments-only plan."""

    def test_budget_and_order(self, two_debts) -> None:
        config = baseline_config(two_debts)

        assert config.monthly_budget == Decimal("75.00")
        assert config.strategy == Strategy.CUSTOM
        assert config.custom_order == ("a", "b")

    def test_paid_off_debts_excluded_from_budget(self, two_debts) -> None:
        done = Debt("c", Decimal("0"), Decimal("10"), Decimal("30"))
        assert baseline_config(two_debts + [done]).monthly_budget == Decimal("75.00")


class TestMinimumBudget:
    """A plan funded at exactly the sum of minimums."""

    @pytest.fixture
    def unsorted_ledger(self) -> list[Debt]:
        """Ledger order differs from both avalanche and snowball order."""
        return [
            Debt("low", Decimal("3000"), Decimal("5"), Decimal("300")),
            Debt("high", Decimal("5000"), Decimal("29"), Decimal("150")),
            Debt("mid", Decimal("800"), Decimal("15"), Decimal("100")),
        ]

    @pytest.mark.parametrize("strategy", [Strategy.AVALANCHE, Strategy.SNOWBALL])
    def test_matches_minimum_only_run_of_same_strategy(self, unsorted_ledger, strategy) -> None:
        plan = SimulationConfig(Decimal("550"), strategy)
        result = compare(unsorted_ledger, baseline_config(unsorted_ledger, strategy), plan)

        assert result.baseline_plan.monthly_payment == Decimal("550.00")
        assert result.interest_saved == Decimal("0")
        assert result.time_periods_saved == 0
        assert result.baseline_plan.records == result.optimized_plan.records

    def test_no_surplus_before_first_payoff(self, unsorted_ledger) -> None:
        minimums = {d.debt_id: d.monthly_minimum for d in unsorted_ledger}
        result = compare_to_baseline(unsorted_ledger, SimulationConfig(Decimal("550")))
        baseline = result.baseline_plan
        first_payoff = min(baseline.payoff_periods.values())

        for record in baseline.records:
            if record.period_index < first_payoff:
                assert record.payment_applied == minimums[record.debt_id]

    def test_default_baseline_rolls_over_in_ledger_order(self, unsorted_ledger) -> None:
        config = baseline_config(unsorted_ledger)
        result = compare(
            unsorted_ledger, config, SimulationConfig(Decimal("550"), Strategy.AVALANCHE)
        )

        assert config.strategy == Strategy.CUSTOM
        assert config.custom_order == ("low", "high", "mid")
        assert result.interest_saved > 0

    def test_custom_baseline_keeps_given_order(self, unsorted_ledger) -> None:
        config = baseline_config(unsorted_ledger, "custom", ("mid", "low", "high"))
        assert config.custom_order == ("mid", "low", "high")


class TestCompare:
    """Tests for compare() and compare_to_baseline()."""

    def test_identical_plans_save_nothing(self, two_debts) -> None:
        config = SimulationConfig(Decimal("100"), Strategy.AVALANCHE)
        result = compare(two_debts, config, config)

        assert result.time_periods_saved == 0
        assert result.interest_saved == Decimal("0")
        assert result.percentage_improvement == Decimal("0")

    def test_extra_budget_beats_baseline(self, two_debts) -> None:
        result = compare_to_baseline(two_debts, SimulationConfig(Decimal("100")))

        assert result.time_periods_saved > 0
        assert result.interest_saved > 0
        assert Decimal("0") < result.percentage_improvement < Decimal("100")
        assert result.baseline_plan.monthly_payment == Decimal("75.00")
        assert result.interest_saved == (
            result.baseline_plan.total_interest_paid - result.optimized_plan.total_interest_paid
        )

    def test_percentage_is_quantized(self, two_debts) -> None:
        result = compare_to_baseline(two_debts, SimulationConfig(Decimal("100")))
        assert result.percentage_improvement.as_tuple().exponent == -2

    def test_zero_interest_baseline(self) -> None:
        debts = [Debt("x", Decimal("500"), Decimal("0"), Decimal("50"))]
        result = compare_to_baseline(debts, SimulationConfig(Decimal("100")))

        assert result.interest_saved == Decimal("0")
        assert result.percentage_improvement == Decimal("0")
        assert result.time_periods_saved == 5

    def test_parallel_matches_sequential(self, two_debts) -> None:
        plan = SimulationConfig(Decimal("120"), Strategy.SNOWBALL)
        sequential = compare_to_baseline(two_debts, plan)
        parallel = compare_to_baseline(two_debts, plan, parallel=True)

        assert parallel.optimized_plan.records == sequential.optimized_plan.records
        assert parallel.baseline_plan.records == sequential.baseline_plan.records
        assert parallel.interest_saved == sequential.interest_saved

    def test_invalid_plan_raises(self, two_debts) -> None:
        with pytest.raises(InvalidConfigurationError):
            compare_to_baseline(two_debts, SimulationConfig(Decimal("10")))


class TestCompareStrategies:
    """Tests for the avalanche-versus-snowball report."""

    def test_avalanche_recommended(self, two_debts) -> None:
        result = compare_strategies(two_debts, Decimal("100"))

        assert result.avalanche.strategy == Strategy.AVALANCHE
        assert result.snowball.strategy == Strategy.SNOWBALL
        assert result.recommended == Strategy.AVALANCHE
        assert result.interest_difference > 0
        assert result.interest_difference == (
            result.snowball.total_interest_paid - result.avalanche.total_interest_paid
        )
        assert result.time_difference == (
            result.snowball.periods_to_payoff - result.avalanche.periods_to_payoff
        )

    def test_tie_recommends_avalanche(self) -> None:
        debts = [Debt("x", Decimal("600"), Decimal("0"), Decimal("50"))]
        result = compare_strategies(debts, Decimal("100"))

        assert result.interest_difference == Decimal("0")
        assert result.recommended == Strategy.AVALANCHE
