"""Tests for the payoff strategy resolver."""

from decimal import Decimal

import pytest

from debt_planner.exceptions import InvalidConfigurationError
from debt_planner.models import Debt, Strategy
from debt_planner.strategies import (
    coerce_strategy,
    explain_order,
    resolve_order,
    validate_custom_order,
)


def _debt(debt_id: str, balance: str, apr: str, minimum: str = "10") -> Debt:
    return Debt(
        debt_id=debt_id,
        balance=Decimal(balance),
        apr=Decimal(apr),
        minimum_payment=Decimal(minimum),
    )


class TestAvalanche:
    """Highest APR first."""

    def test_orders_by_apr_descending(self) -> None:
        debts = [_debt("low", "100", "5"), _debt("high", "100", "25"), _debt("mid", "100", "15")]
        assert resolve_order(debts, Strategy.AVALANCHE) == ["high", "mid", "low"]

    def test_apr_tie_prefers_larger_balance(self) -> None:
        debts = [_debt("small", "100", "18"), _debt("big", "900", "18")]
        assert resolve_order(debts, Strategy.AVALANCHE) == ["big", "small"]

    def test_full_tie_breaks_on_id(self) -> None:
        debts = [_debt("z", "100", "18"), _debt("m", "100", "18"), _debt("a", "100", "18")]
        assert resolve_order(debts, Strategy.AVALANCHE) == ["a", "m", "z"]


class TestSnowball:
    """Smallest balance first."""

    def test_orders_by_balance_ascending(self) -> None:
        debts = [_debt("big", "5000", "5"), _debt("small", "200", "5"), _debt("mid", "900", "5")]
        assert resolve_order(debts, Strategy.SNOWBALL) == ["small", "mid", "big"]

    def test_balance_tie_prefers_higher_apr(self) -> None:
        debts = [_debt("cheap", "300", "4"), _debt("pricey", "300", "22")]
        assert resolve_order(debts, Strategy.SNOWBALL) == ["pricey", "cheap"]

    def test_full_tie_breaks_on_id(self) -> None:
        debts = [_debt("b", "300", "4"), _debt("a", "300", "4")]
        assert resolve_order(debts, Strategy.SNOWBALL) == ["a", "b"]


class TestCustom:
    """Caller-supplied order."""

    def test_preserves_order_and_drops_inactive(self) -> None:
        debts = [_debt("a", "100", "5"), _debt("c", "100", "5")]
        assert resolve_order(debts, Strategy.CUSTOM, ("c", "b", "a")) == ["c", "a"]

    def test_missing_active_id(self) -> None:
        debts = [_debt("a", "100", "5"), _debt("b", "100", "5")]
        with pytest.raises(InvalidConfigurationError, match="missing"):
            resolve_order(debts, Strategy.CUSTOM, ("a",))

    def test_requires_order(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            resolve_order([_debt("a", "100", "5")], Strategy.CUSTOM)

    def test_string_strategy_accepted(self) -> None:
        debts = [_debt("a", "100", "5"), _debt("b", "50", "5")]
        assert resolve_order(debts, "snowball") == ["b", "a"]

    def test_unknown_strategy(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="hybrid"):
            coerce_strategy("hybrid")


class TestValidateCustomOrder:
    """Upfront permutation check."""

    def test_valid_permutation(self) -> None:
        debts = [_debt("a", "100", "5"), _debt("b", "100", "5")]
        validate_custom_order(debts, ("b", "a"))

    def test_paid_off_debt_may_be_omitted(self) -> None:
        debts = [_debt("a", "100", "5"), _debt("done", "0", "5")]
        validate_custom_order(debts, ("a",))

    def test_duplicates(self) -> None:
        debts = [_debt("a", "100", "5"), _debt("b", "100", "5")]
        with pytest.raises(InvalidConfigurationError, match="duplicate"):
            validate_custom_order(debts, ("a", "b", "a"))

    def test_unknown_id(self) -> None:
        debts = [_debt("a", "100", "5")]
        with pytest.raises(InvalidConfigurationError, match="unknown"):
            validate_custom_order(debts, ("a", "ghost"))

    def test_missing_active_id(self) -> None:
        debts = [_debt("a", "100", "5"), _debt("b", "100", "5")]
        with pytest.raises(InvalidConfigurationError, match="missing"):
            validate_custom_order(debts, ("b",))

    def test_none(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            validate_custom_order([_debt("a", "100", "5")], None)


class TestExplainOrder:
    """Human-readable reasons for a resolved order."""

    def test_avalanche_reasons(self, two_debts) -> None:
        entries = explain_order(two_debts, Strategy.AVALANCHE)

        assert [e.debt_id for e in entries] == ["a", "b"]
        assert entries[0].name == "Card A"
        assert entries[0].reason == "Highest APR (24.00%)"
        assert entries[1].reason == "APR rank 2 (12.00%)"

    def test_snowball_reasons(self, two_debts) -> None:
        entries = explain_order(two_debts, Strategy.SNOWBALL)

        assert [e.debt_id for e in entries] == ["b", "a"]
        assert entries[0].reason == "Smallest balance (500.00)"

    def test_custom_reasons_skip_paid_off(self, two_debts) -> None:
        ledger = two_debts + [_debt("c", "0", "5")]
        entries = explain_order(ledger, "custom", ("b", "c", "a"))

        assert [e.reason for e in entries] == ["Custom priority 1", "Custom priority 2"]
        assert [e.debt_id for e in entries] == ["b", "a"]
