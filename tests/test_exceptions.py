"""Tests for custom exception hierarchy."""

from debt_planner.exceptions import (
    DebtPlannerError,
    InvalidConfigurationError,
    NonConvergenceError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_debt_planner_error_is_exception(self) -> None:
        assert isinstance(DebtPlannerError("test"), Exception)

    def test_invalid_configuration_is_debt_planner_error(self) -> None:
        assert isinstance(InvalidConfigurationError("test"), DebtPlannerError)

    def test_non_convergence_is_debt_planner_error(self) -> None:
        assert isinstance(NonConvergenceError("test"), DebtPlannerError)

    def test_non_convergence_carries_periods(self) -> None:
        err = NonConvergenceError("stuck", periods_simulated=1200)
        assert err.periods_simulated == 1200
        assert str(err) == "stuck"

    def test_exception_message(self) -> None:
        err = InvalidConfigurationError("Monthly budget 50.00 does not cover minimum payments")
        assert str(err) == "Monthly budget 50.00 does not cover minimum payments"
