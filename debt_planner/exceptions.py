"""Custom exception hierarchy for debt-planner."""


class DebtPlannerError(Exception):
    """Base exception for all debt-planner errors."""


class InvalidConfigurationError(DebtPlannerError):
    """Raised when a ledger or simulation config cannot be simulated.

    Covers out-of-range debt fields, a budget below the sum of minimum
    payments, and custom orders that are not a permutation of the active
    debt ids. Always raised before any period is simulated.
    """


class NonConvergenceError(DebtPlannerError):
    """Raised when a caller requires a converged plan and the run hit the safety bound."""

    def __init__(self, message: str, periods_simulated: int = 0) -> None:
        super().__init__(message)
        self.periods_simulated = periods_simulated
