"""Debt repayment simulation and strategy comparison engine."""

from debt_planner.comparison import (
    baseline_config,
    compare,
    compare_strategies,
    compare_to_baseline,
)
from debt_planner.dti import compute_dti, dti_for_debts
from debt_planner.exceptions import (
    DebtPlannerError,
    InvalidConfigurationError,
    NonConvergenceError,
)
from debt_planner.metrics import aggregate, build_timeline
from debt_planner.models import Debt, SimulationConfig, Strategy
from debt_planner.simulator import simulate, simulate_independently, simulate_records
from debt_planner.strategies import explain_order, resolve_order

__version__ = "0.1.0"

__all__ = [
    "Debt",
    "DebtPlannerError",
    "InvalidConfigurationError",
    "NonConvergenceError",
    "SimulationConfig",
    "Strategy",
    "__version__",
    "aggregate",
    "baseline_config",
    "build_timeline",
    "compare",
    "compare_strategies",
    "compare_to_baseline",
    "compute_dti",
    "dti_for_debts",
    "explain_order",
    "resolve_order",
    "simulate",
    "simulate_independently",
    "simulate_records",
]
