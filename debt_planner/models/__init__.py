"""Domain models for debt planning."""

from debt_planner.models.debt import Debt, DebtSummary
from debt_planner.models.dti import DtiResult
from debt_planner.models.enums import DebtType, DtiStatus, PaymentFrequency, Strategy
from debt_planner.models.simulation import (
    ComparisonResult,
    PaymentOrderEntry,
    PeriodRecord,
    SimulationConfig,
    SimulationResult,
    StrategyComparison,
    TimelineEntry,
)

__all__ = [
    "ComparisonResult",
    "Debt",
    "DebtSummary",
    "DebtType",
    "DtiResult",
    "DtiStatus",
    "PaymentFrequency",
    "PaymentOrderEntry",
    "PeriodRecord",
    "SimulationConfig",
    "SimulationResult",
    "Strategy",
    "StrategyComparison",
    "TimelineEntry",
]
