"""Synthetic ledger generators."""

from debt_planner.generators.base import BaseGenerator
from debt_planner.generators.debt import DebtGenerator

__all__ = ["BaseGenerator", "DebtGenerator"]
