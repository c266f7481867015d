"""Debt-to-income result model."""

from dataclasses import dataclass
from decimal import Decimal

from debt_planner.models.enums import DtiStatus


@dataclass
class DtiResult:
    """Front-end (housing) and back-end (all debt) ratios, in percent."""

    frontend_dti: Decimal
    backend_dti: Decimal
    frontend_status: DtiStatus
    backend_status: DtiStatus
    monthly_income: Decimal
    total_monthly_debt_payments: Decimal
    housing_payments: Decimal

    @property
    def is_healthy(self) -> bool:
        return self.backend_status == DtiStatus.HEALTHY
