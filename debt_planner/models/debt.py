"""Debt ledger models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from debt_planner.models.enums import DebtType, PaymentFrequency
from debt_planner.money import ZERO, quantize, to_decimal

# Multipliers converting a periodic payment to its monthly equivalent
MONTHLY_FACTORS = {
    PaymentFrequency.WEEKLY: Decimal("4.33"),
    PaymentFrequency.BIWEEKLY: Decimal("2.17"),
    PaymentFrequency.MONTHLY: Decimal("1"),
    PaymentFrequency.QUARTERLY: Decimal("1") / Decimal("3"),
}


@dataclass(frozen=True)
class Debt:
    """One owed obligation, as a snapshot at simulation start.

    ``apr`` is a nominal annual percentage (24 means 24%), not a fraction.
    ``minimum_payment`` is expressed per ``payment_frequency``; the
    simulator works in monthly periods and reads ``monthly_minimum``.
    A minimum below the accrued interest is a legal input.
    """

    debt_id: str
    balance: Decimal
    apr: Decimal
    minimum_payment: Decimal
    due_date: date | None = None
    name: str = ""
    debt_type: DebtType = DebtType.OTHER
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    is_high_priority: bool = False

    @property
    def is_active(self) -> bool:
        return to_decimal(self.balance) > ZERO

    @property
    def monthly_minimum(self) -> Decimal:
        """Minimum payment converted to a monthly amount, in cents."""
        return quantize(to_decimal(self.minimum_payment) * MONTHLY_FACTORS[self.payment_frequency])

    @property
    def monthly_rate(self) -> Decimal:
        return to_decimal(self.apr) / Decimal("1200")

    @property
    def label(self) -> str:
        return self.name or self.debt_id


@dataclass
class DebtSummary:
    """Portfolio-level totals over the active debts of a ledger."""

    total_debt: Decimal
    total_minimum_payments: Decimal  # monthly equivalents
    average_interest_rate: Decimal
    debt_count: int
    high_priority_count: int
