"""Synthetic debt ledger generator."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from debt_planner.generators.base import BaseGenerator
from debt_planner.models import Debt, DebtType
from debt_planner.money import quantize


class DebtGenerator(BaseGenerator):
    """Generate realistic debts for demos and property tests.

    Minimum payments always exceed the first month's interest by at
    least 1% of the balance, so a minimum-only plan pays every debt off.
    """

    DEBT_TYPES = [
        DebtType.CREDIT_CARD,
        DebtType.PERSONAL_LOAN,
        DebtType.VEHICLE_LOAN,
        DebtType.EDUCATION_LOAN,
        DebtType.HOME_LOAN,
        DebtType.OVERDRAFT,
    ]
    TYPE_WEIGHTS = [0.35, 0.20, 0.15, 0.12, 0.08, 0.10]

    # (balance range, APR range in percent, minimum payment as share of balance)
    PROFILES = {
        DebtType.CREDIT_CARD: ((500, 15000), (14.0, 36.0), 0.03),
        DebtType.PERSONAL_LOAN: ((2000, 40000), (8.0, 24.0), 0.025),
        DebtType.VEHICLE_LOAN: ((5000, 50000), (4.0, 12.0), 0.02),
        DebtType.EDUCATION_LOAN: ((5000, 80000), (3.0, 9.0), 0.012),
        DebtType.HOME_LOAN: ((80000, 400000), (3.0, 8.0), 0.006),
        DebtType.OVERDRAFT: ((200, 5000), (18.0, 40.0), 0.05),
    }

    LABELS = {
        DebtType.CREDIT_CARD: "Card",
        DebtType.PERSONAL_LOAN: "Personal Loan",
        DebtType.VEHICLE_LOAN: "Auto Loan",
        DebtType.EDUCATION_LOAN: "Student Loan",
        DebtType.HOME_LOAN: "Mortgage",
        DebtType.OVERDRAFT: "Overdraft",
    }

    def generate(self, debt_type: DebtType | None = None) -> Debt:
        """Generate a single debt.

        Parameters
        ----------
        debt_type : DebtType | None
            Debt type; drawn from ``TYPE_WEIGHTS`` when omitted.

        Returns
        -------
        Debt
            Generated debt with a positive balance.
        """
        if debt_type is None:
            debt_type = self.rng.choices(self.DEBT_TYPES, weights=self.TYPE_WEIGHTS)[0]
        (low, high), (apr_low, apr_high), minimum_share = self.PROFILES[debt_type]

        balance = Decimal(self.rng.randint(low, high))
        apr = Decimal(str(round(self.rng.uniform(apr_low, apr_high), 2)))
        first_interest = balance * apr / Decimal("1200")
        minimum = max(
            balance * Decimal(str(minimum_share)),
            first_interest + balance / Decimal("100"),
            Decimal("25"),
        )
        # Round minimums up to whole currency units, like lenders do
        minimum = quantize(minimum, Decimal("1")) + Decimal("1")

        return Debt(
            debt_id=self.fake.uuid4(),
            balance=quantize(balance),
            apr=apr,
            minimum_payment=quantize(minimum),
            due_date=date.today() + timedelta(days=self.rng.randint(1, 30)),
            name=f"{self.fake.company()} {self.LABELS[debt_type]}",
            debt_type=debt_type,
            is_high_priority=self.rng.random() < 0.15,
        )

    def generate_batch(self, count: int) -> Iterator[Debt]:
        """Generate multiple debts.

        Parameters
        ----------
        count : int
            Number of debts to generate.

        Yields
        ------
        Debt
            Generated debts.
        """
        for _ in range(count):
            yield self.generate()

    def generate_ledger(self, count: int, include_home_loan: bool = False) -> list[Debt]:
        """Generate a ledger of ``count`` debts, home loans excluded by default."""
        ledger = []
        while len(ledger) < count:
            debt = self.generate()
            if debt.debt_type == DebtType.HOME_LOAN and not include_home_loan:
                continue
            ledger.append(debt)
        return ledger
