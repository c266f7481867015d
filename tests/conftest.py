"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from debt_planner.models import Debt, DebtType


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def card_debt() -> Debt:
    """High-APR card: 1000 at 24%, 50 minimum."""
    return Debt(
        debt_id="a",
        balance=Decimal("1000.00"),
        apr=Decimal("24"),
        minimum_payment=Decimal("50.00"),
        name="Card A",
        debt_type=DebtType.CREDIT_CARD,
    )


@pytest.fixture
def loan_debt() -> Debt:
    """Low-APR loan: 500 at 12%, 25 minimum."""
    return Debt(
        debt_id="b",
        balance=Decimal("500.00"),
        apr=Decimal("12"),
        minimum_payment=Decimal("25.00"),
        name="Loan B",
        debt_type=DebtType.PERSONAL_LOAN,
    )


@pytest.fixture
def two_debts(card_debt: Debt, loan_debt: Debt) -> list[Debt]:
    """Ledger listed highest APR first, so ledger order equals avalanche order."""
    return [card_debt, loan_debt]
