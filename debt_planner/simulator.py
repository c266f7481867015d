"""Month-by-month amortization of a debt ledger under a payoff strategy."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Iterable, Sequence

from debt_planner.config import DEFAULT_MAX_PERIODS
from debt_planner.exceptions import InvalidConfigurationError
from debt_planner.ledger import validate_debts
from debt_planner.metrics import aggregate
from debt_planner.models import Debt, PeriodRecord, SimulationConfig, SimulationResult, Strategy
from debt_planner.money import ZERO, floor_cents, quantize, snap_to_zero, to_decimal
from debt_planner.strategies import coerce_strategy, resolve_order, validate_custom_order

logger = logging.getLogger(__name__)

_PRECISION = 80


@dataclass
class _DebtState:
    """Running balance of one debt inside a simulation."""

    debt_id: str
    apr: Decimal
    balance: Decimal
    minimum: Decimal

    @classmethod
    def from_debt(cls, debt: Debt) -> _DebtState:
        return cls(
            debt_id=debt.debt_id,
            apr=to_decimal(debt.apr),
            balance=quantize(to_decimal(debt.balance)),
            minimum=debt.monthly_minimum,
        )

    @property
    def monthly_rate(self) -> Decimal:
        return self.apr / Decimal("1200")


def _prepare(
    debts: Iterable[Debt], config: SimulationConfig
) -> tuple[list[_DebtState], Decimal, Strategy]:
    """Validate inputs and build the initial running state."""
    ledger = validate_debts(debts)
    strategy = coerce_strategy(config.strategy)
    budget = floor_cents(to_decimal(config.monthly_budget))
    if budget < ZERO:
        raise InvalidConfigurationError(f"Monthly budget cannot be negative, got {budget}")

    states = [_DebtState.from_debt(d) for d in ledger]
    # Nothing owed, so there is no order to check
    if strategy == Strategy.CUSTOM and any(s.balance > ZERO for s in states):
        validate_custom_order(states, config.custom_order)

    required = sum((s.minimum for s in states if s.balance > ZERO), ZERO)
    if budget < required:
        raise InvalidConfigurationError(
            f"Monthly budget {budget} does not cover minimum payments totalling {required}"
        )
    return states, budget, strategy


def _simulate_period(
    states: list[_DebtState],
    period_index: int,
    budget: Decimal,
    strategy: Strategy,
    custom_order: Sequence[str] | None,
) -> list[PeriodRecord]:
    """Advance every active debt by one billing period."""
    active = [s for s in states if s.balance > ZERO]
    opening = {s.debt_id: s.balance for s in active}
    interest: dict[str, Decimal] = {}
    payments: dict[str, Decimal] = {}

    # Interest accrues on the opening balance before any payment
    for state in active:
        accrued = quantize(state.balance * state.monthly_rate)
        state.balance += accrued
        interest[state.debt_id] = accrued

    for state in active:
        due = min(state.minimum, state.balance)
        state.balance = snap_to_zero(state.balance - due)
        payments[state.debt_id] = due

    surplus = budget - sum(payments.values(), ZERO)
    if surplus < ZERO:
        raise InvalidConfigurationError(
            f"Monthly budget {budget} does not cover minimum payments in period {period_index}"
        )

    by_id = {s.debt_id: s for s in active}
    order = resolve_order([s for s in active if s.balance > ZERO], strategy, custom_order)
    for debt_id in order:
        if surplus <= ZERO:
            break
        target = by_id[debt_id]
        extra = min(surplus, target.balance)
        target.balance = snap_to_zero(target.balance - extra)
        payments[debt_id] += extra
        surplus -= extra
        logger.debug(
            "Period %d: surplus %s applied to %s (balance now %s)",
            period_index,
            extra,
            debt_id,
            target.balance,
        )

    records = []
    for state in active:
        paid = payments[state.debt_id]
        interest_portion = min(paid, interest[state.debt_id])
        records.append(
            PeriodRecord(
                debt_id=state.debt_id,
                period_index=period_index,
                opening_balance=opening[state.debt_id],
                interest_accrued=interest[state.debt_id],
                payment_applied=paid,
                principal_portion=paid - interest_portion,
                interest_portion=interest_portion,
                closing_balance=state.balance,
            )
        )
    return records


def simulate_records(
    debts: Iterable[Debt],
    config: SimulationConfig,
    *,
    max_periods: int | None = None,
) -> tuple[list[PeriodRecord], bool]:
    """Simulate a ledger and return its trace with a convergence flag.

    The trace is ordered by period, then by ledger order. The flag is
    False when ``max_periods`` was reached with a balance still open.

    Raises
    ------
    InvalidConfigurationError
        Before the first period, if the ledger or config is invalid.
    """
    states, budget, strategy = _prepare(debts, config)
    bound = max_periods if max_periods is not None else DEFAULT_MAX_PERIODS
    if bound < 1:
        raise InvalidConfigurationError(f"max_periods must be at least 1, got {bound}")

    records: list[PeriodRecord] = []
    period_index = 0
    with localcontext() as ctx:
        # Under-funded plans compound for the whole bound; keep cents exact
        ctx.prec = max(ctx.prec, _PRECISION)
        while any(s.balance > ZERO for s in states):
            if period_index >= bound:
                remaining = sum((s.balance for s in states), ZERO)
                logger.warning(
                    "Simulation stopped at safety bound of %d periods with %s still owed",
                    bound,
                    remaining,
                )
                return records, False
            period_index += 1
            records.extend(
                _simulate_period(states, period_index, budget, strategy, config.custom_order)
            )

    return records, True


def simulate(
    debts: Iterable[Debt],
    config: SimulationConfig,
    *,
    max_periods: int | None = None,
) -> SimulationResult:
    """Simulate a payoff plan and aggregate it.

    Parameters
    ----------
    debts : Iterable[Debt]
        Ledger snapshot. Never mutated.
    config : SimulationConfig
        Budget and strategy.
    max_periods : int | None
        Safety bound; defaults to 1200 periods.

    Returns
    -------
    SimulationResult
        An empty ledger gives a zero-period, zero-interest result. A run
        that hits the safety bound comes back with ``converged=False``.
    """
    ledger = list(debts)
    records, converged = simulate_records(ledger, config, max_periods=max_periods)
    strategy = coerce_strategy(config.strategy)
    result = aggregate(
        records,
        monthly_payment=floor_cents(to_decimal(config.monthly_budget)),
        strategy=strategy,
        converged=converged,
    )
    if not records:
        logger.debug("Nothing owed in a ledger of %d debts; returning empty plan", len(ledger))
    else:
        logger.info(
            "Simulated %s plan: %d periods, %s interest, converged=%s",
            strategy.value,
            result.periods_to_payoff,
            result.total_interest_paid,
            converged,
        )
    return result


def simulate_independently(
    debts: Iterable[Debt],
    *,
    max_periods: int | None = None,
) -> dict[str, SimulationResult]:
    """Simulate every active debt alone at its own minimum payment."""
    results = {}
    for debt in validate_debts(debts):
        if not debt.is_active:
            continue
        config = SimulationConfig(monthly_budget=debt.monthly_minimum, strategy=Strategy.AVALANCHE)
        results[debt.debt_id] = simulate([debt], config, max_periods=max_periods)
    return results
