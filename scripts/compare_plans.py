#!/usr/bin/env python3
"""Compare a payoff plan against the minimum-payments-only baseline.

Reads a JSON ledger (a list of debt objects), simulates the requested plan
and the baseline, and prints the comparison as JSON. Optionally writes the
comparison, the per-period timeline and a DTI analysis to an output folder.

Usage:
    python scripts/compare_plans.py ledger.json --budget 1500
    python scripts/compare_plans.py ledger.json --budget 1500 --strategy snowball
    python scripts/compare_plans.py ledger.json --budget 1500 --strategy custom --order card,loan
    python scripts/compare_plans.py ledger.json --budget 1500 --income 6000 --output out/
"""

import argparse
import json
import logging
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from debt_planner.comparison import compare_strategies, compare_to_baseline
from debt_planner.config import EngineConfig
from debt_planner.dti import dti_for_debts
from debt_planner.exceptions import DebtPlannerError
from debt_planner.ledger import debts_from_dicts, summarize_debts
from debt_planner.logging import setup_logging
from debt_planner.metrics import build_timeline
from debt_planner.models import SimulationConfig, Strategy
from debt_planner.money import to_decimal
from debt_planner.sinks import JsonFileSink, to_dict
from debt_planner.strategies import explain_order

logger = logging.getLogger(__name__)


def money(value: str) -> Decimal:
    """argparse type for currency amounts."""
    try:
        return to_decimal(value)
    except DebtPlannerError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Compare a debt payoff plan to the baseline")
    parser.add_argument("ledger", type=Path, help="JSON file with a list of debts")
    parser.add_argument("--budget", type=money, required=True, help="Monthly payment budget")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default=Strategy.AVALANCHE.value,
        help="Payoff strategy (default: avalanche)",
    )
    parser.add_argument("--order", help="Comma-separated debt ids for the custom strategy")
    parser.add_argument("--income", type=money, help="Monthly income for the DTI analysis")
    parser.add_argument("--output", type=Path, help="Directory to write JSON reports")
    parser.add_argument("--max-periods", type=int, help="Safety bound on simulated periods")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the comparison and print it."""
    args = parse_args(argv)
    config = EngineConfig.from_env()
    setup_logging(level=config.log_level, format_type=config.log_format)
    max_periods = args.max_periods if args.max_periods is not None else config.max_periods

    try:
        with open(args.ledger, encoding="utf-8") as f:
            rows = json.load(f)
    except (OSError, ValueError) as exc:
        logger.error("Cannot read ledger %s: %s", args.ledger, exc)
        return 2
    if not isinstance(rows, list):
        logger.error("Ledger %s must hold a JSON list of debts", args.ledger)
        return 2

    try:
        debts = debts_from_dicts(rows)
        plan = SimulationConfig(
            monthly_budget=args.budget,
            strategy=Strategy(args.strategy),
            custom_order=tuple(args.order.split(",")) if args.order else None,
        )
        comparison = compare_to_baseline(
            debts, plan, max_periods=max_periods, parallel=config.parallel_compare
        )
        strategies = compare_strategies(debts, args.budget, max_periods=max_periods)
    except DebtPlannerError as exc:
        logger.error("Cannot simulate plan: %s", exc)
        return 2

    if not comparison.optimized_plan.converged:
        logger.warning("Plan never pays off within %d periods", max_periods)

    report = {
        "summary": to_dict(summarize_debts(debts)),
        "payment_order": [
            to_dict(entry) for entry in explain_order(debts, plan.strategy, plan.custom_order)
        ],
        "time_periods_saved": comparison.time_periods_saved,
        "interest_saved": str(comparison.interest_saved),
        "percentage_improvement": str(comparison.percentage_improvement),
        "baseline_periods": comparison.baseline_plan.periods_to_payoff,
        "optimized_periods": comparison.optimized_plan.periods_to_payoff,
        "optimized_converged": comparison.optimized_plan.converged,
        "recommended_strategy": strategies.recommended.value,
    }
    if args.income is not None:
        report["dti"] = to_dict(dti_for_debts(debts, args.income))

    print(json.dumps(report, indent=2 if config.pretty_json else None))

    if args.output:
        sink = JsonFileSink(args.output, pretty=config.pretty_json)
        sink.write_result("comparison", comparison)
        sink.write_batch("timeline", build_timeline(comparison.optimized_plan.records))
        sink.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
