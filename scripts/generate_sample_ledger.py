#!/usr/bin/env python3
"""Generate a synthetic debt ledger as JSON.

The output can be fed straight into ``scripts/compare_plans.py``.

Usage:
    python scripts/generate_sample_ledger.py --count 5 --seed 42 > ledger.json
    python scripts/generate_sample_ledger.py --count 4 --include-home-loan
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from debt_planner.generators import DebtGenerator
from debt_planner.ledger import total_minimum_payments
from debt_planner.logging import setup_logging
from debt_planner.sinks import to_dict


def main(argv: list[str] | None = None) -> int:
    """Generate the ledger and print it."""
    parser = argparse.ArgumentParser(description="Generate a synthetic debt ledger")
    parser.add_argument("--count", type=int, default=4, help="Number of debts (default: 4)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--include-home-loan", action="store_true", help="Allow mortgages in the ledger"
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    ledger = DebtGenerator(seed=args.seed).generate_ledger(
        args.count, include_home_loan=args.include_home_loan
    )
    print(json.dumps([to_dict(debt) for debt in ledger], indent=2))
    print(f"Sum of minimum payments: {total_minimum_payments(ledger)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
