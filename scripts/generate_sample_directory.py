#!/usr/bin/env python3
"""Generate a sample bank directory snapshot.

Banks, branches, customers and funded accounts are created with Faker
through the regular entity operations, then saved with the same storage
the console uses.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_manager.config import BankManagerConfig
from bank_manager.generators.directory import DirectoryGenerator
from bank_manager.logging import get_logger, setup_logging
from bank_manager.models.base import format_currency
from bank_manager.storage import JsonFileStorage

logger = get_logger(__name__)


def main() -> int:
    """Generate and save a sample directory."""
    config = BankManagerConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample bank directory")
    parser.add_argument("--output", type=Path, default=config.storage.path, help="Snapshot file to write")
    parser.add_argument("--seed", type=int, default=config.seed if config.seed is not None else 42,
                        help="Random seed (default: 42)")
    parser.add_argument("--banks", type=int, default=config.sample.num_banks, help="Number of banks")
    parser.add_argument("--branches", type=int, default=config.sample.branches_per_bank,
                        help="Branches per bank")
    parser.add_argument("--customers", type=int, default=config.sample.customers_per_branch,
                        help="Customers per branch")
    parser.add_argument("--accounts", type=int, default=config.sample.accounts_per_customer,
                        help="Maximum accounts per customer (1-5)")
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)

    sample = replace(
        config.sample,
        num_banks=args.banks,
        branches_per_bank=args.branches,
        customers_per_branch=args.customers,
        accounts_per_customer=args.accounts,
    )
    directory = DirectoryGenerator(seed=args.seed, config=sample).generate()

    storage = JsonFileStorage(args.output, pretty=config.storage.pretty)
    if not storage.save(directory):
        logger.error("Sample directory was not written")
        return 1

    summary = directory.summary()
    print("=" * 60)
    print(f"Sample directory written to: {args.output}")
    for key in ("banks", "branches", "customers", "accounts"):
        print(f"  {key}: {summary[key]}")
    print(f"  total balance: {format_currency(summary['total_balance'])}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
