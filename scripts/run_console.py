#!/usr/bin/env python3
"""Run the interactive bank manager console.

The whole directory is loaded from the snapshot file at start and written
back when the session ends. A missing or unreadable snapshot starts an
empty directory.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_manager.config import BankManagerConfig
from bank_manager.console import ConsoleMenu
from bank_manager.generators.identifier import IdentifierGenerator
from bank_manager.logging import setup_logging
from bank_manager.storage import JsonFileStorage
from bank_manager.store import BankDirectory


def main() -> int:
    """Load, run the menu, save."""
    config = BankManagerConfig.from_env()

    parser = argparse.ArgumentParser(description="Manage banks, branches, customers and accounts")
    parser.add_argument(
        "--file",
        type=Path,
        default=config.storage.path,
        help=f"Snapshot file (default: {config.storage.path})",
    )
    parser.add_argument("--log-level", default=config.log_level, help="Log level (default: %(default)s)")
    args = parser.parse_args()

    setup_logging(args.log_level, config.log_format)

    id_generator = IdentifierGenerator(seed=config.seed)
    storage = JsonFileStorage(args.file, pretty=config.storage.pretty, id_generator=id_generator)
    directory = storage.load()
    if directory is None:
        directory = BankDirectory(id_generator=id_generator)

    ConsoleMenu(directory).run()

    if storage.save(directory):
        print("Database saved.")
    else:
        print("Saving error. This session is not saved.")
        return 1
    print("Thank you for using Bank Manager.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
