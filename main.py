"""Interactive portfolio checker.

Usage:
    python main.py                         # bundled catalog
    python main.py --catalog my.csv        # custom catalog
    python main.py --log-level DEBUG       # show pipeline steps
"""

import argparse
import logging
import sys

from portfolio_checker.config import CATALOG_PATH
from portfolio_checker.conversation_manager import ConversationManager
from portfolio_checker.data_loader import load_catalog
from portfolio_checker.exceptions import CatalogError


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Suggest an evenly split portfolio from a fixed company catalog.",
    )
    parser.add_argument(
        "--catalog", default=str(CATALOG_PATH),
        help="CSV catalog with name,sector,price columns (default: bundled catalog)",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = load_catalog(args.catalog)
    except CatalogError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    manager = ConversationManager(catalog)

    print("Welcome to Portfolio Checker")
    print("Type 'exit' to quit.\n")

    while not manager.context.is_complete():
        try:
            user_input = input(manager.prompt())
        except (EOFError, KeyboardInterrupt):
            print()
            break

        response = manager.handle_message(user_input)
        if response:
            print(response)

    return 0


if __name__ == "__main__":
    sys.exit(main())
