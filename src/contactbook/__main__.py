"""
Add contacts for one session and print them in insertion order.
Run: python -m contactbook --contact Atul Sharma 09383934549 [--contact ...]
Nothing is kept after the process exits.
"""

import argparse
import logging
import sys

from contactbook.application import ContactManager
from contactbook.config import configure_logging, load_settings

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="contactbook", description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "--contact",
        nargs=3,
        action="append",
        default=[],
        metavar=("FIRST", "LAST", "PHONE"),
        help="Contact to add; repeat for more.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    manager = ContactManager()
    for first_name, last_name, phone_number in args.contact:
        manager.add_contact(first_name, last_name, phone_number)

    for contact in manager.get_all_contacts():
        print(f"{contact.full_name}\t{contact.phone_number}")
    logger.info("Listed %d contact(s)", len(manager))
    return 0


if __name__ == "__main__":
    sys.exit(main())
