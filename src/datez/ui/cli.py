from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from datez.app import compare_texts, current_date, describe_date, shift_date
from datez.config import ConfigurationError, configure_logging, get_datez_config
from datez.domain.parsing import parse_date

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from datez.config import DatezConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parse and shift calendar dates of any magnitude")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser("parse", help="Print a date in canonical MM/DD/YYYY form")
    parse.add_argument("date", type=str, help="Date as month/day/year")

    shift = subparsers.add_parser("shift", help="Move a date by a number of days")
    shift.add_argument("date", type=str, help="Date as month/day/year")
    shift.add_argument(
        "--days",
        type=int,
        default=1,
        help="Number of days to move; negative values move backwards (default: %(default)s)",
    )

    compare = subparsers.add_parser("compare", help="Order two dates")
    compare.add_argument("left", type=str, help="First date as month/day/year")
    compare.add_argument("right", type=str, help="Second date as month/day/year")

    subparsers.add_parser("today", help="Print today's date")

    describe = subparsers.add_parser("describe", help="Show how a date is represented")
    describe.add_argument("date", type=str, help="Date as month/day/year")

    return parser.parse_args(list(argv))


def _run(parsed_args: argparse.Namespace, config: DatezConfig) -> list[str]:
    if parsed_args.command == "parse":
        return [str(parse_date(parsed_args.date))]
    if parsed_args.command == "shift":
        return [str(shift_date(parse_date(parsed_args.date), parsed_args.days))]
    if parsed_args.command == "compare":
        return [compare_texts(parsed_args.left, parsed_args.right).name.lower()]
    if parsed_args.command == "today":
        return [str(current_date(config=config))]
    if parsed_args.command == "describe":
        return describe_date(parse_date(parsed_args.date)).as_lines()
    raise ValueError(f"Unsupported command: {parsed_args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        config = get_datez_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Invalid configuration")
        sys.exit(1)
    configure_logging(level=config.log_level)

    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        lines = _run(parsed_args, config)
    except ValueError as exc:
        log.error("%s: %s", type(exc).__name__, exc)  # noqa: TRY400
        sys.exit(2)

    for line in lines:
        print(line)  # noqa: T201


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
