"""Command-line argument parsing for the datepicker preview tool.

This module handles all command-line argument parsing functionality,
including setup of argument groups and value conversion.
"""

import argparse
import logging
from datetime import date, datetime

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format for command-line arguments.

    Args:
        date_str (str): Date string to parse in YYYY-MM-DD format

    Returns:
        date: Parsed date

    Raises:
        argparse.ArgumentTypeError: If date format is invalid or date is not parseable

    Example:
        >>> parse_date("2024-01-15")
        datetime.date(2024, 1, 15)
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError as err:
        raise argparse.ArgumentTypeError(
            f"Invalid date format: {date_str}. Use YYYY-MM-DD"
        ) from err


def parse_keys(keys_str: str) -> list[str]:
    """Split a comma separated list of key gestures, dropping empty entries.

    Example:
        >>> parse_keys("right, right,enter")
        ['right', 'right', 'enter']
    """
    return [key.strip() for key in keys_str.split(",") if key.strip()]


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser with calendar, interaction,
            configuration and logging options

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["--month", "1", "--year", "2024"])
        >>> args.month
        1
    """
    parser = argparse.ArgumentParser(
        prog="datepicker",
        description="Date picker engine - render a month sheet and replay keyboard gestures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                 # Show the current month
  %(prog)s --month 1 --year 2024           # Show January 2024
  %(prog)s --locale ar --style-weekend     # Right-to-left locale with weekend marking
  %(prog)s --month 1 --year 2024 --keys down,right,enter  # Move focus and select
  %(prog)s --config datepicker.yaml        # Load settings and options from YAML
        """,
    )

    calendar_group = parser.add_argument_group("calendar", "Displayed month and locale")
    calendar_group.add_argument("--month", type=int, help="Displayed month (1-12)")
    calendar_group.add_argument("--year", type=int, help="Displayed year")
    calendar_group.add_argument("--locale", help="Locale identifier (e.g. en, de-AT, ar)")
    calendar_group.add_argument(
        "--value",
        type=parse_date,
        help="Initially selected date in YYYY-MM-DD format; also sets the displayed month",
    )
    calendar_group.add_argument(
        "--hide-other-months",
        action="store_true",
        help="Leave cells of adjacent months blank",
    )
    calendar_group.add_argument(
        "--style-weekend", action="store_true", help="Mark the weekend column and cells"
    )

    interaction_group = parser.add_argument_group("interaction", "Widget state and gestures")
    interaction_group.add_argument(
        "--disabled", action="store_true", help="Render the picker disabled"
    )
    interaction_group.add_argument(
        "--read-only", action="store_true", help="Render the picker read-only"
    )
    interaction_group.add_argument(
        "--keys",
        type=parse_keys,
        default=[],
        help="Comma separated key gestures to replay after focusing "
        "(left, right, up, down, enter, space)",
    )

    config_group = parser.add_argument_group("configuration", "Configuration file")
    config_group.add_argument(
        "--config", help="YAML file with optional 'settings' and 'options' sections"
    )

    logging_group = parser.add_argument_group("logging", "Logging options")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Console log level (overrides settings)",
    )

    return parser


__all__ = ["create_parser", "parse_date", "parse_keys"]
