"""Command line interface: render a month sheet and replay key gestures."""

import argparse
import logging
import sys
from datetime import date
from typing import Any, Optional

from pydantic import ValidationError

from ..config.loader import read_config_file
from ..config.settings import DatePickerSettings, set_settings
from ..exceptions import ConfigurationError, DatePickerError
from ..render.console import render_text
from ..render.view import build_view
from ..ui.events import KeyEvent
from ..ui.keyboard import KeyCode, parse_key
from ..ui.picker import DatePicker, DatePickerCallbacks
from ..utils.logging import setup_logging
from .parser import create_parser

logger = logging.getLogger(__name__)


def _load_configuration(config_file: Optional[str]) -> tuple[DatePickerSettings, dict[str, Any]]:
    """Load settings and widget options, from a YAML file when one is given."""
    if not config_file:
        return DatePickerSettings(), {}
    config_data = read_config_file(config_file)
    settings = DatePickerSettings.from_mapping(config_data.get("settings"))
    return settings, dict(config_data.get("options") or {})


def build_options(args: argparse.Namespace, options: dict[str, Any]) -> dict[str, Any]:
    """Overlay command line arguments on options loaded from configuration.

    Args:
        args: Parsed command line arguments
        options: Options from the configuration file

    Returns:
        Option mapping for DatePickerOptions
    """
    options = dict(options)
    if args.value is not None:
        options["default_value"] = args.value
        options.setdefault("month", args.value.month)
        options.setdefault("year", args.value.year)
    if args.month is not None:
        options["month"] = args.month
    if args.year is not None:
        options["year"] = args.year
    if args.locale:
        options["locale"] = args.locale
    if args.hide_other_months:
        options["show_other_month_date"] = False
    if args.style_weekend:
        options["style_weekend"] = True
    if args.disabled:
        options["disabled"] = True
    if args.read_only:
        options["read_only"] = True
    return options


def replay_keys(picker: DatePicker, keys: list[str]) -> None:
    """Focus the picker and feed it a sequence of key gestures.

    Args:
        picker: Picker receiving the gestures
        keys: Key tokens such as ``right`` or ``enter``, or standard key names
    """
    picker.on_wrapper_focus()
    for token in keys:
        code = parse_key(token)
        key_name = token if code is KeyCode.UNKNOWN else code.value
        if code is KeyCode.UNKNOWN:
            logger.warning(f"Unknown key gesture: {token!r}")
        picker.on_wrapper_key_down(KeyEvent(key=key_name))


def _format_value(value: Optional[date]) -> str:
    return value.isoformat() if value else "none"


def main_entry(argv: Optional[list[str]] = None) -> int:
    """Main entry point with argument parsing.

    Args:
        argv: Command line arguments, ``sys.argv[1:]`` when None

    Returns:
        Exit code (0 for success, 2 for configuration errors, 1 for other failures)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings, config_options = _load_configuration(args.config)
        set_settings(settings)
        setup_logging(settings, log_level=args.log_level)

        callbacks = DatePickerCallbacks(
            on_update=lambda value: logger.info(f"Selected value: {_format_value(value)}"),
            on_month_change=lambda month: logger.info(f"Displayed month changed to {month}"),
        )
        picker = DatePicker(build_options(args, config_options), callbacks=callbacks)
        if args.keys:
            logger.verbose(f"Replaying {len(args.keys)} key gestures")  # type: ignore[attr-defined]
            replay_keys(picker, args.keys)

        print(render_text(build_view(picker)))
        print(f"Selected: {_format_value(picker.value)}")
        return 0
    except (ConfigurationError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except DatePickerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main() -> None:
    """Console script entry point."""
    sys.exit(main_entry())


__all__ = ["build_options", "main", "main_entry", "replay_keys"]
