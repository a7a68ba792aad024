from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from clanwatch.app import track_clans
from clanwatch.config import ConfigurationError, configure_logging, get_tracker_settings
from clanwatch.ui.report import render_report, report_as_json

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from clanwatch.domain.tracking import TrackerSettings

log = logging.getLogger(__name__)

# CLI flag name -> Thresholds field
_THRESHOLD_FLAGS = {
    "min_trophies": "min_trophies",
    "min_clan_points": "min_clan_points",
    "min_clan_members": "min_clan_members",
    "min_clan_level": "min_clan_level",
    "limit": "clan_limit",
}


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {number}")
    return number


def _positive_int(value: str) -> int:
    number = _non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("must be positive")
    return number


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="clanwatch",
        description="Report clan members who newly reached the trophy threshold",
    )
    parser.add_argument(
        "--location",
        dest="locations",
        action="append",
        metavar="NAME",
        help="Location to scan; repeat for several, 'international' for a global search "
        "(defaults to CLANWATCH_LOCATIONS)",
    )
    parser.add_argument(
        "--min-trophies",
        type=_non_negative_int,
        help="Trophy threshold for regular members (defaults to MIN_TROPHIES)",
    )
    parser.add_argument(
        "--min-clan-points",
        type=_non_negative_int,
        help="Minimum clan points (defaults to MIN_CLAN_POINTS)",
    )
    parser.add_argument(
        "--min-clan-members",
        type=_non_negative_int,
        help="Minimum clan member count (defaults to MIN_CLAN_MEMBERS)",
    )
    parser.add_argument(
        "--min-clan-level",
        type=_non_negative_int,
        help="Minimum clan level requested from the listing (defaults to MIN_CLAN_LEVEL)",
    )
    parser.add_argument(
        "--limit",
        type=_positive_int,
        help="Number of clans requested per location (defaults to CLAN_LIMIT)",
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        help="Snapshot file path (defaults to CLANWATCH_SNAPSHOT_PATH or the data dir)",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Report format (default: %(default)s)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(list(argv))


def _build_settings(args: argparse.Namespace) -> TrackerSettings:
    settings = get_tracker_settings()
    overrides = {
        field_name: getattr(args, flag)
        for flag, field_name in _THRESHOLD_FLAGS.items()
        if getattr(args, flag) is not None
    }
    if overrides:
        settings = replace(settings, thresholds=replace(settings.thresholds, **overrides))
    if args.locations:
        locations = tuple(name.strip() for name in args.locations if name.strip())
        if not locations:
            raise ConfigurationError("--location must not be blank")
        settings = replace(settings, locations=locations)
    return settings


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        settings = _build_settings(parsed_args)
        result = track_clans(settings=settings, snapshot_path=parsed_args.snapshot)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during tracking")
        sys.exit(1)

    rendered = report_as_json(result) if parsed_args.format == "json" else render_report(result)
    sys.stdout.write(rendered)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
