"""Command-line interface: show, add, remove, list and reset time zones."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

from tzcli import config
from tzcli.zones import ZoneMatchError, find_matching_zone, print_zones

VERSION = "dev"
_CLEAR_SCREEN = "\033[H\033[2J"


def _run_root(args: argparse.Namespace) -> int:
    zones = config.load_zones()
    if not args.live:
        print_zones(zones)
        return 0
    try:
        while True:
            sys.stdout.write(_CLEAR_SCREEN)
            print_zones(zones)
            time.sleep(1)
    except KeyboardInterrupt:
        return 130


def _resolve(words: Sequence[str]) -> str | None:
    try:
        return find_matching_zone(" ".join(words))
    except ZoneMatchError as exc:
        print("❌", exc)
        return None


def _run_add(args: argparse.Namespace) -> int:
    zone = _resolve(args.timezone)
    if zone is None:
        return 0
    try:
        config.add_zone(zone)
    except (config.ConfigError, OSError) as exc:
        print("❌ Failed to add timezone:", exc)
    else:
        print("✅ Added timezone:", zone)
    return 0


def _run_remove(args: argparse.Namespace) -> int:
    zone = _resolve(args.timezone)
    if zone is None:
        return 0
    try:
        config.remove_zone(zone)
    except (config.ConfigError, OSError) as exc:
        print("❌ Failed to remove timezone:", exc)
    else:
        print("✅ Removed timezone:", zone)
    return 0


def _run_list(args: argparse.Namespace) -> int:
    zones = config.load_zones()
    if not zones:
        print("No timezones configured.")
        return 0
    print("Configured timezones:")
    for zone in zones:
        print(" -", zone)
    return 0


def _run_reset(args: argparse.Namespace) -> int:
    try:
        config.reset()
    except OSError as exc:
        print("Error deleting config:", exc)
    else:
        print("All timezones reset.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``tz`` command."""
    parser = argparse.ArgumentParser(
        prog="tz", description="Display current time in configured timezones"
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"tz version {VERSION}"
    )
    parser.add_argument(
        "-l", "--live", action="store_true", help="Refresh every second"
    )
    parser.set_defaults(handler=_run_root)

    commands = parser.add_subparsers(dest="command")

    add = commands.add_parser("add", help="Add a timezone")
    add.add_argument("timezone", nargs="+")
    add.set_defaults(handler=_run_add)

    remove = commands.add_parser("remove", help="Remove a timezone")
    remove.add_argument("timezone", nargs="+")
    remove.set_defaults(handler=_run_remove)

    listing = commands.add_parser("list", help="List all configured timezones")
    listing.set_defaults(handler=_run_list)

    reset = commands.add_parser("reset", help="Delete all configured timezones")
    reset.set_defaults(handler=_run_reset)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``tz`` command and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except config.ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())