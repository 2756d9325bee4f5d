"""Command-line interface for distrodetect."""

import argparse
import json
import logging
import sys
from dataclasses import dataclass

from distrodetect.constants import VERSION
from distrodetect.distro import ordered_distros
from distrodetect.engine import detect


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    show_all: bool
    show_version: bool
    as_json: bool
    raw: bool
    list_probes: bool
    offline: bool
    debug: bool
    tui: bool


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the distro CLI."""
    parser = argparse.ArgumentParser(
        prog="distro",
        description="Detect the Linux distribution or BSD of this host.",
    )
    parser.add_argument("-a", "--all", dest="show_all", action="store_true",
                        help="output all detected information")
    parser.add_argument("-v", "--version", dest="show_version", action="store_true",
                        help="version info")
    parser.add_argument("--json", dest="as_json", action="store_true",
                        help="output platform, name, codename and version as JSON")
    parser.add_argument("--raw", action="store_true",
                        help="output the release metadata that was read")
    parser.add_argument("--list-probes", action="store_true",
                        help="list the executable probes in the order they are tried")
    parser.add_argument("--offline", action="store_true",
                        help="never look up macOS codenames over the network")
    parser.add_argument("--debug", action="store_true",
                        help="log detection steps to stderr")
    parser.add_argument("--tui", action="store_true",
                        help="open the interactive viewer")
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command-line arguments."""
    args = create_parser().parse_args(argv)
    return ParsedArgs(
        show_all=args.show_all,
        show_version=args.show_version,
        as_json=args.as_json,
        raw=args.raw,
        list_probes=args.list_probes,
        offline=args.offline,
        debug=args.debug,
        tui=args.tui,
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    if args.show_version:
        print(f"distro {VERSION}")
        return

    # The viewer owns the terminal and logs to a file instead
    if args.debug and not args.tui:
        logging.basicConfig(
            stream=sys.stderr,
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if args.list_probes:
        for distro in ordered_distros():
            print(distro.describe())
        return

    # None defers to the DISTRODETECT_OFFLINE environment variable
    allow_remote = False if args.offline else None

    if args.tui:
        from distrodetect.app import run_app

        run_app(allow_remote=allow_remote)
        return

    identity = detect(allow_remote=allow_remote)
    if args.as_json:
        print(json.dumps(identity.as_dict(), indent=2))
    elif args.raw:
        sys.stdout.write(identity.raw_metadata)
    elif args.show_all:
        print(identity)
    else:
        print(identity.name)


if __name__ == "__main__":
    main()
