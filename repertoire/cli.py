"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from repertoire.opening import Opening, OpeningError

_VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the ``repertoire`` command."""
    parser = argparse.ArgumentParser(
        prog="repertoire", description="Study chess opening repertoires."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "-s",
        "--study",
        metavar="FILENAME",
        help="Load and study an existing opening file",
    )
    parser.add_argument(
        "-n",
        "--new",
        action="store_true",
        help="Start a new opening study session",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = build_parser().parse_args(argv)

    if args.study is not None and args.new:
        print("Error: Cannot specify both --study and --new options", file=sys.stderr)
        return 1
    if args.study is None and not args.new:
        print("Error: Must specify either --study or --new option", file=sys.stderr)
        return 1
    if args.new:
        print("Starting new opening study session")
        return 0

    try:
        opening = Opening.from_file(args.study)
    except OpeningError as exc:
        print(f"Error loading opening file: {exc}", file=sys.stderr)
        return 1

    try:
        opening.study_loop()
    except OSError as exc:
        print(f"Error during study session: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())