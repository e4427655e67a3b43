"""Command-line entry point for the include flattener."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from include_flattener.configure_logging import configure_logging
from include_flattener.resolver import REVISIT_POLICIES
from include_flattener.run_flatten import run_flatten
from include_flattener.validate_config import RELATIVE_TO_CHOICES

USAGE_EXIT_CODE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with USAGE_EXIT_CODE on usage errors."""

    def error(self, message: str) -> NoReturn:
        """Print usage and the error to stderr, then exit."""
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = _ArgumentParser(
        prog="include-flattener",
        description=(
            'Resolve #include "..." directives recursively and write every '
            "referenced file once, deepest includes first."
        ),
    )
    ap.add_argument(
        "input_file",
        help="Root file, relative to the program directory unless absolute",
    )
    ap.add_argument(
        "output_file",
        nargs="?",
        default=None,
        help="Destination file (default: standard output)",
    )
    ap.add_argument(
        "--config",
        help="Path to YAML configuration file",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON resolution report to this path",
    )
    ap.add_argument(
        "--relative-to",
        choices=RELATIVE_TO_CHOICES,
        default=None,
        help="Base for a relative input path (default: program)",
    )
    ap.add_argument(
        "--early-stop-after",
        type=int,
        default=None,
        help="Stop scanning a file after this many lines without an include",
    )
    ap.add_argument(
        "--revisit-policy",
        choices=REVISIT_POLICIES,
        default=None,
        help="How to treat a file reached again at a shallower depth",
    )
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase diagnostic output (repeat for debug)",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report errors",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, configure diagnostics and run the flattener."""
    args = build_parser().parse_args(argv)
    configure_logging(-1 if args.quiet else args.verbose)
    args.program_dir = Path(sys.argv[0]).absolute().parent
    return run_flatten(args)


if __name__ == "__main__":
    raise SystemExit(main())
