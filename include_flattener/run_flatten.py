"""Orchestration logic for flattening an include tree into one stream."""

import argparse
import contextlib
import io
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from include_flattener.canonicalize import canonicalize
from include_flattener.compute_config_hash import compute_config_hash
from include_flattener.errors import ConfigError
from include_flattener.flattener import flatten
from include_flattener.load_config import load_config
from include_flattener.resolution_report import ResolutionReport
from include_flattener.resolution_state import ResolutionState
from include_flattener.resolver import Resolver
from include_flattener.validate_config import validate_config

logger = logging.getLogger(__name__)


def run_flatten(args: argparse.Namespace) -> int:
    """Execute the full resolve-then-flatten pipeline and return an exit code."""
    try:
        config = _init_config(args)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1

    root = _resolve_input_path(args.input_file, config, args.program_dir)
    if root is None:
        return 1

    report = ResolutionReport(compute_config_hash(config), root)
    resolver = Resolver(
        prefix=config["directive"]["prefix"],
        early_stop_after=config["scan"]["early_stop_after"],
        revisit_policy=config["scan"]["revisit_policy"],
        encoding=config["encoding"],
    )

    state = ResolutionState()
    resolved = resolver.resolve(root, root.parent, state, 0)
    if not resolved:
        logger.error("Include resolution failed for %s", root)
    state.freeze()
    logger.info("Resolved %d file(s) from %s", len(state), root)

    # Truncating the destination must wait until the root has been scanned.
    try:
        sink_cm = _open_sink(args.output_file, config["encoding"])
    except OSError as exc:
        logger.error("Could not open output file: %s (%s)", args.output_file, exc)
        return 1

    with sink_cm as sink:
        written = flatten(
            state,
            sink,
            marker=config["directive"]["strip_marker"],
            encoding=config["encoding"],
        )
    logger.info("Emitted %d file(s)", written)

    if args.report:
        report.generate_report(args.report, state, resolved=resolved)
        logger.info("Resolution report written to %s", args.report)

    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.relative_to:
        config["input"]["relative_to"] = args.relative_to
    if args.early_stop_after is not None:
        config["scan"]["early_stop_after"] = args.early_stop_after
    if args.revisit_policy:
        config["scan"]["revisit_policy"] = args.revisit_policy
    validate_config(config)
    return config


def _resolve_input_path(
    input_file: str, config: dict[str, Any], program_dir: Path
) -> Path | None:
    """Join the input argument to its base directory and canonicalize it."""
    if config["input"]["relative_to"] == "cwd":
        base = Path.cwd()
    else:
        base = program_dir
    try:
        return canonicalize(base / input_file)
    except (OSError, RuntimeError) as exc:
        logger.error(
            "Error resolving canonical path for initial input file: %s (%s)",
            input_file,
            exc,
        )
        return None


def _open_sink(
    output_file: str | None, encoding: str
) -> contextlib.AbstractContextManager[TextIO]:
    """Open the explicit output file, or wrap stdout without closing it.

    Both encode with ``surrogateescape`` so bytes the input encoding could not
    decode are written back unchanged.
    """
    if output_file:
        return open(  # noqa: SIM115
            output_file, "w", encoding=encoding, errors="surrogateescape"
        )
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="surrogateescape")
    return contextlib.nullcontext(sys.stdout)
