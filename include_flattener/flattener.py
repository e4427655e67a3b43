"""Emission of resolved files as a single include-free text stream."""

import logging
from typing import TextIO

from include_flattener.order_by_depth import order_by_depth
from include_flattener.resolution_state import ResolutionState

logger = logging.getLogger(__name__)

DEFAULT_STRIP_MARKER = "#include"


def flatten(
    state: ResolutionState,
    sink: TextIO,
    marker: str = DEFAULT_STRIP_MARKER,
    encoding: str = "utf-8",
) -> int:
    """Write the body of every resolved file to ``sink``, deepest first.

    Any line containing ``marker`` anywhere is dropped. Undecodable bytes are
    carried through as surrogates, so ``sink`` must encode with
    ``errors="surrogateescape"`` to reproduce them. Files that cannot be
    opened any more are skipped with a warning. Returns the number of files
    written.
    """
    written = 0
    for path in order_by_depth(state):
        try:
            handle = open(  # noqa: SIM115
                path, encoding=encoding, errors="surrogateescape"
            )
        except OSError as exc:
            logger.warning("Could not open input file: %s (%s)", path, exc)
            continue

        with handle:
            for raw_line in handle:
                line = raw_line.rstrip("\r\n")
                if marker in line:
                    continue
                sink.write(line + "\n")
        written += 1

    return written
