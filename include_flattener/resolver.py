"""Recursive resolution of `#include "..."` directives.

The resolver walks the include graph depth first, starting at the root file,
and records every canonical path it manages to open in a ResolutionState
together with the deepest include level it was reached at. That depth is
what later decides the emission order, so a file included again from a
deeper level only gets its number bumped: its own includes were already
followed on the first visit.

Only the top of each file is scanned. Once ``early_stop_after`` consecutive
lines pass without a directive, the rest of the file is ignored.
"""

import logging
from pathlib import Path

from include_flattener.canonicalize import normalize_include_path
from include_flattener.errors import MalformedIncludeError
from include_flattener.include_directive import DEFAULT_PREFIX, parse_include_directive
from include_flattener.resolution_state import ResolutionState

logger = logging.getLogger(__name__)

DEFAULT_EARLY_STOP_AFTER = 5
REVISIT_RESCAN = "rescan"
REVISIT_ONCE = "once"
REVISIT_POLICIES = (REVISIT_RESCAN, REVISIT_ONCE)


class Resolver:
    """Builds a ResolutionState from a root file."""

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        early_stop_after: int = DEFAULT_EARLY_STOP_AFTER,
        revisit_policy: str = REVISIT_RESCAN,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the resolver with its scanning rules."""
        if revisit_policy not in REVISIT_POLICIES:
            msg = f"Unknown revisit policy: {revisit_policy!r}"
            raise ValueError(msg)
        self.prefix = prefix
        self.early_stop_after = early_stop_after
        self.revisit_policy = revisit_policy
        self.encoding = encoding

    def resolve(
        self,
        file_path: Path,
        base_dir: Path,
        state: ResolutionState,
        depth: int = 0,
    ) -> bool:
        """Resolve ``file_path`` and everything it includes into ``state``.

        ``base_dir`` is the directory relative include names are joined to.
        Returns False when this file, or a file it includes, cannot be
        opened. In that case this file's entry is removed from the state,
        while entries recorded for siblings that resolved earlier are kept.
        """
        recorded = state.depth_of(file_path)
        if recorded is not None:
            if recorded < depth:
                logger.debug(
                    "Revisit of %s at depth %d (was %d), not rescanning",
                    file_path,
                    depth,
                    recorded,
                )
                state.record(file_path, depth)
                return True
            if self.revisit_policy == REVISIT_ONCE:
                return True
            logger.debug("Rescanning %s at depth %d", file_path, depth)
        else:
            state.record(file_path, depth)

        try:
            handle = open(  # noqa: SIM115
                file_path, encoding=self.encoding, errors="surrogateescape"
            )
        except OSError as exc:
            logger.error("Could not open file: %s (%s)", file_path, exc)
            state.discard(file_path)
            return False

        with handle:
            misses = 0
            for raw_line in handle:
                if misses >= self.early_stop_after:
                    break
                line = raw_line.rstrip("\r\n")
                try:
                    directive = parse_include_directive(line, self.prefix)
                except MalformedIncludeError:
                    logger.warning(
                        "Malformed #include directive in %s: %s", file_path, line
                    )
                    continue

                if directive is None:
                    misses += 1
                    continue

                included = normalize_include_path(base_dir / directive.name)
                if not self.resolve(included, included.parent, state, depth + 1):
                    state.discard(file_path)
                    return False
                misses = 0

        return True
