"""Bookkeeping of visited files and the deepest depth each was reached at."""

import logging
from collections.abc import Iterator
from pathlib import Path

from include_flattener.errors import FrozenStateError
from include_flattener.visited_file import VisitedFile

logger = logging.getLogger(__name__)


class ResolutionState:
    """Mapping of canonical path to maximum include depth.

    Keys keep their first insertion order, which is the order files were
    discovered in. The state is mutated only while resolving and is frozen
    before anything reads it for output.
    """

    def __init__(self) -> None:
        """Create an empty, mutable state."""
        self._depths: dict[Path, int] = {}
        self._frozen = False

    def __contains__(self, path: object) -> bool:
        return path in self._depths

    def __len__(self) -> int:
        return len(self._depths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._depths)

    @property
    def frozen(self) -> bool:
        """Whether the state has been handed over for output."""
        return self._frozen

    def depth_of(self, path: Path) -> int | None:
        """Return the recorded depth for a path, or None if never visited."""
        return self._depths.get(path)

    def record(self, path: Path, depth: int) -> None:
        """Set the depth for a path, inserting it on first visit."""
        self._check_mutable()
        if depth < 0:
            msg = f"Depth must be non-negative, got {depth}"
            raise ValueError(msg)
        self._depths[path] = depth
        logger.debug("Recorded %s at depth %d", path, depth)

    def discard(self, path: Path) -> None:
        """Remove a path if present."""
        self._check_mutable()
        if self._depths.pop(path, None) is not None:
            logger.debug("Discarded %s", path)

    def visited_files(self) -> list[VisitedFile]:
        """Return the entries in discovery order."""
        return [VisitedFile(path, depth) for path, depth in self._depths.items()]

    def freeze(self) -> "ResolutionState":
        """Make the state read-only and return it."""
        self._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            msg = "Resolution state is frozen"
            raise FrozenStateError(msg)
