"""Canonical absolute path helpers."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def canonicalize(path: Path) -> Path:
    """Return the symlink-resolved absolute form of an existing path.

    Raises OSError (FileNotFoundError included) or RuntimeError on a symlink
    loop when the path cannot be canonicalized.
    """
    return Path(path).resolve(strict=True)


def normalize_include_path(path: Path) -> Path:
    """Canonicalize an included path, keeping it as-is on failure."""
    try:
        return canonicalize(path)
    except (OSError, RuntimeError) as exc:
        logger.warning(
            "Error resolving canonical path for included file: %s (%s)", path, exc
        )
        return path
