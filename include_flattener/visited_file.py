"""Data model for a file discovered during include resolution."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class VisitedFile:
    """A canonical file path and the deepest include level it was reached at."""

    path: Path
    depth: int  # 0 for the root file
