"""JSON report of a resolution run."""

import json
import time
from collections import Counter
from pathlib import Path
from typing import Any

from include_flattener.order_by_depth import order_by_depth
from include_flattener.resolution_state import ResolutionState


class ResolutionReport:
    """Collects the outcome of one run and writes it as JSON."""

    def __init__(self, config_hash: str, root: Path) -> None:
        """Start timing a run for the given root file."""
        self.config_hash = config_hash
        self.root = root
        self.start_time = time.time()

    def build(self, state: ResolutionState, *, resolved: bool) -> dict[str, Any]:
        """Return the report as a JSON-serializable dictionary."""
        ordered = order_by_depth(state)
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "root": str(self.root),
                "resolved": resolved,
                "total_files": len(ordered),
            },
            "files": [
                {"path": str(path), "depth": state.depth_of(path)} for path in ordered
            ],
            "stats": self._compute_stats(state),
        }

    def generate_report(
        self, path: str | Path, state: ResolutionState, *, resolved: bool
    ) -> None:
        """Write the report to ``path``."""
        report = self.build(state, resolved=resolved)
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self, state: ResolutionState) -> dict[str, Any]:
        depths = Counter(vf.depth for vf in state.visited_files())
        return {
            "max_depth": max(depths, default=0),
            # JSON object keys are strings
            "depth_counts": {str(d): n for d, n in sorted(depths.items())},
        }
