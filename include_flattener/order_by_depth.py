"""Logic for deriving the emission order of resolved files."""

from pathlib import Path

from include_flattener.resolution_state import ResolutionState


def order_by_depth(state: ResolutionState) -> list[Path]:
    """Return paths sorted by depth, deepest first.

    The sort is stable, so files at equal depth keep their discovery order.
    """
    pairs = [(vf.depth, vf.path) for vf in state.visited_files()]
    pairs.sort(key=lambda pair: pair[0], reverse=True)
    return [path for _, path in pairs]
