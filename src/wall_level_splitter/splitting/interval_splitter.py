# File: src/wall_level_splitter/splitting/interval_splitter.py
"""Intersects ordered boundary levels with a wall's height interval."""

from typing import Sequence

from ..config.splitting import EPS
from ..utils.logging_config import get_logger
from ..wall_data.wall_types import Level
from .split_types import ResolvedHeights, SplitPlan

logger = get_logger(__name__)


def is_split_boundary(level: Level, heights: ResolvedHeights, eps: float = EPS) -> bool:
    """True when the level lies strictly inside (base + eps, top - eps).

    Levels within eps of the base or top coincide with an existing wall
    end and are never boundaries.
    """
    return heights.base_elevation + eps < level.elevation < heights.top_elevation - eps


def plan_splits(
    heights: ResolvedHeights,
    levels: Sequence[Level],
    eps: float = EPS,
) -> SplitPlan:
    """Select the boundary levels for one wall.

    Args:
        heights: Resolved wall heights
        levels: Normalized levels (unique, ascending)
        eps: Elevation tolerance (feet)

    Returns:
        SplitPlan in ascending elevation order. An empty plan means no
        level falls inside the wall and the wall must be left untouched.
    """
    boundaries = []
    for level in levels:
        inside = is_split_boundary(level, heights, eps)
        logger.trace(
            f"Level {level.name} at {level.elevation:.6f}: "
            f"{'boundary' if inside else 'outside'}"
        )
        if inside:
            boundaries.append(level)

    # Callers may pass un-normalized levels
    boundaries.sort(key=lambda lv: lv.elevation)
    return SplitPlan(boundaries=tuple(boundaries))
