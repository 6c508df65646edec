# File: src/wall_level_splitter/splitting/height_resolver.py
"""
Wall height resolution.

Derives a wall's absolute base and top elevations from its constraint
parameters:

    base = base_level.elevation + base_offset
    top  = top_level.elevation + top_offset     (top constrained to a level)
    top  = base + unconnected_height            (unconnected top)

A wall whose top does not clear its base by more than EPS is rejected.
"""

from ..config.splitting import EPS
from ..store.base import ModelStore
from ..utils.logging_config import get_logger
from ..wall_data.wall_types import LevelConstrained, TopMode, WallSpec
from .errors import WallSkipped
from .split_types import ResolvedHeights, SkipReason

logger = get_logger(__name__)


def resolve_heights(wall: WallSpec, store: ModelStore, eps: float = EPS) -> ResolvedHeights:
    """Resolve the base and top elevation of a wall.

    Args:
        wall: Wall to resolve
        store: Store used to look up the base and top levels
        eps: Minimum height a wall must exceed (feet)

    Returns:
        ResolvedHeights with top_elevation > base_elevation + eps

    Raises:
        WallSkipped: MISSING_BASE_CONSTRAINT, NULL_BASE_LEVEL, NULL_TOP_LEVEL
            or INVALID_HEIGHT_RANGE
    """
    if wall.base_level_id is None:
        raise WallSkipped(wall.id, SkipReason.MISSING_BASE_CONSTRAINT)

    base_level = store.get_level(wall.base_level_id)
    if base_level is None:
        raise WallSkipped(wall.id, SkipReason.NULL_BASE_LEVEL)

    base_elevation = base_level.elevation + wall.base_offset
    top = wall.top_constraint

    if isinstance(top, LevelConstrained):
        top_level = store.get_level(top.level_id)
        if top_level is None:
            # Keep what is known for the diagnostic
            partial = ResolvedHeights(
                base_level=base_level,
                base_offset=wall.base_offset,
                base_elevation=base_elevation,
                top_mode=TopMode.LEVEL,
                top_offset=top.top_offset,
            )
            raise WallSkipped(wall.id, SkipReason.NULL_TOP_LEVEL, heights=partial)

        heights = ResolvedHeights(
            base_level=base_level,
            base_offset=wall.base_offset,
            base_elevation=base_elevation,
            top_mode=TopMode.LEVEL,
            top_elevation=top_level.elevation + top.top_offset,
            top_level=top_level,
            top_offset=top.top_offset,
        )
    else:
        heights = ResolvedHeights(
            base_level=base_level,
            base_offset=wall.base_offset,
            base_elevation=base_elevation,
            top_mode=TopMode.UNCONNECTED,
            top_elevation=base_elevation + top.height,
            unconnected_height=top.height,
        )

    if heights.top_elevation <= heights.base_elevation + eps:
        raise WallSkipped(wall.id, SkipReason.INVALID_HEIGHT_RANGE, heights=heights)

    logger.debug(
        f"Wall {wall.id}: base={heights.base_elevation:.6f} "
        f"top={heights.top_elevation:.6f} ({heights.top_mode.value})"
    )
    return heights
