# File: src/wall_level_splitter/splitting/eligibility.py
"""Checks that a wall is a plain basic wall the splitter can rebuild."""

from ..utils.logging_config import get_logger
from ..wall_data.wall_types import CrossSection, WallKind, WallSpec
from .errors import WallSkipped
from .split_types import SkipReason

logger = get_logger(__name__)


def check_wall_supported(wall: WallSpec) -> None:
    """Raise WallSkipped unless the wall can be split.

    Curtain and stacked walls, profile-edited walls and walls without a
    location curve are rejected. Slanted walls are accepted; their segments
    come out vertical.
    """
    if wall.kind in (WallKind.CURTAIN, WallKind.STACKED):
        raise WallSkipped(wall.id, SkipReason.UNSUPPORTED_WALL_KIND)

    if wall.has_edited_profile:
        raise WallSkipped(wall.id, SkipReason.EDITED_PROFILE)

    if wall.location_curve is None:
        raise WallSkipped(wall.id, SkipReason.MISSING_LOCATION_CURVE)

    if wall.cross_section is CrossSection.SLANTED:
        logger.warning(
            f"Wall {wall.id} is slanted; its segments will be created vertical"
        )
