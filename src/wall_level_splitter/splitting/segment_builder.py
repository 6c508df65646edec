# File: src/wall_level_splitter/splitting/segment_builder.py
"""
Segment construction.

Turns a split plan into the replacement walls for one original wall. For N
boundary levels b[0..N-1] there are N+1 candidate segments:

    segment 0    original base (level + offset) -> b[0]
    segment i    b[i-1] -> b[i], base offset 0
    segment N    b[N-1] -> original top, keeping the original top mode

Candidates no taller than EPS are dropped. Every segment keeps the original
curve, wall type, flip and structural flag.

Example:
    >>> plan = plan_splits(heights, levels)
    >>> carried = read_carried_parameters(store, wall.id)
    >>> specs = build_segments(wall, heights, plan, carried)
"""

from typing import Dict, Iterable, List, Mapping, Optional

from ..config.splitting import CARRIED_PARAMETERS, EPS
from ..store.base import ModelStore
from ..utils.logging_config import get_logger
from ..wall_data.parameters import ParameterKey, ParameterValue
from ..wall_data.wall_types import Level, LevelConstrained, Unconnected, WallSpec
from .errors import WallSkipped
from .split_types import (
    ResolvedHeights,
    SegmentCandidate,
    SegmentSpec,
    SkipReason,
    SplitPlan,
)

logger = get_logger(__name__)


def candidate_segments(
    wall: WallSpec,
    heights: ResolvedHeights,
    plan: SplitPlan,
) -> List[SegmentCandidate]:
    """List every candidate segment, degenerate ones included.

    Args:
        wall: Original wall
        heights: Its resolved heights
        plan: Non-empty split plan

    Returns:
        N+1 candidates, bottom to top. Their heights always sum to the
        original wall height.
    """
    if plan.is_empty:
        raise ValueError(f"Wall {wall.id}: cannot build segments from an empty plan")

    boundaries = plan.boundaries
    candidates: List[SegmentCandidate] = []

    first = boundaries[0]
    candidates.append(SegmentCandidate(
        index=0,
        base_level=heights.base_level,
        base_offset=heights.base_offset,
        base_elevation=heights.base_elevation,
        top_elevation=first.elevation,
        top_constraint=LevelConstrained(level_id=first.id, top_offset=0.0),
    ))

    for i in range(1, len(boundaries)):
        lower, upper = boundaries[i - 1], boundaries[i]
        candidates.append(SegmentCandidate(
            index=i,
            base_level=lower,
            base_offset=0.0,
            base_elevation=lower.elevation,
            top_elevation=upper.elevation,
            top_constraint=LevelConstrained(level_id=upper.id, top_offset=0.0),
        ))

    last = boundaries[-1]
    candidates.append(SegmentCandidate(
        index=len(boundaries),
        base_level=last,
        base_offset=0.0,
        base_elevation=last.elevation,
        top_elevation=heights.top_elevation,
        top_constraint=_final_top_constraint(heights, last),
    ))

    return candidates


def _final_top_constraint(heights: ResolvedHeights, last: Level):
    """Original top mode, re-expressed for a segment based on ``last``."""
    if heights.top_level is not None:
        return LevelConstrained(level_id=heights.top_level.id, top_offset=heights.top_offset)
    return Unconnected(height=heights.top_elevation - last.elevation)


def build_segments(
    wall: WallSpec,
    heights: ResolvedHeights,
    plan: SplitPlan,
    carried: Optional[Mapping[ParameterKey, ParameterValue]] = None,
    eps: float = EPS,
) -> List[SegmentSpec]:
    """Build the replacement segment specs for one wall.

    Args:
        wall: Original wall
        heights: Its resolved heights
        plan: Non-empty split plan
        carried: Parameter values read from the original wall
        eps: Minimum segment height (feet)

    Returns:
        Segment specs, bottom to top

    Raises:
        WallSkipped: ZERO_SEGMENTS_COMPUTED when every candidate is degenerate
    """
    carried = dict(carried or {})
    specs: List[SegmentSpec] = []

    for candidate in candidate_segments(wall, heights, plan):
        if candidate.height <= eps:
            logger.debug(
                f"Wall {wall.id}: dropping degenerate segment {candidate.index} "
                f"(height {candidate.height:.9f})"
            )
            continue

        specs.append(SegmentSpec(
            location_curve=wall.location_curve,
            wall_type_id=wall.wall_type_id,
            base_level_id=candidate.base_level.id,
            base_offset=candidate.base_offset,
            height=candidate.height,
            top_constraint=candidate.top_constraint,
            flipped=wall.flipped,
            structural=wall.structural,
            carried_parameters=carried,
        ))

    if not specs:
        raise WallSkipped(wall.id, SkipReason.ZERO_SEGMENTS_COMPUTED, heights=heights)

    return specs


def read_carried_parameters(
    store: ModelStore,
    wall_id: int,
    keys: Iterable[ParameterKey] = CARRIED_PARAMETERS,
) -> Dict[ParameterKey, ParameterValue]:
    """Read the allow-listed parameters the wall exposes."""
    carried: Dict[ParameterKey, ParameterValue] = {}
    for key in keys:
        value = store.get_parameter(wall_id, key)
        if value is not None:
            carried[key] = value
    return carried
