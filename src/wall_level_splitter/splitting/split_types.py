# File: src/wall_level_splitter/splitting/split_types.py

"""Data models produced while splitting walls.

ResolvedHeights, SplitPlan, SegmentCandidate and SegmentSpec live only for
the duration of one wall's processing. RunSummary lives for the whole
invocation. All measurements are in feet.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..wall_data.parameters import ParameterKey, ParameterValue
from ..wall_data.wall_types import Level, TopConstraint, TopMode


# =============================================================================
# Enumerations
# =============================================================================


class SkipReason(Enum):
    """Why a wall was left untouched."""

    UNSUPPORTED_WALL_KIND = "unsupported_wall_kind"
    EDITED_PROFILE = "edited_profile"
    MISSING_LOCATION_CURVE = "missing_location_curve"
    MISSING_BASE_CONSTRAINT = "missing_base_constraint"
    NULL_BASE_LEVEL = "null_base_level"
    NULL_TOP_LEVEL = "null_top_level"
    INVALID_HEIGHT_RANGE = "invalid_height_range"
    NO_BOUNDARY_IN_RANGE = "no_boundary_in_range"
    ZERO_SEGMENTS_COMPUTED = "zero_segments_computed"

    @property
    def message(self) -> str:
        return _SKIP_MESSAGES[self]


_SKIP_MESSAGES = {
    SkipReason.UNSUPPORTED_WALL_KIND: "Curtain and Stacked walls are not supported.",
    SkipReason.EDITED_PROFILE: "Wall has an edited profile.",
    SkipReason.MISSING_LOCATION_CURVE: "No LocationCurve (wall has no curve).",
    SkipReason.MISSING_BASE_CONSTRAINT: "Missing base constraint.",
    SkipReason.NULL_BASE_LEVEL: "Base Level is null.",
    SkipReason.NULL_TOP_LEVEL: "Top is constrained, but Top Level is null.",
    SkipReason.INVALID_HEIGHT_RANGE: "Top elevation <= Base elevation (invalid height).",
    SkipReason.NO_BOUNDARY_IN_RANGE: (
        "No selected levels fall strictly inside the wall height range."
    ),
    SkipReason.ZERO_SEGMENTS_COMPUTED: "Computed segments are zero (unexpected).",
}


# =============================================================================
# Per-wall Models
# =============================================================================


@dataclass(frozen=True)
class ResolvedHeights:
    """Base and top elevation of one wall.

    ``top_elevation`` is None only on partial results attached to a
    NULL_TOP_LEVEL skip. A successful resolution always satisfies
    ``top_elevation > base_elevation + EPS``.
    """
    base_level: Level
    base_offset: float
    base_elevation: float
    top_mode: TopMode
    top_elevation: Optional[float] = None
    top_level: Optional[Level] = None
    top_offset: float = 0.0
    unconnected_height: float = 0.0

    @property
    def height(self) -> float:
        if self.top_elevation is None:
            raise ValueError("Top elevation is unresolved")
        return self.top_elevation - self.base_elevation


@dataclass(frozen=True)
class SplitPlan:
    """Boundary levels strictly inside a wall's height range, ascending."""
    boundaries: Tuple[Level, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.boundaries

    def __len__(self) -> int:
        return len(self.boundaries)


@dataclass(frozen=True)
class SegmentCandidate:
    """One sub-interval of a wall before degenerate segments are dropped."""
    index: int
    base_level: Level
    base_offset: float
    base_elevation: float
    top_elevation: float
    top_constraint: TopConstraint

    @property
    def height(self) -> float:
        return self.top_elevation - self.base_elevation


@dataclass(frozen=True)
class SegmentSpec:
    """Everything the store needs to create one replacement wall."""
    location_curve: Any
    wall_type_id: int
    base_level_id: int
    base_offset: float
    height: float
    top_constraint: TopConstraint
    flipped: bool
    structural: bool
    carried_parameters: Mapping[ParameterKey, ParameterValue] = field(default_factory=dict)


# =============================================================================
# Run Models
# =============================================================================


@dataclass(frozen=True)
class WallSkip:
    """A skipped wall with the context needed for its diagnostic block."""
    wall_id: int
    reason: SkipReason
    levels: Tuple[Level, ...] = ()
    heights: Optional[ResolvedHeights] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "wall_id": self.wall_id,
            "reason": self.reason.value,
            "message": self.reason.message,
            "levels": [
                {"id": lv.id, "name": lv.name, "elevation": lv.elevation}
                for lv in self.levels
            ],
        }
        if self.heights is not None:
            data["base_elevation"] = self.heights.base_elevation
            data["top_elevation"] = self.heights.top_elevation
            data["top_mode"] = self.heights.top_mode.value
        return data


@dataclass
class RunSummary:
    """Outcome of one invocation.

    Attributes:
        created_segment_count: Segments created across all replaced walls
        replaced_wall_count: Original walls deleted after a full split
        skips: Skipped walls in processing order
        created_segment_ids: New segment ids keyed by original wall id
    """
    created_segment_count: int = 0
    replaced_wall_count: int = 0
    skips: List[WallSkip] = field(default_factory=list)
    created_segment_ids: Dict[int, List[int]] = field(default_factory=dict)

    @property
    def skipped_count(self) -> int:
        return len(self.skips)

    def record_skip(self, skip: WallSkip) -> None:
        self.skips.append(skip)

    def record_replacement(self, wall_id: int, segment_ids: List[int]) -> None:
        self.replaced_wall_count += 1
        self.created_segment_count += len(segment_ids)
        self.created_segment_ids[wall_id] = list(segment_ids)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "created_segment_count": self.created_segment_count,
            "replaced_wall_count": self.replaced_wall_count,
            "skipped_count": self.skipped_count,
            "skips": [skip.to_dict() for skip in self.skips],
            "created_segment_ids": {
                str(wall_id): ids for wall_id, ids in self.created_segment_ids.items()
            },
        }
