# File: src/wall_level_splitter/wall_data/wall_types.py

"""Data models for walls and levels.

Defines the entities the splitter reads from the model store. All lengths
are in feet (the host model's internal unit).

Key Types:
    Level: Horizontal reference plane used as a split boundary
    TopConstraint: Either LevelConstrained or Unconnected
    WallSpec: Everything the splitter needs to know about one wall
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


# =============================================================================
# Enumerations
# =============================================================================


class WallKind(Enum):
    """Wall system family."""

    BASIC = "basic"
    """Single straight wall; the only kind that can be split."""

    CURTAIN = "curtain"
    STACKED = "stacked"


class CrossSection(Enum):
    """Wall cross-section shape."""

    VERTICAL = "vertical"
    SLANTED = "slanted"
    """Created segments are always vertical, see DESIGN.md."""


class TopMode(Enum):
    """How a wall's top is defined."""

    LEVEL = "level"
    UNCONNECTED = "unconnected"


# =============================================================================
# Data Models
# =============================================================================


@dataclass(frozen=True)
class Level:
    """A horizontal reference plane.

    Attributes:
        id: Element id in the model store
        name: Display name
        elevation: Elevation in feet
    """
    id: int
    name: str
    elevation: float


@dataclass(frozen=True)
class LevelConstrained:
    """Top attached to a level, optionally offset."""
    level_id: int
    top_offset: float = 0.0

    @property
    def mode(self) -> TopMode:
        return TopMode.LEVEL


@dataclass(frozen=True)
class Unconnected:
    """Top defined as a height above the wall base."""
    height: float

    @property
    def mode(self) -> TopMode:
        return TopMode.UNCONNECTED


TopConstraint = Union[LevelConstrained, Unconnected]


@dataclass(frozen=True)
class WallSpec:
    """A linear wall as seen by the splitter.

    Attributes:
        id: Element id in the model store
        wall_type_id: Id of the wall type, inherited by every segment
        location_curve: Host curve object; copied verbatim, never inspected.
            None means the wall has no location curve.
        flipped: Flip flag
        structural: Structural flag
        base_level_id: Base constraint level id, None when the wall has none
        base_offset: Offset from the base level (feet)
        top_constraint: LevelConstrained or Unconnected
        kind: Wall system family
        has_edited_profile: True when the elevation profile was sketched
        cross_section: Vertical or slanted
    """
    id: int
    wall_type_id: int
    location_curve: Any
    flipped: bool
    structural: bool
    base_level_id: Optional[int]
    base_offset: float
    top_constraint: TopConstraint
    kind: WallKind = WallKind.BASIC
    has_edited_profile: bool = False
    cross_section: CrossSection = CrossSection.VERTICAL


@dataclass(frozen=True)
class Point3D:
    """Point in model coordinates (feet)."""
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class LineCurve:
    """Straight location curve used by the in-memory store."""
    start: Point3D
    end: Point3D
