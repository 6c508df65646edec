# File: src/wall_level_splitter/wall_data/__init__.py
"""
Wall and level data models.

Example:
    >>> from wall_level_splitter.wall_data import Level, normalize_levels
    >>> levels = normalize_levels([Level(2, "L2", 10.0), Level(1, "L1", 0.0)])
    >>> [lv.name for lv in levels]
    ['L1', 'L2']
"""

from .wall_types import (
    WallKind,
    CrossSection,
    TopMode,
    Level,
    LevelConstrained,
    Unconnected,
    TopConstraint,
    WallSpec,
    Point3D,
    LineCurve,
)

from .parameters import (
    ParameterKey,
    StorageKind,
    ParameterWriteStatus,
    CopyStatus,
    ParameterValue,
    ParameterCopyOutcome,
)

from .levels import normalize_levels

__all__ = [
    # Walls and levels
    "WallKind",
    "CrossSection",
    "TopMode",
    "Level",
    "LevelConstrained",
    "Unconnected",
    "TopConstraint",
    "WallSpec",
    "Point3D",
    "LineCurve",
    # Parameters
    "ParameterKey",
    "StorageKind",
    "ParameterWriteStatus",
    "CopyStatus",
    "ParameterValue",
    "ParameterCopyOutcome",
    # Normalization
    "normalize_levels",
]
