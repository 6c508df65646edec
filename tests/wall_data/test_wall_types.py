# File: tests/wall_data/test_wall_types.py
"""Unit tests for wall and parameter data models."""

import dataclasses

import pytest

from wall_level_splitter.wall_data.parameters import (
    CopyStatus,
    ParameterCopyOutcome,
    ParameterKey,
    ParameterValue,
    StorageKind,
)
from wall_level_splitter.wall_data.wall_types import (
    Level,
    LevelConstrained,
    LineCurve,
    Point3D,
    TopMode,
    Unconnected,
)


class TestWallTypes:
    """Tests for the wall data classes."""

    def test_top_modes(self):
        assert LevelConstrained(level_id=3).mode is TopMode.LEVEL
        assert LevelConstrained(level_id=3).top_offset == 0.0
        assert Unconnected(height=2.0).mode is TopMode.UNCONNECTED

    def test_level_is_frozen(self):
        level = Level(1, "L1", 0.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            level.elevation = 3.0

    def test_line_curve_value_equality(self):
        a = LineCurve(Point3D(0.0, 0.0), Point3D(3.0, 4.0))
        b = LineCurve(Point3D(0.0, 0.0, 0.0), Point3D(3.0, 4.0, 0.0))

        assert a == b


class TestParameters:
    """Tests for parameter values and outcomes."""

    @pytest.mark.parametrize("factory, storage", [
        (ParameterValue.integer, StorageKind.INTEGER),
        (ParameterValue.string, StorageKind.STRING),
        (ParameterValue.element_id, StorageKind.ELEMENT_ID),
    ])
    def test_factories(self, factory, storage):
        assert factory(1 if storage is not StorageKind.STRING else "a").storage is storage

    def test_key_str(self):
        assert str(ParameterKey.MARK) == "mark"

    def test_outcome_copied(self):
        assert ParameterCopyOutcome(ParameterKey.MARK, CopyStatus.COPIED).copied
        assert not ParameterCopyOutcome(ParameterKey.MARK, CopyStatus.READ_ONLY).copied
