# File: tests/splitting/test_height_resolver.py
"""Unit tests for wall height resolution and eligibility."""

import logging

import pytest

from wall_level_splitter.splitting.eligibility import check_wall_supported
from wall_level_splitter.splitting.errors import WallSkipped
from wall_level_splitter.splitting.height_resolver import resolve_heights
from wall_level_splitter.splitting.split_types import SkipReason
from wall_level_splitter.wall_data.wall_types import (
    CrossSection,
    LevelConstrained,
    TopMode,
    Unconnected,
    WallKind,
)

from conftest import make_curve


# =============================================================================
# Eligibility
# =============================================================================


class TestEligibility:
    """Tests for check_wall_supported."""

    def test_basic_wall_accepted(self, level_wall):
        check_wall_supported(level_wall)

    @pytest.mark.parametrize("kind", [WallKind.CURTAIN, WallKind.STACKED])
    def test_unsupported_kind(self, store, levels, kind):
        wall = store.add_wall(levels[0].id, Unconnected(10.0), curve=make_curve(), kind=kind)

        with pytest.raises(WallSkipped) as exc_info:
            check_wall_supported(wall)

        assert exc_info.value.reason is SkipReason.UNSUPPORTED_WALL_KIND

    def test_edited_profile(self, store, levels):
        wall = store.add_wall(
            levels[0].id, Unconnected(10.0), curve=make_curve(), has_edited_profile=True
        )

        with pytest.raises(WallSkipped) as exc_info:
            check_wall_supported(wall)

        assert exc_info.value.reason is SkipReason.EDITED_PROFILE

    def test_missing_curve(self, store, levels):
        wall = store.add_wall(levels[0].id, Unconnected(10.0), curve=None)

        with pytest.raises(WallSkipped) as exc_info:
            check_wall_supported(wall)

        assert exc_info.value.reason is SkipReason.MISSING_LOCATION_CURVE

    def test_slanted_wall_warns_but_passes(self, store, levels, caplog):
        wall = store.add_wall(
            levels[0].id, Unconnected(10.0), curve=make_curve(),
            cross_section=CrossSection.SLANTED,
        )

        with caplog.at_level(logging.WARNING):
            check_wall_supported(wall)

        assert "slanted" in caplog.text


# =============================================================================
# Height Resolution
# =============================================================================


class TestResolveHeights:
    """Tests for resolve_heights."""

    def test_level_constrained(self, store, level_wall):
        heights = resolve_heights(level_wall, store)

        assert heights.base_elevation == 0.0
        assert heights.top_elevation == 10.0
        assert heights.top_mode is TopMode.LEVEL
        assert heights.top_level.name == "Level 10"
        assert heights.height == 10.0

    def test_offsets_applied(self, store, levels):
        wall = store.add_wall(
            levels[3].id,
            LevelConstrained(levels[10].id, top_offset=-1.5),
            curve=make_curve(),
            base_offset=0.5,
        )

        heights = resolve_heights(wall, store)

        assert heights.base_elevation == pytest.approx(3.5)
        assert heights.top_elevation == pytest.approx(8.5)
        assert heights.top_offset == -1.5

    def test_unconnected(self, store, unconnected_wall):
        heights = resolve_heights(unconnected_wall, store)

        assert heights.top_mode is TopMode.UNCONNECTED
        assert heights.top_level is None
        assert heights.top_elevation == 10.0
        assert heights.unconnected_height == 10.0

    def test_missing_base_constraint(self, store):
        wall = store.add_wall(None, Unconnected(10.0), curve=make_curve())

        with pytest.raises(WallSkipped) as exc_info:
            resolve_heights(wall, store)

        assert exc_info.value.reason is SkipReason.MISSING_BASE_CONSTRAINT

    def test_null_base_level(self, store):
        wall = store.add_wall(999, Unconnected(10.0), curve=make_curve())

        with pytest.raises(WallSkipped) as exc_info:
            resolve_heights(wall, store)

        assert exc_info.value.reason is SkipReason.NULL_BASE_LEVEL
        assert exc_info.value.heights is None

    def test_null_top_level_keeps_partial_heights(self, store, levels):
        wall = store.add_wall(levels[0].id, LevelConstrained(999), curve=make_curve())

        with pytest.raises(WallSkipped) as exc_info:
            resolve_heights(wall, store)

        skip = exc_info.value
        assert skip.reason is SkipReason.NULL_TOP_LEVEL
        assert skip.heights.base_elevation == 0.0
        assert skip.heights.top_elevation is None

    def test_top_below_base(self, store, levels):
        wall = store.add_wall(levels[7].id, LevelConstrained(levels[3].id), curve=make_curve())

        with pytest.raises(WallSkipped) as exc_info:
            resolve_heights(wall, store)

        assert exc_info.value.reason is SkipReason.INVALID_HEIGHT_RANGE
        assert exc_info.value.heights.top_elevation == 3.0

    def test_zero_height_within_eps(self, store, levels):
        wall = store.add_wall(levels[0].id, Unconnected(5e-7), curve=make_curve())

        with pytest.raises(WallSkipped) as exc_info:
            resolve_heights(wall, store)

        assert exc_info.value.reason is SkipReason.INVALID_HEIGHT_RANGE
