# File: tests/config/test_units.py
"""Unit tests for unit conversion and split configuration."""

import pytest

from wall_level_splitter.config import get_system_info
from wall_level_splitter.config.splitting import EPS, get_split_param
from wall_level_splitter.config.units import (
    ProjectUnits,
    convert_from_feet,
    convert_to_feet,
    get_display_units,
    set_display_units,
    unit_suffix,
)


class TestConversion:
    """Tests for feet conversions."""

    def test_feet_to_millimeters(self):
        assert convert_from_feet(1.0, ProjectUnits.MILLIMETERS) == pytest.approx(304.8)

    def test_string_units(self):
        assert convert_from_feet(2.0, "inches") == pytest.approx(24.0)

    def test_round_trip_meters(self):
        assert convert_to_feet(convert_from_feet(10.0, "meters"), "meters") == pytest.approx(10.0)

    def test_unknown_unit_raises(self):
        with pytest.raises(ValueError):
            convert_from_feet(1.0, "cubits")

    def test_suffix(self):
        assert unit_suffix(ProjectUnits.MILLIMETERS) == "mm"


class TestDisplayUnits:
    """Tests for the display unit setting."""

    def test_default_is_millimeters(self):
        assert get_display_units() is ProjectUnits.MILLIMETERS

    def test_set_and_restore(self):
        set_display_units("feet")
        try:
            assert get_display_units() is ProjectUnits.FEET
        finally:
            set_display_units(ProjectUnits.MILLIMETERS)

    def test_set_rejects_bad_type(self):
        with pytest.raises(ValueError):
            set_display_units(3)


class TestSplitParams:
    """Tests for split parameter lookup."""

    def test_eps(self):
        assert get_split_param("eps") == EPS == 1e-6

    def test_unknown_param(self):
        with pytest.raises(KeyError):
            get_split_param("nope")

    def test_system_info(self):
        info = get_system_info()
        assert info["carried_parameters"] == [
            "room_bounding", "comments", "mark", "location_line"
        ]
