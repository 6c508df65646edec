# File: wall_level_splitter/config/units.py

"""
Unit management and conversion for the wall level splitter.

Model values are always stored in feet (the host model's internal unit).
Only human-facing output is converted, to the configured display units.
"""

from enum import Enum
from typing import Union, Dict

class ProjectUnits(Enum):
    """
    Enumeration of supported length units.
    """
    FEET = "feet"
    INCHES = "inches"
    METERS = "meters"
    MILLIMETERS = "millimeters"

# Units used for reports and diagnostics
_DISPLAY_UNITS = ProjectUnits.MILLIMETERS

# Conversion factors to feet
_CONVERSION_TO_FEET: Dict[ProjectUnits, float] = {
    ProjectUnits.FEET: 1.0,
    ProjectUnits.INCHES: 1 / 12.0,
    ProjectUnits.METERS: 1 / 0.3048,
    ProjectUnits.MILLIMETERS: 1 / 304.8,
}

# Conversion factors from feet
_CONVERSION_FROM_FEET: Dict[ProjectUnits, float] = {
    ProjectUnits.FEET: 1.0,
    ProjectUnits.INCHES: 12.0,
    ProjectUnits.METERS: 0.3048,
    ProjectUnits.MILLIMETERS: 304.8,
}

_UNIT_SUFFIXES: Dict[ProjectUnits, str] = {
    ProjectUnits.FEET: "ft",
    ProjectUnits.INCHES: "in",
    ProjectUnits.METERS: "m",
    ProjectUnits.MILLIMETERS: "mm",
}


def _coerce_units(units: Union[ProjectUnits, str]) -> ProjectUnits:
    if isinstance(units, ProjectUnits):
        return units
    if isinstance(units, str):
        try:
            return ProjectUnits(units.lower())
        except ValueError:
            raise ValueError(f"Unsupported unit: {units}")
    raise ValueError(f"Units must be ProjectUnits enum or string, got {type(units)}")


def get_display_units() -> ProjectUnits:
    """
    Returns the units used for reports and diagnostics.
    """
    return _DISPLAY_UNITS

def set_display_units(units: Union[ProjectUnits, str]) -> None:
    """
    Sets the units used for reports and diagnostics.

    Args:
        units: Either a ProjectUnits enum value or a string matching an enum value

    Raises:
        ValueError: If the provided units are not supported
    """
    global _DISPLAY_UNITS
    _DISPLAY_UNITS = _coerce_units(units)

def unit_suffix(units: Union[ProjectUnits, str]) -> str:
    """Short label for a unit, e.g. "mm"."""
    return _UNIT_SUFFIXES[_coerce_units(units)]

def convert_to_feet(value: float, current_units: Union[ProjectUnits, str]) -> float:
    """
    Converts a value from the specified units to feet.

    Args:
        value: The numeric value to convert
        current_units: The units to convert from (ProjectUnits enum or string)

    Returns:
        The value converted to feet

    Raises:
        ValueError: If the provided units are not supported
    """
    return value * _CONVERSION_TO_FEET[_coerce_units(current_units)]

def convert_from_feet(value: float, target_units: Union[ProjectUnits, str]) -> float:
    """
    Converts a value from feet to the specified target units.

    Args:
        value: The numeric value in feet to convert
        target_units: The units to convert to (ProjectUnits enum or string)

    Returns:
        The converted value in the target units

    Raises:
        ValueError: If the provided units are not supported
    """
    return value * _CONVERSION_FROM_FEET[_coerce_units(target_units)]
