# File: wall_level_splitter/config/__init__.py

"""
Configuration package for the wall level splitter.
Provides a unified interface to:
- Unit management and display conversion
- Splitting tolerance, parameter allow-list and transaction names
"""

from .units import (
    ProjectUnits,
    convert_from_feet,
    convert_to_feet,
    get_display_units,
    set_display_units,
    unit_suffix,
)

from .splitting import (
    EPS,
    SPLIT_PARAMS,
    CARRIED_PARAMETERS,
    SPLIT_RULE_TEXT,
    get_split_param,
)


def get_system_info() -> dict:
    """
    Returns an overview of the current configuration.
    Useful for debugging and validation.
    """
    return {
        "display_units": get_display_units().value,
        "split_params": dict(SPLIT_PARAMS),
        "carried_parameters": [key.value for key in CARRIED_PARAMETERS],
    }
