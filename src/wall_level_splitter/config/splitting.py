# File: wall_level_splitter/config/splitting.py

"""
Splitting-specific configuration.

Contains the elevation tolerance, the parameter allow-list copied onto new
segments, and the names used for the host transaction group.
"""

from typing import Any, Dict, Tuple

from ..wall_data.parameters import ParameterKey


# Tolerance for every elevation comparison (feet)
EPS = 1e-6

SPLIT_PARAMS: Dict[str, Any] = {
    "eps": EPS,
    "display_decimals": 1,
    "level_name_width": 20,
    "transaction_group_name": "Split Basic Walls by Selected Levels",
    "transaction_name": "Split",
}

# Instance parameters copied value-by-value from a wall to each segment
CARRIED_PARAMETERS: Tuple[ParameterKey, ...] = (
    ParameterKey.ROOM_BOUNDING,
    ParameterKey.COMMENTS,
    ParameterKey.MARK,
    ParameterKey.LOCATION_LINE,
)

SPLIT_RULE_TEXT = (
    "Rule: Only selected Levels strictly between wall Base and Top are used "
    "as split boundaries."
)


def get_split_param(name: str) -> Any:
    """
    Look up a splitting parameter by name.

    Raises:
        KeyError: If the parameter is unknown
    """
    if name not in SPLIT_PARAMS:
        raise KeyError(
            f"Unknown split parameter: {name}. "
            f"Valid parameters: {sorted(SPLIT_PARAMS)}"
        )
    return SPLIT_PARAMS[name]
