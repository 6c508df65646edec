# File: src/wall_level_splitter/splitting/report.py
"""
Plain-text run report.

The report opens with the created / replaced / skipped counts, followed by
one diagnostic block per skipped wall with its resolved elevations and the
full list of candidate levels. Lengths are converted to the configured
display units.
"""

from typing import List, Optional

from ..config.splitting import SPLIT_RULE_TEXT, get_split_param
from ..config.units import ProjectUnits, convert_from_feet, get_display_units, unit_suffix
from ..wall_data.wall_types import TopMode
from .split_types import ResolvedHeights, RunSummary, WallSkip


def _fmt(value_ft: float, units: ProjectUnits) -> str:
    decimals = get_split_param("display_decimals")
    return f"{convert_from_feet(value_ft, units):.{decimals}f}"


def _height_lines(heights: Optional[ResolvedHeights], units: ProjectUnits) -> List[str]:
    if heights is None:
        return ["(height info unavailable)"]

    u = unit_suffix(units)
    lines = [
        f"Base: {heights.base_level.name}  baseElev({u})={_fmt(heights.base_elevation, units)}"
        f"  (BaseOffset {u}={_fmt(heights.base_offset, units)})"
    ]
    if heights.top_elevation is None:
        lines.append(f"Top : (unresolved level)  topElev({u})=n/a"
                     f"  (TopOffset {u}={_fmt(heights.top_offset, units)})")
    elif heights.top_mode is TopMode.LEVEL:
        lines.append(f"Top : {heights.top_level.name}  topElev({u})={_fmt(heights.top_elevation, units)}"
                     f"  (TopOffset {u}={_fmt(heights.top_offset, units)})")
    else:
        lines.append(f"Top : Unconnected topElev({u})={_fmt(heights.top_elevation, units)}"
                     f"  (Height {u}={_fmt(heights.unconnected_height, units)})")
    return lines


def format_skip_diagnostic(skip: WallSkip, units: Optional[ProjectUnits] = None) -> str:
    """Render the diagnostic block for one skipped wall."""
    units = units or get_display_units()
    u = unit_suffix(units)
    width = get_split_param("level_name_width")

    lines = [
        f"WallId: {skip.wall_id}",
        f"Reason: {skip.reason.message}",
        "",
    ]
    lines.extend(_height_lines(skip.heights, units))
    lines.append("")
    lines.append(f"Selected Levels ({len(skip.levels)}):")
    for level in skip.levels:
        lines.append(f"{level.name:<{width}} elev({u})={_fmt(level.elevation, units)}")
    lines.append("")
    lines.append("Split rule: levels must be strictly BETWEEN baseElev and topElev.")
    return "\n".join(lines)


def format_run_report(summary: RunSummary, units: Optional[ProjectUnits] = None) -> str:
    """Render the whole run: counts, split rule and every skip diagnostic."""
    sections = [
        "\n".join([
            "Done.",
            f"Created walls: {summary.created_segment_count}",
            f"Replaced original walls: {summary.replaced_wall_count}",
            f"Skipped elements: {summary.skipped_count}",
            "",
            SPLIT_RULE_TEXT,
        ])
    ]
    for skip in summary.skips:
        sections.append(format_skip_diagnostic(skip, units))
    return "\n\n".join(sections)
