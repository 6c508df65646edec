# File: scripts/gh_split_walls_by_levels.py
"""Split Walls by Levels for Grasshopper (Rhino.Inside.Revit).

Splits basic Revit walls into vertically stacked walls at selected levels.
Each wall is replaced by its segments only when the split succeeds; walls
that cannot be split are left untouched and reported with a diagnostic.

Key Features:
1. Level-based Splitting
   - Only levels strictly between a wall's base and top are boundaries
   - Segments keep wall type, flip, structural flag and location line
   - The top segment keeps the original top constraint

2. Atomic Execution
   - All walls are processed in one transaction group
   - Any unexpected Revit error rolls back every change of the run

Environment:
    Rhino 8
    Grasshopper
    Rhino.Inside.Revit
    Python component (CPython 3)

Dependencies:
    - RhinoInside.Revit: Revit document access
    - wall_level_splitter.store.revit_store: Revit ModelStore adapter
    - wall_level_splitter.splitting: Splitting logic and report

Usage:
    1. Connect Revit walls to 'walls' and Revit levels to 'levels'
       (or connect one mixed selection to 'selection')
    2. Set 'run' to True to execute
    3. Read 'report' for counts and skip diagnostics

Input Requirements:
    walls (walls) - list[Wall]:
        Revit walls to split
        Required: No (if selection is given)
        Access: List

    levels (levels) - list[Level]:
        Revit levels used as split boundaries
        Required: No (if selection is given)
        Access: List

    selection (selection) - list[Element]:
        Mixed selection of walls and levels
        Required: No
        Access: List

    run (run) - bool:
        Boolean to trigger execution
        Required: Yes
        Access: Item

Outputs:
    summary_json (summary_json) - str:
        JSON string with counts, skips and created segment ids

    report (report) - str:
        Plain-text report with one diagnostic block per skipped wall

    debug_info (debug_info) - str:
        Debug information and status messages

Author: Wall Level Splitter
Version: 1.0.0
"""

# =============================================================================
# Imports
# =============================================================================

# Standard library
import sys
import json
import traceback

# .NET / CLR
import clr
clr.AddReference("Grasshopper")

import Grasshopper

# =============================================================================
# Revit API Setup (Rhino.Inside.Revit)
# =============================================================================

try:
    clr.AddReference("RevitAPI")
    clr.AddReference("RhinoInside.Revit")

    from RhinoInside.Revit import Revit

    REVIT_AVAILABLE = True
except ImportError as e:
    REVIT_AVAILABLE = False
    REVIT_IMPORT_ERROR = str(e)

# =============================================================================
# Force Module Reload (CPython 3 in Rhino 8)
# =============================================================================

_modules_to_clear = [k for k in sys.modules.keys() if 'wall_level_splitter' in k]
for mod in _modules_to_clear:
    del sys.modules[mod]

from wall_level_splitter.splitting import (
    InvalidSplitRequest,
    FatalStoreError,
    partition_selection,
    split_walls_by_levels,
    format_run_report,
)
from wall_level_splitter.store.revit_store import RevitModelStore, element_id_value

# =============================================================================
# Constants
# =============================================================================

COMPONENT_NAME = "Split Walls by Levels"
COMPONENT_NICKNAME = "SplitWalls"
COMPONENT_MESSAGE = "v1.0"
COMPONENT_CATEGORY = "Wall Tools"
COMPONENT_SUBCATEGORY = "Edit"

# =============================================================================
# Logging Utilities
# =============================================================================

def log_message(message, level="info"):
    """Log to console and optionally add GH runtime message.

    Args:
        message: The message to log
        level: One of "info", "warning", "error"
    """
    print(f"[{level.upper()}] {message}")

    if level == "warning":
        ghenv.Component.AddRuntimeMessage(
            Grasshopper.Kernel.GH_RuntimeMessageLevel.Warning, message)
    elif level == "error":
        ghenv.Component.AddRuntimeMessage(
            Grasshopper.Kernel.GH_RuntimeMessageLevel.Error, message)


def log_warning(message):
    """Log warning message (console + GH UI)."""
    log_message(message, "warning")


def log_error(message):
    """Log error message (console + GH UI)."""
    log_message(message, "error")

# =============================================================================
# Component Setup
# =============================================================================

def setup_component():
    """Initialize component metadata and parameter names.

    Note: Output[0] is reserved for GH's internal 'out' - start from Output[1]
    """
    ghenv.Component.Name = COMPONENT_NAME
    ghenv.Component.NickName = COMPONENT_NICKNAME
    ghenv.Component.Message = COMPONENT_MESSAGE
    ghenv.Component.Category = COMPONENT_CATEGORY
    ghenv.Component.SubCategory = COMPONENT_SUBCATEGORY

    inputs = ghenv.Component.Params.Input
    input_config = [
        ("Walls", "walls", "Revit walls to split", Grasshopper.Kernel.GH_ParamAccess.list),
        ("Levels", "levels", "Revit levels used as split boundaries", Grasshopper.Kernel.GH_ParamAccess.list),
        ("Selection", "selection", "Mixed selection of walls and levels", Grasshopper.Kernel.GH_ParamAccess.list),
        ("Run", "run", "Boolean to trigger execution", Grasshopper.Kernel.GH_ParamAccess.item),
    ]

    for i, (name, nick, desc, access) in enumerate(input_config):
        if i < inputs.Count:
            inputs[i].Name = name
            inputs[i].NickName = nick
            inputs[i].Description = desc
            inputs[i].Access = access

    outputs = ghenv.Component.Params.Output
    output_config = [
        ("Summary JSON", "summary_json", "JSON string with counts and skips"),
        ("Report", "report", "Plain-text report with skip diagnostics"),
        ("Debug Info", "debug_info", "Debug information and status"),
    ]

    for i, (name, nick, desc) in enumerate(output_config):
        idx = i + 1
        if idx < outputs.Count:
            outputs[idx].Name = name
            outputs[idx].NickName = nick
            outputs[idx].Description = desc

# =============================================================================
# Helper Functions
# =============================================================================

def to_id_list(elements):
    """Convert Revit elements (or ElementIds) to integer ids."""
    ids = []
    for element in elements or []:
        if element is None:
            continue
        element_id = getattr(element, "Id", element)
        ids.append(element_id_value(element_id))
    return ids


def collect_ids(store, walls, levels, selection):
    """Gather wall and level ids from the direct inputs and the mixed selection."""
    wall_ids = to_id_list(walls)
    level_ids = to_id_list(levels)

    if selection:
        sel_walls, sel_levels = partition_selection(store, to_id_list(selection))
        wall_ids.extend(sel_walls)
        level_ids.extend(sel_levels)

    return wall_ids, level_ids

# =============================================================================
# Main Function
# =============================================================================

def main():
    """Main entry point for the component.

    Returns:
        tuple: (summary_json, report, debug_info)
    """
    setup_component()

    summary_json = ""
    report = ""
    debug_lines = []

    if not run:
        debug_lines.append("Component not running. Set 'run' to True.")
        return summary_json, report, "\n".join(debug_lines)

    if not REVIT_AVAILABLE:
        log_error(f"Revit API not available: {REVIT_IMPORT_ERROR}")
        debug_lines.append(f"Revit API not available: {REVIT_IMPORT_ERROR}")
        return summary_json, report, "\n".join(debug_lines)

    try:
        store = RevitModelStore(Revit.ActiveDBDocument)
        wall_ids, level_ids = collect_ids(store, walls, levels, selection)
        debug_lines.append(f"Walls: {len(wall_ids)}, Levels: {len(level_ids)}")

        summary = split_walls_by_levels(store, wall_ids, level_ids)
        summary_json = json.dumps(summary.to_dict(), indent=2)
        report = format_run_report(summary)

        if summary.skipped_count:
            log_warning(f"{summary.skipped_count} wall(s) skipped - see report")

    except InvalidSplitRequest as e:
        log_warning(e.detail)
        debug_lines.append(e.detail)
    except FatalStoreError as e:
        log_error(f"Transaction rolled back: {e.detail}")
        debug_lines.append(f"ERROR: Transaction rolled back - {e.detail}")
        debug_lines.append(traceback.format_exc())
    except Exception as e:
        log_error(f"Unexpected error: {str(e)}")
        debug_lines.append(f"ERROR: {str(e)}")
        debug_lines.append(traceback.format_exc())

    return summary_json, report, "\n".join(debug_lines)

# =============================================================================
# Execution
# =============================================================================

# Set default values for optional inputs
try:
    walls
except NameError:
    walls = None

try:
    levels
except NameError:
    levels = None

try:
    selection
except NameError:
    selection = None

try:
    run
except NameError:
    run = False

# Execute main
if __name__ == "__main__":
    summary_json, report, debug_info = main()
