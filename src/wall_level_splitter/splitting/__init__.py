# File: src/wall_level_splitter/splitting/__init__.py
"""
Wall splitting by levels.

This module splits straight walls into vertically stacked segments:
- Height resolution from base/top constraints
- Boundary selection with an epsilon-tolerant strict interval test
- Segment construction and parameter transfer
- All-or-nothing batch execution with per-wall skip reporting

Example:
    >>> from wall_level_splitter.splitting import (
    ...     split_walls_by_levels, format_run_report
    ... )
    >>> summary = split_walls_by_levels(store, wall_ids, level_ids)
    >>> print(format_run_report(summary))
"""

from .split_types import (
    SkipReason,
    ResolvedHeights,
    SplitPlan,
    SegmentCandidate,
    SegmentSpec,
    WallSkip,
    RunSummary,
)

from .errors import (
    WallSplitError,
    WallSkipped,
    InvalidSplitRequest,
    ElementNotFoundError,
    FatalStoreError,
)

from .eligibility import check_wall_supported
from .height_resolver import resolve_heights
from .interval_splitter import is_split_boundary, plan_splits

from .segment_builder import (
    candidate_segments,
    build_segments,
    read_carried_parameters,
)

from .parameter_copy import (
    write_parameter,
    copy_carried_parameters,
    apply_top_constraint,
)

from .request import SplitRequest, parse_split_request

from .coordinator import (
    transaction_group,
    partition_selection,
    plan_wall,
    create_segment,
    replace_wall,
    split_walls_by_levels,
)

from .report import format_skip_diagnostic, format_run_report

__all__ = [
    # Types
    "SkipReason",
    "ResolvedHeights",
    "SplitPlan",
    "SegmentCandidate",
    "SegmentSpec",
    "WallSkip",
    "RunSummary",
    # Errors
    "WallSplitError",
    "WallSkipped",
    "InvalidSplitRequest",
    "ElementNotFoundError",
    "FatalStoreError",
    # Per-wall pipeline
    "check_wall_supported",
    "resolve_heights",
    "is_split_boundary",
    "plan_splits",
    "candidate_segments",
    "build_segments",
    "read_carried_parameters",
    # Parameter transfer
    "write_parameter",
    "copy_carried_parameters",
    "apply_top_constraint",
    # Request
    "SplitRequest",
    "parse_split_request",
    # Batch
    "transaction_group",
    "partition_selection",
    "plan_wall",
    "create_segment",
    "replace_wall",
    "split_walls_by_levels",
    # Report
    "format_skip_diagnostic",
    "format_run_report",
]
