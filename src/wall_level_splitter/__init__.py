# File: src/wall_level_splitter/__init__.py
"""
Wall level splitter.

Splits straight walls into vertically stacked segments at selected levels,
replacing each wall only when its split succeeds.

Example:
    >>> from wall_level_splitter import InMemoryModelStore, split_walls_by_levels
    >>> store = InMemoryModelStore()
    >>> summary = split_walls_by_levels(store, wall_ids, level_ids)
"""

__version__ = "1.0.0"

from .splitting import (
    RunSummary,
    SkipReason,
    InvalidSplitRequest,
    FatalStoreError,
    split_walls_by_levels,
    format_run_report,
)

from .store import ModelStore, InMemoryModelStore

__all__ = [
    "RunSummary",
    "SkipReason",
    "InvalidSplitRequest",
    "FatalStoreError",
    "split_walls_by_levels",
    "format_run_report",
    "ModelStore",
    "InMemoryModelStore",
]
