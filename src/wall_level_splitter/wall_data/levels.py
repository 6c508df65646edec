# File: src/wall_level_splitter/wall_data/levels.py

"""Boundary level normalization."""

from typing import Iterable, List

from .wall_types import Level


def normalize_levels(levels: Iterable[Level]) -> List[Level]:
    """Deduplicate levels by id and order them by elevation.

    The first occurrence of an id wins. Levels at equal elevation keep their
    source order (``sorted`` is stable).

    Args:
        levels: Levels in selection order, possibly with repeated ids

    Returns:
        Unique levels, ascending by elevation. Empty input gives an empty list.
    """
    seen = set()
    unique: List[Level] = []
    for level in levels:
        if level.id in seen:
            continue
        seen.add(level.id)
        unique.append(level)
    return sorted(unique, key=lambda lv: lv.elevation)
