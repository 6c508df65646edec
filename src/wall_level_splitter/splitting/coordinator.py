# File: src/wall_level_splitter/splitting/coordinator.py
"""
Split walls by levels.

Orchestrates the whole run:
1. Validate the request and look up walls and levels
2. Normalize the levels once
3. Per wall: eligibility -> heights -> split plan -> segment specs
4. Create every segment, then delete the original

Everything happens inside one transaction group. A skipped wall is recorded
and left untouched. Any other exception rolls the whole group back, so no
mutation from any wall survives, and is re-raised as FatalStoreError.

Example:
    >>> from wall_level_splitter.splitting import split_walls_by_levels
    >>> summary = split_walls_by_levels(store, wall_ids=[12, 13], level_ids=[3, 4])
    >>> print(f"Created {summary.created_segment_count} segments")
"""

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..config.splitting import EPS, get_split_param
from ..store.base import ModelStore
from ..utils.logging_config import get_logger
from ..wall_data.levels import normalize_levels
from ..wall_data.parameters import ParameterCopyOutcome
from ..wall_data.wall_types import Level, WallSpec
from .eligibility import check_wall_supported
from .errors import FatalStoreError, InvalidSplitRequest, WallSkipped
from .height_resolver import resolve_heights
from .interval_splitter import plan_splits
from .parameter_copy import apply_top_constraint, copy_carried_parameters
from .request import parse_split_request
from .segment_builder import build_segments, read_carried_parameters
from .split_types import RunSummary, SegmentSpec, SkipReason, WallSkip

logger = get_logger(__name__)


@contextmanager
def transaction_group(store: ModelStore, name: str) -> Iterator[None]:
    """Run a block inside a store transaction group.

    Commits when the block finishes. Rolls back on any exception, including
    one raised by the commit itself.
    """
    store.start_group(name)
    try:
        yield
        store.commit_group()
    except BaseException:
        store.rollback_group()
        raise


def partition_selection(
    store: ModelStore, element_ids: Iterable[int]
) -> Tuple[List[int], List[int]]:
    """Split a mixed selection into wall ids and level ids.

    Elements that are neither are ignored. Selection order is kept.
    """
    wall_ids: List[int] = []
    level_ids: List[int] = []
    for element_id in element_ids:
        element = store.get_element(element_id)
        if isinstance(element, WallSpec):
            wall_ids.append(element_id)
        elif isinstance(element, Level):
            level_ids.append(element_id)
    return wall_ids, level_ids


def _load_walls(store: ModelStore, wall_ids: Sequence[int]) -> List[WallSpec]:
    walls = []
    seen = set()
    for wall_id in wall_ids:
        # A wall is split at most once per run
        if wall_id in seen:
            continue
        seen.add(wall_id)
        wall = store.get_wall(wall_id)
        if wall is None:
            logger.warning(f"Element {wall_id} is not a wall; ignoring it")
            continue
        walls.append(wall)
    if not walls:
        raise InvalidSplitRequest("No Walls found in selection.", field="wall_ids")
    return walls


def _load_levels(store: ModelStore, level_ids: Sequence[int]) -> List[Level]:
    levels = []
    for level_id in level_ids:
        level = store.get_level(level_id)
        if level is None:
            logger.warning(f"Element {level_id} is not a level; ignoring it")
            continue
        levels.append(level)
    if not levels:
        raise InvalidSplitRequest(
            "No Levels found in selection. Select one or more Levels as split boundaries.",
            field="level_ids",
        )
    return levels


def plan_wall(
    store: ModelStore,
    wall: WallSpec,
    levels: Sequence[Level],
    eps: float = EPS,
) -> List[SegmentSpec]:
    """Decompose one wall into segment specs without touching the model.

    Raises:
        WallSkipped: For every classified reason to leave the wall alone
    """
    check_wall_supported(wall)
    heights = resolve_heights(wall, store, eps)

    plan = plan_splits(heights, levels, eps)
    if plan.is_empty:
        raise WallSkipped(wall.id, SkipReason.NO_BOUNDARY_IN_RANGE, heights=heights)

    carried = read_carried_parameters(store, wall.id)
    return build_segments(wall, heights, plan, carried, eps)


def create_segment(store: ModelStore, spec: SegmentSpec) -> Tuple[int, List[ParameterCopyOutcome]]:
    """Create one segment, attach its top and copy carried parameters."""
    segment_id = store.create_wall_segment(
        spec.location_curve,
        spec.wall_type_id,
        spec.base_level_id,
        spec.height,
        spec.base_offset,
        spec.flipped,
        spec.structural,
    )
    outcomes = apply_top_constraint(store, segment_id, spec.top_constraint)
    outcomes.extend(copy_carried_parameters(store, segment_id, spec.carried_parameters))
    return segment_id, outcomes


def replace_wall(store: ModelStore, wall: WallSpec, specs: Sequence[SegmentSpec]) -> List[int]:
    """Create every segment, then delete the original wall."""
    segment_ids = []
    for spec in specs:
        segment_id, outcomes = create_segment(store, spec)
        skipped = [o for o in outcomes if not o.copied]
        if skipped:
            logger.debug(
                f"Segment {segment_id}: {len(skipped)} parameter(s) kept at created value"
            )
        segment_ids.append(segment_id)

    store.delete_element(wall.id)
    return segment_ids


def split_walls_by_levels(
    store: ModelStore,
    wall_ids: Iterable[int],
    level_ids: Iterable[int],
    eps: float = EPS,
) -> RunSummary:
    """Split walls into vertically stacked segments at the given levels.

    Args:
        store: Model store, held exclusively for the whole run
        wall_ids: Walls to split, processed in this order
        level_ids: Candidate boundary levels (duplicates allowed)
        eps: Elevation tolerance (feet)

    Returns:
        RunSummary with counts and one entry per skipped wall

    Raises:
        InvalidSplitRequest: Empty wall or level selection
        FatalStoreError: Unclassified store failure; nothing was changed
    """
    request = parse_split_request(wall_ids, level_ids)
    walls = _load_walls(store, request.wall_ids)
    levels = normalize_levels(_load_levels(store, request.level_ids))

    logger.info(f"Splitting {len(walls)} wall(s) at {len(levels)} level(s)")
    summary = RunSummary()
    current_wall = None

    try:
        with transaction_group(store, get_split_param("transaction_group_name")):
            for wall in walls:
                current_wall = wall.id
                try:
                    specs = plan_wall(store, wall, levels, eps)
                except WallSkipped as skip:
                    logger.info(str(skip))
                    summary.record_skip(WallSkip(
                        wall_id=wall.id,
                        reason=skip.reason,
                        levels=tuple(levels),
                        heights=skip.heights,
                    ))
                    continue

                segment_ids = replace_wall(store, wall, specs)
                summary.record_replacement(wall.id, segment_ids)
                logger.debug(f"Wall {wall.id} replaced by {segment_ids}")
            current_wall = None
    except Exception as e:
        logger.error(
            f"Rolled back all changes after store error"
            + (f" on wall {current_wall}" if current_wall is not None else "")
            + f": {e}"
        )
        raise FatalStoreError(current_wall, "split", e) from e

    logger.info(
        f"Created {summary.created_segment_count} segment(s), "
        f"replaced {summary.replaced_wall_count} wall(s), "
        f"skipped {summary.skipped_count}"
    )
    return summary
