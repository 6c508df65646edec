# File: src/wall_level_splitter/splitting/parameter_copy.py
"""
Parameter transfer onto newly created segments.

Each write is attempted independently and yields a ParameterCopyOutcome.
A missing parameter, a storage kind mismatch, a read-only target or a value
the host rejects leaves the segment's created value in place. None of them
fail the segment.
Exceptions raised by the store itself are not caught here.
"""

from typing import Iterable, List, Mapping

from ..config.splitting import CARRIED_PARAMETERS
from ..store.base import ModelStore
from ..utils.logging_config import get_logger
from ..wall_data.parameters import (
    CopyStatus,
    ParameterCopyOutcome,
    ParameterKey,
    ParameterValue,
    ParameterWriteStatus,
)
from ..wall_data.wall_types import LevelConstrained, TopConstraint

logger = get_logger(__name__)


def write_parameter(
    store: ModelStore,
    element_id: int,
    key: ParameterKey,
    value: ParameterValue,
) -> ParameterCopyOutcome:
    """Write one value if the target exposes the key with the same storage kind."""
    target = store.get_parameter(element_id, key)
    if target is None:
        status = CopyStatus.MISSING_TARGET
    elif target.storage is not value.storage:
        status = CopyStatus.STORAGE_MISMATCH
    else:
        written = store.set_parameter(element_id, key, value)
        if written is ParameterWriteStatus.READ_ONLY:
            status = CopyStatus.READ_ONLY
        elif written is ParameterWriteStatus.REJECTED:
            status = CopyStatus.REJECTED
        else:
            status = CopyStatus.COPIED

    if status is not CopyStatus.COPIED:
        logger.debug(f"Element {element_id}: {key} not written ({status.value})")
    return ParameterCopyOutcome(key=key, status=status)


def copy_carried_parameters(
    store: ModelStore,
    segment_id: int,
    carried: Mapping[ParameterKey, ParameterValue],
    keys: Iterable[ParameterKey] = CARRIED_PARAMETERS,
) -> List[ParameterCopyOutcome]:
    """Copy the allow-listed values read from the original wall onto a segment.

    Args:
        store: Model store
        segment_id: Newly created segment
        carried: Values read from the original wall
        keys: Allow-list, in copy order

    Returns:
        One outcome per allow-listed key
    """
    outcomes = []
    for key in keys:
        value = carried.get(key)
        if value is None:
            outcomes.append(ParameterCopyOutcome(key=key, status=CopyStatus.MISSING_SOURCE))
            continue
        outcomes.append(write_parameter(store, segment_id, key, value))
    return outcomes


def apply_top_constraint(
    store: ModelStore,
    segment_id: int,
    top_constraint: TopConstraint,
) -> List[ParameterCopyOutcome]:
    """Attach a segment's top to a level.

    Segments are created with an unconnected height; a level-constrained
    top is set afterwards through the top parameters. Unconnected tops need
    no write.
    """
    if not isinstance(top_constraint, LevelConstrained):
        return []
    return [
        write_parameter(
            store, segment_id, ParameterKey.TOP_CONSTRAINT,
            ParameterValue.element_id(top_constraint.level_id),
        ),
        write_parameter(
            store, segment_id, ParameterKey.TOP_OFFSET,
            ParameterValue.double(top_constraint.top_offset),
        ),
    ]
