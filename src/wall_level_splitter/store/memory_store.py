# File: src/wall_level_splitter/store/memory_store.py
"""
In-memory model store.

Keeps levels, walls and their instance parameters in plain dictionaries.
Transaction groups are implemented with a snapshot taken on start and
restored on rollback. Failure injection lets tests make any store
operation raise on its Nth call.
"""

import copy
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from ..splitting.errors import ElementNotFoundError
from ..utils.logging_config import get_logger
from ..wall_data.parameters import (
    ParameterKey,
    ParameterValue,
    ParameterWriteStatus,
    StorageKind,
)
from ..wall_data.wall_types import (
    CrossSection,
    Level,
    LevelConstrained,
    TopConstraint,
    Unconnected,
    WallKind,
    WallSpec,
)
from .base import ModelElement, ModelStore

logger = get_logger(__name__)

# Element id used by the host for "no element"
INVALID_ELEMENT_ID = -1

# Storage kind and default value of every parameter a new wall exposes
DEFAULT_WALL_PARAMETERS: Dict[ParameterKey, ParameterValue] = {
    ParameterKey.ROOM_BOUNDING: ParameterValue.integer(1),
    ParameterKey.COMMENTS: ParameterValue.string(""),
    ParameterKey.MARK: ParameterValue.string(""),
    ParameterKey.LOCATION_LINE: ParameterValue.integer(0),
    ParameterKey.TOP_CONSTRAINT: ParameterValue.element_id(INVALID_ELEMENT_ID),
    ParameterKey.TOP_OFFSET: ParameterValue.double(0.0),
}


class InMemoryModelStore(ModelStore):
    """Pure-Python model store.

    Args:
        segment_parameters: Parameter schema given to walls created through
            create_wall_segment. Defaults to DEFAULT_WALL_PARAMETERS.
        segment_read_only: Parameter keys that are read-only on new walls.
    """

    def __init__(
        self,
        segment_parameters: Optional[Dict[ParameterKey, ParameterValue]] = None,
        segment_read_only: Iterable[ParameterKey] = (),
    ) -> None:
        self._elements: Dict[int, ModelElement] = {}
        self._parameters: Dict[int, Dict[ParameterKey, ParameterValue]] = {}
        self._read_only: Dict[int, Set[ParameterKey]] = {}
        self._next_id = 1
        self._segment_parameters = dict(
            DEFAULT_WALL_PARAMETERS if segment_parameters is None else segment_parameters
        )
        self._segment_read_only = set(segment_read_only)

        self._group_name: Optional[str] = None
        self._snapshot: Optional[Tuple[Any, ...]] = None
        self.committed_groups: List[str] = []
        self.rolled_back_groups: List[str] = []

        self._call_counts: Dict[str, int] = {}
        self._failures: Dict[str, Tuple[int, BaseException]] = {}

    @property
    def store_name(self) -> str:
        return "In-Memory"

    # =========================================================================
    # Model building (test and offline setup)
    # =========================================================================

    def _allocate_id(self, element_id: Optional[int]) -> int:
        if element_id is None:
            element_id = self._next_id
        if element_id in self._elements:
            raise ValueError(f"Element id {element_id} already in use")
        self._next_id = max(self._next_id, element_id + 1)
        return element_id

    def add_level(self, name: str, elevation: float, element_id: Optional[int] = None) -> Level:
        """Add a level and return it."""
        level = Level(id=self._allocate_id(element_id), name=name, elevation=elevation)
        self._elements[level.id] = level
        return level

    def add_wall(
        self,
        base_level_id: Optional[int],
        top_constraint: TopConstraint,
        curve: Any = None,
        base_offset: float = 0.0,
        wall_type_id: int = 1000,
        flipped: bool = False,
        structural: bool = False,
        kind: WallKind = WallKind.BASIC,
        has_edited_profile: bool = False,
        cross_section: CrossSection = CrossSection.VERTICAL,
        parameters: Optional[Dict[ParameterKey, ParameterValue]] = None,
        read_only: Iterable[ParameterKey] = (),
        element_id: Optional[int] = None,
    ) -> WallSpec:
        """Add a wall and return it.

        ``parameters`` overrides entries of DEFAULT_WALL_PARAMETERS. A key
        mapped to None is removed so the wall does not expose it.
        """
        wall = WallSpec(
            id=self._allocate_id(element_id),
            wall_type_id=wall_type_id,
            location_curve=curve,
            flipped=flipped,
            structural=structural,
            base_level_id=base_level_id,
            base_offset=base_offset,
            top_constraint=top_constraint,
            kind=kind,
            has_edited_profile=has_edited_profile,
            cross_section=cross_section,
        )
        self._elements[wall.id] = wall

        wall_parameters = dict(DEFAULT_WALL_PARAMETERS)
        wall_parameters.update(self._top_parameters(top_constraint))
        for key, value in (parameters or {}).items():
            if value is None:
                wall_parameters.pop(key, None)
            else:
                wall_parameters[key] = value
        self._parameters[wall.id] = wall_parameters
        self._read_only[wall.id] = set(read_only)
        return wall

    @staticmethod
    def _top_parameters(top_constraint: TopConstraint) -> Dict[ParameterKey, ParameterValue]:
        if isinstance(top_constraint, LevelConstrained):
            return {
                ParameterKey.TOP_CONSTRAINT: ParameterValue.element_id(top_constraint.level_id),
                ParameterKey.TOP_OFFSET: ParameterValue.double(top_constraint.top_offset),
            }
        return {
            ParameterKey.TOP_CONSTRAINT: ParameterValue.element_id(INVALID_ELEMENT_ID),
            ParameterKey.TOP_OFFSET: ParameterValue.double(0.0),
        }

    def inject_failure(self, operation: str, on_call: int, error: BaseException) -> None:
        """Make ``operation`` raise ``error`` on its ``on_call``-th call (1-based).

        Calls are counted from the moment the store is created.
        """
        self._failures[operation] = (on_call, error)

    def _count_call(self, operation: str) -> None:
        count = self._call_counts.get(operation, 0) + 1
        self._call_counts[operation] = count
        failure = self._failures.get(operation)
        if failure is not None and failure[0] == count:
            raise failure[1]

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def element_ids(self) -> List[int]:
        return sorted(self._elements)

    @property
    def walls(self) -> List[WallSpec]:
        return [e for e in self._elements.values() if isinstance(e, WallSpec)]

    @property
    def levels(self) -> List[Level]:
        return [e for e in self._elements.values() if isinstance(e, Level)]

    @property
    def in_group(self) -> bool:
        return self._snapshot is not None

    def call_count(self, operation: str) -> int:
        return self._call_counts.get(operation, 0)

    # =========================================================================
    # ModelStore interface
    # =========================================================================

    def get_element(self, element_id: int) -> Optional[ModelElement]:
        self._count_call("get_element")
        return self._elements.get(element_id)

    def create_wall_segment(
        self,
        curve: Any,
        wall_type_id: int,
        base_level_id: int,
        height: float,
        base_offset: float,
        flipped: bool,
        structural: bool,
    ) -> int:
        self._count_call("create_wall_segment")
        if self.get_level(base_level_id) is None:
            raise ElementNotFoundError(base_level_id, "create_wall_segment")

        wall = WallSpec(
            id=self._allocate_id(None),
            wall_type_id=wall_type_id,
            location_curve=curve,
            flipped=flipped,
            structural=structural,
            base_level_id=base_level_id,
            base_offset=base_offset,
            top_constraint=Unconnected(height=height),
        )
        self._elements[wall.id] = wall
        self._parameters[wall.id] = dict(self._segment_parameters)
        self._read_only[wall.id] = set(self._segment_read_only)
        logger.debug(f"Created wall {wall.id} on level {base_level_id}, height {height:.6f}")
        return wall.id

    def delete_element(self, element_id: int) -> None:
        self._count_call("delete_element")
        if element_id not in self._elements:
            raise ElementNotFoundError(element_id, "delete_element")
        del self._elements[element_id]
        self._parameters.pop(element_id, None)
        self._read_only.pop(element_id, None)

    def get_parameter(
        self, element_id: int, key: ParameterKey
    ) -> Optional[ParameterValue]:
        self._count_call("get_parameter")
        return self._parameters.get(element_id, {}).get(key)

    def set_parameter(
        self, element_id: int, key: ParameterKey, value: ParameterValue
    ) -> ParameterWriteStatus:
        self._count_call("set_parameter")
        parameters = self._parameters.get(element_id)
        if parameters is None or key not in parameters:
            raise ElementNotFoundError(element_id, f"set_parameter({key})")
        if key in self._read_only.get(element_id, set()):
            return ParameterWriteStatus.READ_ONLY
        if parameters[key].storage is not value.storage:
            raise TypeError(
                f"Parameter {key} of element {element_id} stores "
                f"{parameters[key].storage.value}, got {value.storage.value}"
            )

        parameters[key] = value
        if key in (ParameterKey.TOP_CONSTRAINT, ParameterKey.TOP_OFFSET):
            self._sync_top_constraint(element_id)
        return ParameterWriteStatus.OK

    def _sync_top_constraint(self, element_id: int) -> None:
        """Mirror the top parameters back onto the stored WallSpec."""
        wall = self._elements.get(element_id)
        if not isinstance(wall, WallSpec):
            return
        parameters = self._parameters[element_id]
        top_level_id = parameters[ParameterKey.TOP_CONSTRAINT].value
        if top_level_id == INVALID_ELEMENT_ID:
            return
        top_constraint = LevelConstrained(
            level_id=top_level_id,
            top_offset=parameters[ParameterKey.TOP_OFFSET].value,
        )
        self._elements[element_id] = replace(wall, top_constraint=top_constraint)

    def start_group(self, name: str) -> None:
        if self._snapshot is not None:
            raise RuntimeError(f"Transaction group '{self._group_name}' is already open")
        self._group_name = name
        self._snapshot = (
            dict(self._elements),
            copy.deepcopy(self._parameters),
            copy.deepcopy(self._read_only),
            self._next_id,
        )

    def commit_group(self) -> None:
        if self._snapshot is None:
            raise RuntimeError("No transaction group is open")
        self.committed_groups.append(self._group_name)
        self._snapshot = None
        self._group_name = None

    def rollback_group(self) -> None:
        if self._snapshot is None:
            raise RuntimeError("No transaction group is open")
        elements, parameters, read_only, next_id = self._snapshot
        self._elements = elements
        self._parameters = parameters
        self._read_only = read_only
        self._next_id = next_id
        self.rolled_back_groups.append(self._group_name)
        self._snapshot = None
        self._group_name = None
        logger.debug("Transaction group rolled back")
