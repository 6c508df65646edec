# File: src/wall_level_splitter/store/base.py
"""
Model store abstraction.

The splitter never touches a host model directly. Everything it needs goes
through this narrow interface: element lookup, segment creation, deletion,
parameter read/write and a rollback-capable transaction group. Concrete
stores:
- InMemoryModelStore: pure-Python store used by tests and offline runs
- RevitModelStore: adapter to the Revit API (Rhino.Inside.Revit / pyRevit)

Usage:
    from wall_level_splitter.store import InMemoryModelStore

    store = InMemoryModelStore()
    level = store.add_level("Level 1", 0.0)
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from ..wall_data.parameters import ParameterKey, ParameterValue, ParameterWriteStatus
from ..wall_data.wall_types import Level, WallSpec

ModelElement = Union[Level, WallSpec]


# =============================================================================
# Abstract Base Class
# =============================================================================

class ModelStore(ABC):
    """Abstract base class for model stores.

    Every method is a blocking call. Any exception other than the documented
    return values is treated by the coordinator as a fatal store error.
    """

    @property
    @abstractmethod
    def store_name(self) -> str:
        """Return a human-readable name for this store."""
        ...

    @abstractmethod
    def get_element(self, element_id: int) -> Optional[ModelElement]:
        """Look up a level or wall.

        Returns:
            Level, WallSpec, or None when the id does not resolve to either
        """
        ...

    @abstractmethod
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
        """Create an unconnected wall of the given height and return its id."""
        ...

    @abstractmethod
    def delete_element(self, element_id: int) -> None:
        """Delete an element."""
        ...

    @abstractmethod
    def get_parameter(
        self, element_id: int, key: ParameterKey
    ) -> Optional[ParameterValue]:
        """Read a parameter, or None when the element does not expose it."""
        ...

    @abstractmethod
    def set_parameter(
        self, element_id: int, key: ParameterKey, value: ParameterValue
    ) -> ParameterWriteStatus:
        """Write a parameter.

        Returns:
            OK, or READ_ONLY when the target refuses writes
        """
        ...

    @abstractmethod
    def start_group(self, name: str) -> None:
        """Open a transaction group; every later mutation belongs to it."""
        ...

    @abstractmethod
    def commit_group(self) -> None:
        """Make every mutation of the open group durable together."""
        ...

    @abstractmethod
    def rollback_group(self) -> None:
        """Discard every mutation of the open group."""
        ...

    # -------------------------------------------------------------------------
    # Typed lookups
    # -------------------------------------------------------------------------

    def get_level(self, element_id: Optional[int]) -> Optional[Level]:
        """Return the live level with this id, or None."""
        if element_id is None:
            return None
        element = self.get_element(element_id)
        return element if isinstance(element, Level) else None

    def get_wall(self, element_id: int) -> Optional[WallSpec]:
        """Return the wall with this id, or None."""
        element = self.get_element(element_id)
        return element if isinstance(element, WallSpec) else None
