# File: src/wall_level_splitter/wall_data/parameters.py

"""Instance parameter keys and typed values.

Host parameters are key-indexed and runtime-typed. Here they are a closed
set of keys mapped to a tagged value, so copying can compare storage kinds
explicitly instead of relying on the host to reject a bad write.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ParameterKey(Enum):
    """Instance parameters the splitter reads or writes."""

    ROOM_BOUNDING = "room_bounding"
    COMMENTS = "comments"
    MARK = "mark"
    LOCATION_LINE = "location_line"
    TOP_CONSTRAINT = "top_constraint"
    TOP_OFFSET = "top_offset"

    def __str__(self) -> str:
        return self.value


class StorageKind(Enum):
    """Storage type of a parameter value."""

    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"
    ELEMENT_ID = "element_id"


class ParameterWriteStatus(Enum):
    """Result of a store parameter write."""

    OK = "ok"
    READ_ONLY = "read_only"
    REJECTED = "rejected"
    """The host refused a value on a writable parameter."""


class CopyStatus(Enum):
    """Result of copying one parameter from a wall to a segment."""

    COPIED = "copied"
    MISSING_SOURCE = "missing_source"
    MISSING_TARGET = "missing_target"
    STORAGE_MISMATCH = "storage_mismatch"
    READ_ONLY = "read_only"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ParameterValue:
    """A parameter value tagged with its storage kind."""
    storage: StorageKind
    value: Any

    @classmethod
    def integer(cls, value: int) -> "ParameterValue":
        return cls(StorageKind.INTEGER, int(value))

    @classmethod
    def double(cls, value: float) -> "ParameterValue":
        return cls(StorageKind.DOUBLE, float(value))

    @classmethod
    def string(cls, value: str) -> "ParameterValue":
        return cls(StorageKind.STRING, value)

    @classmethod
    def element_id(cls, value: int) -> "ParameterValue":
        return cls(StorageKind.ELEMENT_ID, int(value))


@dataclass(frozen=True)
class ParameterCopyOutcome:
    """Outcome of one parameter copy attempt. Never raised, only collected."""
    key: ParameterKey
    status: CopyStatus

    @property
    def copied(self) -> bool:
        return self.status is CopyStatus.COPIED
