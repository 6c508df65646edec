# File: src/wall_level_splitter/splitting/request.py
"""Input model for a split invocation."""

from typing import List

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import InvalidSplitRequest


class SplitRequest(BaseModel):
    """Walls to split and the levels to split them at."""
    wall_ids: List[int] = Field(
        description="Ids of the walls to split, in processing order",
        min_length=1,
    )
    level_ids: List[int] = Field(
        description="Ids of the levels used as split boundaries",
        min_length=1,
    )

    @field_validator('wall_ids', 'level_ids')
    @classmethod
    def validate_ids(cls, v: List[int]) -> List[int]:
        """Element ids are positive."""
        for element_id in v:
            if element_id <= 0:
                raise ValueError(f"Invalid element id: {element_id}")
        return v


def parse_split_request(wall_ids, level_ids) -> SplitRequest:
    """Validate raw id collections.

    Raises:
        InvalidSplitRequest: If either collection is empty or holds a bad id
    """
    try:
        return SplitRequest(wall_ids=list(wall_ids), level_ids=list(level_ids))
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else None
        raise InvalidSplitRequest(first["msg"], field=field) from e
