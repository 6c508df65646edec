# File: src/wall_level_splitter/splitting/errors.py
"""Exceptions raised by the wall splitter.

Two disjoint classes of failure exist. WallSkipped is per-wall and is always
caught by the coordinator, which records it and moves on. Anything else
raised by the store once a wall has passed decomposition is fatal: the
transaction group is rolled back and FatalStoreError is raised.
"""

from typing import Any, Dict, Optional

from .split_types import ResolvedHeights, SkipReason


class WallSplitError(Exception):
    """
    Base class for splitter exceptions.

    Carries a human-readable detail plus structured context for logs and
    JSON output.
    """
    def __init__(
        self,
        detail: str,
        internal_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            detail: Human-readable error message
            internal_code: Optional machine-readable error code
            extra: Optional additional error context
        """
        self.detail = detail
        self.internal_code = internal_code
        self.extra = extra or {}
        super().__init__(detail)

    def to_dict(self) -> Dict[str, Any]:
        error_response: Dict[str, Any] = {"detail": self.detail}
        if self.internal_code:
            error_response["code"] = self.internal_code
        if self.extra:
            error_response["extra"] = self.extra
        return error_response


class WallSkipped(WallSplitError):
    """A wall cannot be split and must be left untouched."""
    def __init__(
        self,
        wall_id: int,
        reason: SkipReason,
        heights: Optional[ResolvedHeights] = None,
    ):
        self.wall_id = wall_id
        self.reason = reason
        self.heights = heights
        super().__init__(
            detail=f"Wall {wall_id} skipped: {reason.message}",
            internal_code=reason.value,
            extra={"wall_id": wall_id},
        )


class InvalidSplitRequest(WallSplitError, ValueError):
    """Raised before any processing when the request preconditions fail."""
    def __init__(self, detail: str, field: Optional[str] = None):
        message = "Invalid split request"
        if field:
            message += f" for field '{field}'"
        message += f": {detail}"
        super().__init__(
            detail=message,
            internal_code="invalid_request",
            extra={"field": field} if field else None,
        )


class ElementNotFoundError(WallSplitError, KeyError):
    """Raised by a store when an element id does not exist."""
    def __init__(self, element_id: int, operation: str):
        super().__init__(
            detail=f"Element {element_id} not found during {operation}",
            internal_code="element_not_found",
            extra={"element_id": element_id, "operation": operation},
        )

    def __str__(self) -> str:
        return self.detail


class FatalStoreError(WallSplitError):
    """An unclassified store failure aborted and rolled back the whole batch."""
    def __init__(self, wall_id: Optional[int], operation: str, cause: BaseException):
        self.wall_id = wall_id
        self.operation = operation
        super().__init__(
            detail=(
                f"Store error during {operation}"
                + (f" for wall {wall_id}" if wall_id is not None else "")
                + f": {cause}"
            ),
            internal_code="fatal_store_error",
            extra={"wall_id": wall_id, "operation": operation},
        )
