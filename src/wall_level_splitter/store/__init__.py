# File: src/wall_level_splitter/store/__init__.py
"""
Model store implementations.

- ModelStore: abstract interface consumed by the splitter
- InMemoryModelStore: dictionary-backed store with snapshot rollback
- RevitModelStore: Revit API adapter (available only inside Revit)
"""

from .base import ModelElement, ModelStore
from .memory_store import DEFAULT_WALL_PARAMETERS, INVALID_ELEMENT_ID, InMemoryModelStore
from .revit_store import REVIT_AVAILABLE, RevitModelStore

__all__ = [
    "ModelElement",
    "ModelStore",
    "DEFAULT_WALL_PARAMETERS",
    "INVALID_ELEMENT_ID",
    "InMemoryModelStore",
    "REVIT_AVAILABLE",
    "RevitModelStore",
]
