# tests/conftest.py
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest

from wall_level_splitter.store.memory_store import InMemoryModelStore
from wall_level_splitter.wall_data.wall_types import (
    LevelConstrained,
    LineCurve,
    Point3D,
    Unconnected,
)


def make_curve(length: float = 20.0) -> LineCurve:
    """Straight location curve along X."""
    return LineCurve(start=Point3D(0.0, 0.0, 0.0), end=Point3D(length, 0.0, 0.0))


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryModelStore()


@pytest.fixture
def levels(store):
    """Four levels at 0, 3, 7 and 10 feet, keyed by elevation."""
    return {
        0: store.add_level("Level 0", 0.0),
        3: store.add_level("Level 3", 3.0),
        7: store.add_level("Level 7", 7.0),
        10: store.add_level("Level 10", 10.0),
    }


@pytest.fixture
def level_wall(store, levels):
    """Wall from Level 0 to Level 10, top constrained."""
    return store.add_wall(
        base_level_id=levels[0].id,
        top_constraint=LevelConstrained(level_id=levels[10].id, top_offset=0.0),
        curve=make_curve(),
    )


@pytest.fixture
def unconnected_wall(store, levels):
    """Wall on Level 0 with an unconnected height of 10 feet."""
    return store.add_wall(
        base_level_id=levels[0].id,
        top_constraint=Unconnected(height=10.0),
        curve=make_curve(),
    )
