# File: tests/splitting/test_parameter_copy.py
"""Unit tests for parameter transfer onto new segments."""

from unittest.mock import patch

from wall_level_splitter.config.splitting import CARRIED_PARAMETERS
from wall_level_splitter.splitting.parameter_copy import (
    apply_top_constraint,
    copy_carried_parameters,
    write_parameter,
)
from wall_level_splitter.store.memory_store import DEFAULT_WALL_PARAMETERS, InMemoryModelStore
from wall_level_splitter.wall_data.parameters import (
    CopyStatus,
    ParameterKey,
    ParameterValue,
    ParameterWriteStatus,
)
from wall_level_splitter.wall_data.wall_types import LevelConstrained, Unconnected

from conftest import make_curve


def _segment(store, level):
    return store.create_wall_segment(make_curve(), 1000, level.id, 3.0, 0.0, False, False)


class TestWriteParameter:
    """Tests for write_parameter."""

    def test_copied(self, store, levels):
        segment_id = _segment(store, levels[0])

        outcome = write_parameter(
            store, segment_id, ParameterKey.MARK, ParameterValue.string("A")
        )

        assert outcome.status is CopyStatus.COPIED
        assert outcome.copied
        assert store.get_parameter(segment_id, ParameterKey.MARK).value == "A"

    def test_storage_mismatch_leaves_value(self, store, levels):
        segment_id = _segment(store, levels[0])

        outcome = write_parameter(
            store, segment_id, ParameterKey.MARK, ParameterValue.integer(7)
        )

        assert outcome.status is CopyStatus.STORAGE_MISMATCH
        assert store.get_parameter(segment_id, ParameterKey.MARK).value == ""

    def test_missing_target(self):
        schema = dict(DEFAULT_WALL_PARAMETERS)
        del schema[ParameterKey.COMMENTS]
        store = InMemoryModelStore(segment_parameters=schema)
        level = store.add_level("L", 0.0)
        segment_id = _segment(store, level)

        outcome = write_parameter(
            store, segment_id, ParameterKey.COMMENTS, ParameterValue.string("x")
        )

        assert outcome.status is CopyStatus.MISSING_TARGET

    def test_read_only(self):
        store = InMemoryModelStore(segment_read_only=[ParameterKey.LOCATION_LINE])
        level = store.add_level("L", 0.0)
        segment_id = _segment(store, level)

        outcome = write_parameter(
            store, segment_id, ParameterKey.LOCATION_LINE, ParameterValue.integer(2)
        )

        assert outcome.status is CopyStatus.READ_ONLY
        assert store.get_parameter(segment_id, ParameterKey.LOCATION_LINE).value == 0

    def test_rejected_by_host(self, store, levels):
        segment_id = _segment(store, levels[0])

        with patch.object(
            store, "set_parameter", return_value=ParameterWriteStatus.REJECTED
        ):
            outcome = write_parameter(
                store, segment_id, ParameterKey.MARK, ParameterValue.string("A")
            )

        assert outcome.status is CopyStatus.REJECTED
        assert not outcome.copied
        assert store.get_parameter(segment_id, ParameterKey.MARK).value == ""


class TestCopyCarriedParameters:
    """Tests for copy_carried_parameters."""

    def test_one_outcome_per_key(self, store, levels):
        segment_id = _segment(store, levels[0])
        carried = {
            ParameterKey.ROOM_BOUNDING: ParameterValue.integer(0),
            ParameterKey.MARK: ParameterValue.string("W-7"),
        }

        outcomes = copy_carried_parameters(store, segment_id, carried)

        assert [o.key for o in outcomes] == list(CARRIED_PARAMETERS)
        statuses = {o.key: o.status for o in outcomes}
        assert statuses[ParameterKey.ROOM_BOUNDING] is CopyStatus.COPIED
        assert statuses[ParameterKey.MARK] is CopyStatus.COPIED
        assert statuses[ParameterKey.COMMENTS] is CopyStatus.MISSING_SOURCE
        assert store.get_parameter(segment_id, ParameterKey.ROOM_BOUNDING).value == 0


class TestApplyTopConstraint:
    """Tests for apply_top_constraint."""

    def test_level_top_written(self, store, levels):
        segment_id = _segment(store, levels[0])

        outcomes = apply_top_constraint(
            store, segment_id, LevelConstrained(levels[3].id, top_offset=0.25)
        )

        assert all(o.copied for o in outcomes)
        wall = store.get_wall(segment_id)
        assert wall.top_constraint == LevelConstrained(levels[3].id, 0.25)

    def test_unconnected_top_needs_no_write(self, store, levels):
        segment_id = _segment(store, levels[0])
        before = store.call_count("set_parameter")

        outcomes = apply_top_constraint(store, segment_id, Unconnected(3.0))

        assert outcomes == []
        assert store.call_count("set_parameter") == before
        assert store.get_wall(segment_id).top_constraint == Unconnected(3.0)
