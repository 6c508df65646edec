# File: tests/store/test_revit_store.py
"""Tests for the Revit adapter outside of Revit."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from wall_level_splitter.store import revit_store
from wall_level_splitter.store.revit_store import (
    BUILTIN_PARAMETER_NAMES,
    REVIT_AVAILABLE,
    RevitModelStore,
    element_id_value,
)
from wall_level_splitter.wall_data.parameters import (
    ParameterKey,
    ParameterValue,
    ParameterWriteStatus,
)


class TestRevitUnavailable:
    """Behaviour when the Revit API cannot be loaded."""

    @pytest.mark.skipif(REVIT_AVAILABLE, reason="Revit API is loaded")
    def test_construct_raises(self):
        with pytest.raises(RuntimeError, match="Revit API not available"):
            RevitModelStore(doc=None)

    def test_module_reports_error(self):
        if not revit_store.REVIT_AVAILABLE:
            assert revit_store.REVIT_ERROR


class TestHelpers:
    """Tests for Revit-independent helpers."""

    def test_element_id_value_new_api(self):
        assert element_id_value(SimpleNamespace(Value=12)) == 12

    def test_element_id_value_old_api(self):
        assert element_id_value(SimpleNamespace(IntegerValue=34)) == 34

    def test_every_parameter_mapped(self):
        assert set(BUILTIN_PARAMETER_NAMES) == set(ParameterKey)


# =============================================================================
# Revit calls against a stand-in API
# =============================================================================


@pytest.fixture
def fake_db():
    db = MagicMock()
    db.TransactionStatus.Committed = "Committed"
    db.TransactionStatus.Started = "Started"
    db.TransactionStatus.RolledBack = "RolledBack"
    with patch.object(revit_store, "DB", db, create=True):
        yield db


@pytest.fixture
def revit(fake_db):
    store = RevitModelStore.__new__(RevitModelStore)
    store._doc = MagicMock()
    store._group = MagicMock()
    store._transaction = MagicMock()
    return store


class TestRevitTransactions:
    """Commit status handling."""

    def test_commit(self, revit, fake_db):
        group = revit._group
        revit._transaction.Commit.return_value = fake_db.TransactionStatus.Committed

        revit.commit_group()

        group.Assimilate.assert_called_once()

    def test_commit_rolled_back_by_host_raises(self, revit, fake_db):
        group, transaction = revit._group, revit._transaction
        transaction.Commit.return_value = fake_db.TransactionStatus.RolledBack
        transaction.GetStatus.return_value = fake_db.TransactionStatus.RolledBack

        with pytest.raises(RuntimeError, match="not committed"):
            revit.commit_group()
        revit.rollback_group()

        group.Assimilate.assert_not_called()
        transaction.RollBack.assert_not_called()
        group.RollBack.assert_called_once()

    def test_rollback_open_transaction(self, revit, fake_db):
        group, transaction = revit._group, revit._transaction
        transaction.GetStatus.return_value = fake_db.TransactionStatus.Started

        revit.rollback_group()

        transaction.RollBack.assert_called_once()
        group.RollBack.assert_called_once()


class TestRevitSetParameter:
    """Parameter write results."""

    def _param(self, revit, read_only=False, accepted=True):
        param = MagicMock()
        param.IsReadOnly = read_only
        param.Set.return_value = accepted
        revit._doc.GetElement.return_value.get_Parameter.return_value = param
        return param

    def test_ok(self, revit):
        self._param(revit)

        status = revit.set_parameter(1, ParameterKey.MARK, ParameterValue.string("A"))

        assert status is ParameterWriteStatus.OK

    def test_rejected(self, revit):
        self._param(revit, accepted=False)

        status = revit.set_parameter(1, ParameterKey.MARK, ParameterValue.string("A"))

        assert status is ParameterWriteStatus.REJECTED

    def test_read_only(self, revit):
        param = self._param(revit, read_only=True)

        status = revit.set_parameter(1, ParameterKey.MARK, ParameterValue.string("A"))

        assert status is ParameterWriteStatus.READ_ONLY
        param.Set.assert_not_called()
