from unittest import mock

import pytest
from sqlalchemy.exc import OperationalError

from jotter.journal import actions
from jotter.journal.errors import StoreFailure
from jotter.journal.store import DBEntryStore


def test_create_and_list(db_session):
    store = DBEntryStore(db_session)
    first = store.create(user_id="A", title="Day 1", content="Started journaling")
    second = store.create(user_id="A", title="Day 2", content="Kept going")
    store.create(user_id="B", title="Day 1", content="Someone else")

    assert first.id != second.id
    assert first.created_at is not None
    assert [e.id for e in store.list_by_user("A")] == [second.id, first.id]
    assert store.list_by_user("C") == []


def test_get_checks_owner(db_session):
    store = DBEntryStore(db_session)
    entry = store.create(user_id="A", title="Day 1", content="Started journaling")

    assert store.get("A", entry.id).title == "Day 1"
    assert store.get("B", entry.id) is None


def test_database_errors_become_store_failures():
    db_session = mock.Mock()
    db_session.commit.side_effect = OperationalError("INSERT", {}, Exception("gone"))
    store = DBEntryStore(db_session)

    with pytest.raises(StoreFailure):
        store.create(user_id="A", title="Day 1", content="Started journaling")
    db_session.rollback.assert_called_once()


def test_list_errors_become_store_failures():
    store = DBEntryStore(mock.Mock())
    with mock.patch.object(
        actions,
        "get_journal_entries",
        side_effect=OperationalError("SELECT", {}, Exception("gone")),
    ):
        with pytest.raises(StoreFailure):
            store.list_by_user("A")


def test_create_returns_committed_entry_without_reload():
    db_session = mock.Mock()
    store = DBEntryStore(db_session)

    entry = store.create(user_id="A", title="Day 1", content="Started journaling")

    assert entry.user_id == "A"
    assert entry.title == "Day 1"
    assert entry.id is not None
    assert entry.created_at.tzinfo is not None
    db_session.add.assert_called_once_with(entry)
    db_session.commit.assert_called_once()
    db_session.refresh.assert_not_called()
    db_session.rollback.assert_not_called()


def test_created_entry_readable_after_commit(db_session):
    entry = DBEntryStore(db_session).create(
        user_id="A", title="Day 1", content="Started journaling"
    )
    db_session.close()

    assert entry.title == "Day 1"
    assert entry.created_at is not None
