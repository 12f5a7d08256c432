"""
Entry store: the persistence boundary of the journal service.

Handlers only talk to an EntryStore, so the storage engine can be swapped
without touching validation logic.
"""
import logging
from typing import Iterator, List, Optional
from uuid import UUID

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import db
from . import actions
from .errors import StoreFailure
from .models import JournalEntry

logger = logging.getLogger(__name__)


class EntryStore:
    def create(self, user_id: str, title: str, content: str) -> JournalEntry:
        raise NotImplementedError()

    def list_by_user(self, user_id: str) -> List[JournalEntry]:
        raise NotImplementedError()

    def get(self, user_id: str, entry_id: UUID) -> Optional[JournalEntry]:
        raise NotImplementedError()


class DBEntryStore(EntryStore):
    """
    EntryStore backed by a SQLAlchemy session. Any database error rolls the session back and
    is re-raised as StoreFailure.
    """

    def __init__(self, db_session: Session) -> None:
        self.db_session = db_session

    def create(self, user_id: str, title: str, content: str) -> JournalEntry:
        try:
            return actions.create_journal_entry(
                self.db_session, user_id=user_id, title=title, content=content
            )
        except SQLAlchemyError as e:
            self.db_session.rollback()
            logger.error(f"Error creating journal entry for user={user_id}: {str(e)}")
            raise StoreFailure()

    def list_by_user(self, user_id: str) -> List[JournalEntry]:
        try:
            return actions.get_journal_entries(self.db_session, user_id=user_id)
        except SQLAlchemyError as e:
            self.db_session.rollback()
            logger.error(f"Error listing journal entries for user={user_id}: {str(e)}")
            raise StoreFailure()

    def get(self, user_id: str, entry_id: UUID) -> Optional[JournalEntry]:
        try:
            return actions.get_journal_entry(
                self.db_session, user_id=user_id, entry_id=entry_id
            )
        except SQLAlchemyError as e:
            self.db_session.rollback()
            logger.error(f"Error retrieving journal entry {entry_id}: {str(e)}")
            raise StoreFailure()


def yield_entry_store(
    db_session: Session = Depends(db.yield_connection_from_env),
) -> Iterator[EntryStore]:
    yield DBEntryStore(db_session)
