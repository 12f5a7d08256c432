"""
Journal-related actions in Jotter
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy.orm import Session

from .models import JournalEntry

logger = logging.getLogger(__name__)


def create_journal_entry(
    db_session: Session, user_id: str, title: str, content: str
) -> JournalEntry:
    """
    Creates an entry owned by the given user. Identifier and creation time are assigned here,
    callers cannot provide them.
    """
    entry = JournalEntry(
        id=uuid4(),
        user_id=user_id,
        title=title,
        content=content,
        created_at=datetime.now(timezone.utc),
    )
    db_session.add(entry)
    db_session.commit()

    return entry


def get_journal_entries(db_session: Session, user_id: str) -> List[JournalEntry]:
    """
    Returns all entries owned by the given user, newest first. Entries sharing a creation
    timestamp are ordered by id so the result is deterministic.
    """
    query = (
        db_session.query(JournalEntry)
        .filter(JournalEntry.user_id == user_id)
        .order_by(JournalEntry.created_at.desc(), JournalEntry.id.desc())
    )
    return query.all()


def get_journal_entry(
    db_session: Session, user_id: str, entry_id: UUID
) -> Optional[JournalEntry]:
    """
    Returns a journal entry by its id if it is owned by the given user.
    """
    journal_entry = (
        db_session.query(JournalEntry)
        .filter(JournalEntry.id == entry_id)
        .filter(JournalEntry.user_id == user_id)
        .one_or_none()
    )
    return journal_entry
