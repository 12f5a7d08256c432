import logging
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from pydantic import ValidationError

from .data import (
    CreateJournalEntryRequest,
    JournalEntryResponse,
    ListJournalEntriesResponse,
)
from .errors import EntryNotFound, InvalidInput, Unauthorized
from .models import JournalEntry
from .store import EntryStore

logger = logging.getLogger(__name__)


def ensure_user(user_id: Optional[str]) -> str:
    """
    Returns the resolved user id or raises Unauthorized if the session did not resolve to one.
    """
    if not user_id:
        raise Unauthorized()
    return user_id


def parse_entry_request(payload: Any) -> CreateJournalEntryRequest:
    """
    Validates a raw create payload. Title and content must both be non-empty strings.
    """
    if not isinstance(payload, dict):
        raise InvalidInput()
    try:
        create_request = CreateJournalEntryRequest.model_validate(payload)
    except ValidationError:
        raise InvalidInput()

    if not create_request.title or not create_request.content:
        raise InvalidInput()

    return create_request


def as_utc(timestamp: datetime) -> datetime:
    """
    SQLite hands back naive datetimes for timezone-aware columns. Stored values are always UTC.
    """
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def entry_response(entry: JournalEntry) -> JournalEntryResponse:
    return JournalEntryResponse(
        id=entry.id,
        user_id=entry.user_id,
        title=entry.title,
        content=entry.content,
        created_at=as_utc(entry.created_at),
    )


async def create_entry_handler(
    store: EntryStore, user_id: Optional[str], payload: Any
) -> JournalEntryResponse:
    # Session is checked before the payload is looked at
    user_id = ensure_user(user_id)
    create_request = parse_entry_request(payload)

    entry = store.create(
        user_id=user_id,
        title=create_request.title,
        content=create_request.content,
    )
    logger.debug(f"Created journal entry {entry.id} for user={user_id}")

    return entry_response(entry)


async def list_entries_handler(
    store: EntryStore, user_id: Optional[str]
) -> ListJournalEntriesResponse:
    user_id = ensure_user(user_id)
    entries = store.list_by_user(user_id)
    return ListJournalEntriesResponse(entries=[entry_response(e) for e in entries])


async def get_entry_handler(
    store: EntryStore, user_id: Optional[str], entry_id: UUID
) -> JournalEntryResponse:
    user_id = ensure_user(user_id)
    entry = store.get(user_id, entry_id)
    if entry is None:
        raise EntryNotFound()
    return entry_response(entry)
