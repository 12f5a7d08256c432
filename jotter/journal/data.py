"""
Journal-related data structures
"""
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateJournalEntryRequest(BaseModel):
    # Both fields are optional at the schema level so that missing values are
    # reported as InvalidInput instead of a generic validation error
    title: Optional[str] = None
    content: Optional[str] = None


class JournalEntryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    user_id: str = Field(alias="userId")
    title: str
    content: str
    created_at: datetime = Field(alias="createdAt")


class ListJournalEntriesResponse(BaseModel):
    entries: List[JournalEntryResponse] = Field(default_factory=list)
