"""
Journal API: Journal Entry Schemas
===================================

What:  Request and response bodies for the /api/journal endpoints.
Why:   Separate from the stored document so the API decides what callers may
       set: a request can carry title and content only. Any `id` or `date`
       in a request body is ignored; both are assigned by the server.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from journal_api.models.journal_entry import JournalEntry


class JournalEntryRequest(BaseModel):
    """Body of POST /api/journal/{userName} and PUT /api/journal/id/{userName}/{id}."""

    title: Optional[str] = Field(default=None, description="Entry title")
    content: Optional[str] = Field(default=None, description="Entry body text")


class JournalEntryResponse(BaseModel):
    id: str = Field(description="24-character hex entry identifier")
    title: Optional[str] = None
    content: Optional[str] = None
    date: Optional[datetime] = Field(
        default=None, description="Server time of the last successful save (UTC)"
    )

    @classmethod
    def from_model(cls, entry: JournalEntry) -> "JournalEntryResponse":
        return cls(id=entry.id, title=entry.title, content=entry.content, date=entry.date)
