"""
Journal API: JournalEntry Document
===================================

What:  A single journal entry, stored in the `journal_entries` collection and
       embedded (as a copy) in its owner's `journalEntries` list.

Lifecycle:
    1. Created through POST /api/journal/{userName}
    2. Updated in place through PUT /api/journal/id/{userName}/{id}
    3. Deleted by id, which also detaches it from the owner's list

`date` is server-assigned on every save; callers never control it.
"""

from datetime import datetime
from typing import Optional

from journal_api.models.document import MongoDocument

JOURNAL_ENTRIES_COLLECTION = "journal_entries"


class JournalEntry(MongoDocument):
    title: Optional[str] = None
    content: Optional[str] = None
    date: Optional[datetime] = None

    def __repr__(self) -> str:
        return f"<JournalEntry(id={self.id}, title='{self.title}', date='{self.date}')>"
