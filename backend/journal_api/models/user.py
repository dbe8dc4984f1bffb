"""
Journal API: User Document
===========================

What:  A registered user, stored in the `users` collection.

Document shape:
    {
        "_id": ObjectId,
        "userName": str,         # intended unique, not enforced
        "password": str,         # stored verbatim
        "roles": [str, ...],
        "journalEntries": [      # embedded copies, maintained by JournalEntryService
            {"_id": ObjectId, "title": str, "content": str, "date": datetime},
        ],
    }
"""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import Field

from journal_api.models.document import MongoDocument
from journal_api.models.journal_entry import JournalEntry

USERS_COLLECTION = "users"


class User(MongoDocument):
    user_name: Optional[str] = Field(default=None, alias="userName")
    password: Optional[str] = None
    roles: List[str] = Field(default_factory=list)
    journal_entries: List[JournalEntry] = Field(
        default_factory=list, alias="journalEntries"
    )

    def to_document(self) -> Dict[str, Any]:
        doc = super().to_document()
        # Embedded entries keep the same `_id` shape as the standalone ones
        doc["journalEntries"] = [entry.to_document() for entry in self.journal_entries]
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "User":
        data = dict(doc)
        data["journalEntries"] = [
            JournalEntry.from_document(entry) for entry in data.get("journalEntries") or []
        ]
        return super().from_document(data)

    def __repr__(self) -> str:
        return (
            f"<User(id={self.id}, userName='{self.user_name}', "
            f"entries={len(self.journal_entries)})>"
        )
