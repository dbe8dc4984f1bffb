"""
Journal API: User Schemas
==========================

What:  Request and response bodies for the user endpoints.

Security:
    `password` is accepted on input and never serialized back out.
    `journalEntries` cannot be set through a request body; only
    JournalEntryService changes it.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from journal_api.models.user import User
from journal_api.schemas.journal_entry import JournalEntryResponse


class UserRequest(BaseModel):
    """Body of POST /api/users and PUT /api/{userName}."""

    model_config = ConfigDict(populate_by_name=True)

    user_name: Optional[str] = Field(default=None, alias="userName")
    password: Optional[str] = None
    roles: List[str] = Field(default_factory=list)

    def to_model(self) -> User:
        return User(user_name=self.user_name, password=self.password, roles=list(self.roles))


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="24-character hex user identifier")
    user_name: Optional[str] = Field(default=None, alias="userName")
    roles: List[str] = Field(default_factory=list)
    journal_entries: List[JournalEntryResponse] = Field(
        default_factory=list, alias="journalEntries"
    )

    @classmethod
    def from_model(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            user_name=user.user_name,
            roles=user.roles,
            journal_entries=[JournalEntryResponse.from_model(e) for e in user.journal_entries],
        )
