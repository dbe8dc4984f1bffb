"""
Journal API: User Service
==========================

What:  User lifecycle on top of the `users` collection.
Who:   Called by the user route handlers and by JournalEntryService.

Repository exceptions propagate unchanged; translating them is the caller's
job. No username uniqueness check happens here: two users saved with the same
userName both persist, and find_by_user_name then returns one of them.
"""

import logging
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorClientSession, AsyncIOMotorDatabase

from journal_api.models.user import User
from journal_api.repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Stateless; receives the database handle on every call."""

    async def save_user(
        self,
        db: AsyncIOMotorDatabase,
        user: User,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> User:
        saved = await UserRepository(db).save(user, session=session)
        logger.debug("Saved user %s (%s)", saved.id, saved.user_name)
        return saved

    async def get_all(self, db: AsyncIOMotorDatabase) -> List[User]:
        return await UserRepository(db).find_all()

    async def get_user_by_id(
        self, db: AsyncIOMotorDatabase, user_id: Optional[str]
    ) -> Optional[User]:
        return await UserRepository(db).find_by_id(user_id)

    async def delete_user_by_id(
        self, db: AsyncIOMotorDatabase, user_id: Optional[str]
    ) -> None:
        """
        Deletes the user document only.

        The user's entries stay in `journal_entries`.
        """
        await UserRepository(db).delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)

    async def find_by_user_name(
        self,
        db: AsyncIOMotorDatabase,
        user_name: Optional[str],
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> Optional[User]:
        return await UserRepository(db).find_by_user_name(user_name, session=session)


user_service = UserService()
