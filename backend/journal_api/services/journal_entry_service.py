"""
Journal API: Journal Entry Service
===================================

What:  JournalEntry lifecycle plus the rule that keeps each user's embedded
       `journalEntries` list in step with the `journal_entries` collection.
Who:   Called by the journal route handlers.

Dual-write flow (save_entry):
    ┌──────────────┐    ┌─────────────────┐    ┌──────────────────┐
    │ find owner   │───▶│ save entry to   │───▶│ embed entry in   │
    │ by userName  │    │ journal_entries │    │ owner, save user │
    └──────────────┘    └─────────────────┘    └──────────────────┘

    Both writes run inside database.transaction(). Without transactions
    enabled they are independent: a failure after the first write leaves a
    standalone entry that no user lists. Concurrent saves for the same user
    race on the owner document and the last write wins.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from journal_api.database import transaction
from journal_api.exceptions import DatabaseError, NotFoundError
from journal_api.models.document import object_id_or_none
from journal_api.models.journal_entry import JournalEntry
from journal_api.models.user import User
from journal_api.repository import JournalEntryRepository
from journal_api.services.user_service import user_service

logger = logging.getLogger(__name__)


def _embed(user: User, entry: JournalEntry) -> None:
    """Puts a copy of `entry` in the owner list, replacing a stale copy with the same id."""
    copy = entry.model_copy(deep=True)
    for index, existing in enumerate(user.journal_entries):
        if existing.id == entry.id:
            user.journal_entries[index] = copy
            return
    user.journal_entries.append(copy)


class JournalEntryService:
    """
    Business logic for journal entries.

    Error Handling Strategy:
        save_entry wraps every failure (unknown owner included) in
        DatabaseError, chained to the original exception and logged.
        The read and delete operations let repository errors propagate.
    """

    async def save_entry(
        self, db: AsyncIOMotorDatabase, entry: JournalEntry, user_name: str
    ) -> JournalEntry:
        """
        Persist `entry` and record it in the owner's list.

        `entry.date` is overwritten with the current UTC time whatever the
        caller put there. Used for both creates (no id yet) and edits.

        Returns:
            The saved entry, with its id assigned.

        Raises:
            DatabaseError: owner not found, or either write failed
        """
        try:
            async with transaction(db) as session:
                user = await user_service.find_by_user_name(db, user_name, session=session)
                if user is None:
                    raise NotFoundError(resource="user", resource_id=user_name)

                now = datetime.now(timezone.utc)
                # MongoDB dates keep milliseconds only
                entry.date = now.replace(microsecond=now.microsecond // 1000 * 1000)
                saved = await JournalEntryRepository(db).save(entry, session=session)

                _embed(user, saved)
                await user_service.save_user(db, user, session=session)

            logger.info("Saved journal entry %s for user %s", saved.id, user_name)
            return saved

        except Exception as e:
            logger.error(
                "Error while saving journal entry for user %s: %s",
                user_name,
                str(e),
                exc_info=True,
            )
            raise DatabaseError(
                message="Error while saving journal entry",
                context={"user_name": user_name, "original_error": type(e).__name__},
            ) from e

    async def get_all_journal_entries(self, db: AsyncIOMotorDatabase) -> List[JournalEntry]:
        """Every entry in the collection, whoever owns it."""
        return await JournalEntryRepository(db).find_all()

    async def get_journal_entry_by_id(
        self, db: AsyncIOMotorDatabase, entry_id: Optional[str]
    ) -> Optional[JournalEntry]:
        return await JournalEntryRepository(db).find_by_id(entry_id)

    async def delete_entity_by_id(
        self, db: AsyncIOMotorDatabase, entry_id: str, user_name: str
    ) -> None:
        """
        Detach the entry from `user_name`'s list, then delete it.

        Ownership is not checked: if `user_name` does not own the entry its
        list is left as it was, and the entry is deleted anyway.
        """
        user = await user_service.find_by_user_name(db, user_name)
        if user is None:
            logger.warning(
                "Deleting entry %s: no user named %s, skipping owner cleanup",
                entry_id,
                user_name,
            )
        else:
            # compare parsed ids: hex case differs between callers and storage
            target = object_id_or_none(entry_id)
            user.journal_entries = [
                entry
                for entry in user.journal_entries
                if object_id_or_none(entry.id) != target
            ]
            await user_service.save_user(db, user)

        await JournalEntryRepository(db).delete_by_id(entry_id)
        logger.info("Deleted journal entry %s", entry_id)

    async def delete_entity(self, db: AsyncIOMotorDatabase, entry: JournalEntry) -> None:
        await JournalEntryRepository(db).delete(entry)

    async def delete_all_entities(self, db: AsyncIOMotorDatabase) -> None:
        await JournalEntryRepository(db).delete_all()


journal_entry_service = JournalEntryService()
