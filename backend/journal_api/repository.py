"""
Journal API: Document Repositories
===================================

What:  Generic CRUD access to one MongoDB collection, plus the two typed
       repositories the services use.
How:   Each repository wraps a motor collection and a MongoDocument subclass;
       documents are converted to models on the way out and back on the way in.
Who:   Constructed by the services with the per-request database handle.

Every method takes an optional `session` so that it can run inside the
transaction opened by database.transaction().
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorClientSession, AsyncIOMotorDatabase

from journal_api.models.document import MongoDocument, object_id_or_none
from journal_api.models.journal_entry import JOURNAL_ENTRIES_COLLECTION, JournalEntry
from journal_api.models.user import USERS_COLLECTION, User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=MongoDocument)


class MongoRepository(Generic[ModelT]):
    """CRUD operations for a single collection."""

    collection_name: str
    model: Type[ModelT]

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[self.collection_name]

    async def find_all(
        self, session: Optional[AsyncIOMotorClientSession] = None
    ) -> List[ModelT]:
        cursor = self.collection.find({}, session=session)
        return [self.model.from_document(doc) async for doc in cursor]

    async def find_by_id(
        self, id: Optional[str], session: Optional[AsyncIOMotorClientSession] = None
    ) -> Optional[ModelT]:
        """Returns the document with this id, or None (also for malformed ids)."""
        oid = object_id_or_none(id)
        if oid is None:
            return None
        doc = await self.collection.find_one({"_id": oid}, session=session)
        return self.model.from_document(doc) if doc else None

    async def find_one_by(
        self,
        field: str,
        value: Any,
        session: Optional[AsyncIOMotorClientSession] = None,
    ) -> Optional[ModelT]:
        """Returns the first document whose `field` equals `value`, or None."""
        doc = await self.collection.find_one({field: value}, session=session)
        return self.model.from_document(doc) if doc else None

    async def save(
        self, model: ModelT, session: Optional[AsyncIOMotorClientSession] = None
    ) -> ModelT:
        """
        Upsert keyed by id.

        An unsaved model is inserted and receives the generated id in place;
        a model with an id replaces the stored document (or is inserted
        under that id when absent).
        """
        doc = model.to_document()
        if model.id is None:
            result = await self.collection.insert_one(doc, session=session)
            model.id = str(result.inserted_id)
        else:
            await self.collection.replace_one(
                {"_id": doc["_id"]}, doc, upsert=True, session=session
            )
        return model

    async def delete_by_id(
        self, id: Optional[str], session: Optional[AsyncIOMotorClientSession] = None
    ) -> None:
        oid = object_id_or_none(id)
        if oid is None:
            return
        result = await self.collection.delete_one({"_id": oid}, session=session)
        if not result.deleted_count:
            logger.debug("%s: nothing to delete for id %s", self.collection_name, id)

    async def delete(
        self, model: ModelT, session: Optional[AsyncIOMotorClientSession] = None
    ) -> None:
        await self.delete_by_id(model.id, session=session)

    async def delete_all(
        self, session: Optional[AsyncIOMotorClientSession] = None
    ) -> None:
        await self.collection.delete_many({}, session=session)


class UserRepository(MongoRepository[User]):
    collection_name = USERS_COLLECTION
    model = User

    async def find_by_user_name(
        self, user_name: Optional[str], session: Optional[AsyncIOMotorClientSession] = None
    ) -> Optional[User]:
        return await self.find_one_by("userName", user_name, session=session)


class JournalEntryRepository(MongoRepository[JournalEntry]):
    collection_name = JOURNAL_ENTRIES_COLLECTION
    model = JournalEntry
