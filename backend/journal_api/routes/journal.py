"""
Journal API: Journal Entry Route Handlers
==========================================

What:  /api/journal endpoints: list, create, get, update and delete entries.
How:   Validates path ids, delegates to JournalEntryService, maps results to
       status codes. Business rules stay in the service.

Endpoint Inventory:
    GET    /api/journal/{userName}            → 200 list | 404 when empty
    POST   /api/journal/{userName}            → 201 | 400 on any failure
    GET    /api/journal/id/{id}               → 200 entry | 404
    PUT    /api/journal/id/{userName}/{id}    → 200 entry | 404
    DELETE /api/journal/id/{userName}/{id}    → 204
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from journal_api.database import get_database
from journal_api.exceptions import NotFoundError, ValidationError
from journal_api.models.journal_entry import JournalEntry
from journal_api.routes.params import require_object_id
from journal_api.schemas.common import ErrorResponse
from journal_api.schemas.journal_entry import JournalEntryRequest, JournalEntryResponse
from journal_api.services.journal_entry_service import journal_entry_service
from journal_api.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/journal", tags=["Journal Entries"])


def merge_entry_update(stored: JournalEntry, update: JournalEntryRequest) -> JournalEntry:
    """
    Partial update: non-empty title/content replace the stored values.

    Empty strings and absent fields leave the stored value unchanged.
    """
    if update.title:
        stored.title = update.title
    if update.content:
        stored.content = update.content
    return stored


@router.get(
    "/{user_name}",
    response_model=List[JournalEntryResponse],
    responses={404: {"description": "No journal entries", "model": ErrorResponse}},
    summary="Get all journal entries for a user",
)
async def get_all_journal_entries_of_user(
    user_name: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> List[JournalEntryResponse]:
    """
    Returns the journal entries listing.

    The owner is looked up but the listing is NOT filtered by it: every
    entry in the collection is returned, for any username.
    """
    user = await user_service.find_by_user_name(db, user_name)
    if user is None:
        logger.debug("Listing entries for unknown user %s", user_name)

    entries = await journal_entry_service.get_all_journal_entries(db)
    if not entries:
        raise NotFoundError(resource="journal entries")
    return [JournalEntryResponse.from_model(entry) for entry in entries]


@router.post(
    "/{user_name}",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Entry could not be created", "model": ErrorResponse}},
    summary="Create a new journal entry",
)
async def create_journal_entry(
    user_name: str,
    body: JournalEntryRequest,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> Response:
    entry = JournalEntry(title=body.title, content=body.content)
    try:
        await journal_entry_service.save_entry(db, entry, user_name)
    except Exception as e:
        raise ValidationError(
            message="Journal entry could not be created",
            context={"user_name": user_name},
        ) from e
    return Response(status_code=status.HTTP_201_CREATED)


@router.get(
    "/id/{entry_id}",
    response_model=JournalEntryResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Journal entry not found", "model": ErrorResponse},
    },
    summary="Get journal entry by ID",
)
async def get_journal_entry_by_id(
    entry_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> JournalEntryResponse:
    require_object_id(entry_id)
    entry = await journal_entry_service.get_journal_entry_by_id(db, entry_id)
    if entry is None:
        raise NotFoundError(resource="journal entry", resource_id=entry_id)
    return JournalEntryResponse.from_model(entry)


@router.put(
    "/id/{user_name}/{entry_id}",
    response_model=JournalEntryResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Journal entry not found", "model": ErrorResponse},
        500: {"description": "Save failed", "model": ErrorResponse},
    },
    summary="Update journal entry",
)
async def update_journal_entry(
    user_name: str,
    entry_id: str,
    body: JournalEntryRequest,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> JournalEntryResponse:
    """
    Applies a partial update and saves the entry for `user_name`.

    Save failures (e.g. unknown user) are not caught here and surface as a
    500 through the DatabaseError handler.
    """
    require_object_id(entry_id)
    stored = await journal_entry_service.get_journal_entry_by_id(db, entry_id)
    if stored is None:
        raise NotFoundError(resource="journal entry", resource_id=entry_id)

    saved = await journal_entry_service.save_entry(
        db, merge_entry_update(stored, body), user_name
    )
    return JournalEntryResponse.from_model(saved)


@router.delete(
    "/id/{user_name}/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete journal entry",
)
async def delete_journal_entry(
    user_name: str,
    entry_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> Response:
    require_object_id(entry_id)
    await journal_entry_service.delete_entity_by_id(db, entry_id, user_name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
