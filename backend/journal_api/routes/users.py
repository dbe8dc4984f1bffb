"""
Journal API: User Route Handlers
=================================

Endpoint Inventory:
    GET    /api/users          → 200 list
    POST   /api/users          → 201 | 400 on any failure
    PUT    /api/{userName}     → 200 | 404 unknown username
    DELETE /api/{userId}       → 200 | 400 on any failure
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from journal_api.database import get_database
from journal_api.exceptions import NotFoundError, ValidationError
from journal_api.routes.params import require_object_id
from journal_api.schemas.common import ErrorResponse
from journal_api.schemas.user import UserRequest, UserResponse
from journal_api.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


@router.get("/users", response_model=List[UserResponse], summary="Get all users")
async def get_all(db: AsyncIOMotorDatabase = Depends(get_database)) -> List[UserResponse]:
    users = await user_service.get_all(db)
    return [UserResponse.from_model(user) for user in users]


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "User could not be created", "model": ErrorResponse}},
    summary="Create a new user",
)
async def save_user(
    body: UserRequest,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> Response:
    try:
        await user_service.save_user(db, body.to_model())
    except Exception as e:
        raise ValidationError(
            message="User could not be created",
            context={"original_error": type(e).__name__},
        ) from e
    return Response(status_code=status.HTTP_201_CREATED)


@router.put(
    "/{user_name}",
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="Update user information",
)
async def update_user(
    user_name: str,
    body: UserRequest,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> Response:
    """
    Replaces userName and password with the body's values.

    Both are copied verbatim, so a field missing from the body is stored as
    null. Roles and journal entries are kept.
    """
    user = await user_service.find_by_user_name(db, user_name)
    if user is None:
        raise NotFoundError(resource="user", resource_id=user_name)

    user.user_name = body.user_name
    user.password = body.password
    await user_service.save_user(db, user)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{user_id}",
    responses={400: {"description": "Invalid user id", "model": ErrorResponse}},
    summary="Delete user",
)
async def delete_user(
    user_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> Response:
    try:
        require_object_id(user_id, field="userId")
        await user_service.delete_user_by_id(db, user_id)
    except ValidationError:
        raise
    except Exception as e:
        raise ValidationError(
            message="User could not be deleted",
            context={"user_id": user_id},
        ) from e
    return Response(status_code=status.HTTP_200_OK)
