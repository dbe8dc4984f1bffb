"""
Journal API: MongoDB Client Management
=======================================

What:  Async motor client, database dependency, transaction helper, index
       bootstrap and liveness ping.
Who:   Used by route handlers via FastAPI's dependency injection system and
       by the application lifespan.
When:  The client is created on first use; the database handle is injected
       per request.

Connection Strategy:
    One AsyncIOMotorClient per process. The driver pools connections
    internally, so handlers never open or close connections themselves.
    serverSelectionTimeoutMS bounds how long a call waits for a reachable
    server when MongoDB is down.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator, Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorClientSession,
    AsyncIOMotorDatabase,
)
from pymongo import ASCENDING

from journal_api.config import settings
from journal_api.models.user import USERS_COLLECTION

logger = logging.getLogger(__name__)

_client: Optional[AsyncIOMotorClient] = None


def get_client() -> AsyncIOMotorClient:
    """Returns the process-wide motor client, creating it on first call."""
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(
            settings.mongodb_url,
            serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
            tz_aware=True,  # Return stored dates as UTC-aware datetimes
        )
    return _client


# ── Database Dependency ───────────────────────────────────────────────────
async def get_database() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    """
    FastAPI dependency that provides the application database.

    Example usage in a route:
        @router.get("/users")
        async def get_all(db: AsyncIOMotorDatabase = Depends(get_database)):
            return await user_service.get_all(db)

    Tests override this dependency with an in-memory database.
    """
    yield get_client()[settings.mongodb_database]


@asynccontextmanager
async def transaction(
    db: AsyncIOMotorDatabase,
) -> AsyncIterator[Optional[AsyncIOMotorClientSession]]:
    """
    Transactional boundary around a group of writes.

    With MONGODB_USE_TRANSACTIONS enabled, yields a session with an open
    transaction; the transaction commits when the block exits normally and
    aborts when it raises. Otherwise yields None and every write inside the
    block commits on its own.
    """
    if not settings.mongodb_use_transactions:
        yield None
        return

    async with await db.client.start_session() as session:
        async with session.start_transaction():
            yield session


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Creates the indexes the queries rely on.

    users.userName is indexed for find_by_user_name but NOT unique:
    duplicate usernames are still accepted.
    """
    try:
        await db[USERS_COLLECTION].create_index(
            [("userName", ASCENDING)], name="idx_users_user_name"
        )
    except Exception as e:
        # Startup continues; /health/mongodb reports the outage
        logger.warning("Could not create indexes: %s", str(e))


async def ping(db: AsyncIOMotorDatabase) -> None:
    """Round-trips a ping command; raises when the server is unreachable."""
    await db.command("ping")


async def close_client() -> None:
    """Closes the motor client and its connection pool at shutdown."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
