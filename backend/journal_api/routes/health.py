"""
Journal API: MongoDB Health Check Route
========================================

What:  Liveness probe against the document store.
Who:   Called by Docker health checks, load balancers and monitoring.

Responses:
    200 {"status": "UP", "database": "Connected"}
    503 {"status": "DOWN", "error": "<driver message>"}
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from journal_api.database import get_database, ping
from journal_api.schemas.common import MongoHealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "/mongodb",
    response_model=MongoHealthResponse,
    response_model_exclude_none=True,
    responses={503: {"description": "MongoDB unreachable", "model": MongoHealthResponse}},
    summary="MongoDB health check",
)
async def check_mongodb_health(db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        await ping(db)
    except Exception as e:
        logger.warning("Health check: MongoDB unreachable: %s", str(e))
        body = MongoHealthResponse(status="DOWN", error=str(e))
        return JSONResponse(status_code=503, content=body.model_dump(exclude_none=True))

    return MongoHealthResponse(status="UP", database="Connected")
