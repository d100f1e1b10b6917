from __future__ import annotations

import logging
from functools import lru_cache

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from core.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_motor_client() -> AsyncIOMotorClient:
    return AsyncIOMotorClient(settings.mongo_uri, appname="clinic-booking")


async def get_database() -> AsyncIOMotorDatabase:
    client = get_motor_client()
    return client[settings.database_name]


async def close_database() -> None:
    client = get_motor_client()
    client.close()


async def ensure_indexes() -> None:
    # Availability lookups filter bookings by day; the store may be down at boot
    db = await get_database()
    try:
        await db[settings.bookings_collection].create_index(
            [("preferred_date", ASCENDING)], name="preferred_date_1"
        )
    except PyMongoError:
        logger.warning(
            "db.ensure_indexes_failed",
            extra={"collection": settings.bookings_collection},
            exc_info=True,
        )
