from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseRepository:
    """Thin async wrapper over a Motor database.

    The booking workflow only ever appends documents and reads them back by
    field equality, so this class exposes exactly that.
    """

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.db = db

    async def find_many(
        self, collection: str, query: Dict[str, Any] | None = None
    ) -> List[Dict[str, Any]]:
        cursor = self.db[collection].find(query or {})
        return [doc async for doc in cursor]

    async def insert_one(self, collection: str, doc: Dict[str, Any]) -> ObjectId:
        # Never persist a null _id; MongoDB generates one
        if doc.get("_id", "__absent__") is None:
            doc = {k: v for k, v in doc.items() if k != "_id"}
        result = await self.db[collection].insert_one(doc)
        return result.inserted_id
