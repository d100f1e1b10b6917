"""
Pytest configuration and shared fixtures.
"""
from collections import defaultdict
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from core.config import settings
from services.booking import degraded_mode


class InMemoryRepository:
    """
    Stand-in for BaseRepository that keeps documents in dicts.

    Inserts and queries can be made to fail the way an unreachable
    MongoDB deployment would.
    """

    def __init__(self, fail_inserts: bool = False, fail_queries: bool = False):
        self.collections: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.fail_inserts = fail_inserts
        self.fail_queries = fail_queries
        self.insert_calls = 0
        self.queries: List[tuple] = []

    async def insert_one(self, collection: str, doc: Dict[str, Any]) -> ObjectId:
        self.insert_calls += 1
        if self.fail_inserts:
            raise ServerSelectionTimeoutError("localhost:27017: connection refused")
        stored = {k: v for k, v in doc.items() if k != "_id"}
        stored["_id"] = ObjectId()
        self.collections[collection].append(stored)
        return stored["_id"]

    async def find_many(
        self, collection: str, query: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        self.queries.append((collection, query))
        if self.fail_queries:
            raise OperationFailure("not authorized on surecan-clinic to execute command")
        query = query or {}
        return [
            doc for doc in self.collections[collection]
            if all(doc.get(field) == value for field, value in query.items())
        ]


class ExplodingRepository:
    """Repository whose failures are not store errors."""

    async def insert_one(self, collection: str, doc: Dict[str, Any]) -> ObjectId:
        raise RuntimeError("unexpected")

    async def find_many(self, collection: str, query: Optional[Dict[str, Any]] = None):
        raise RuntimeError("unexpected")


@pytest.fixture(autouse=True)
def reset_degraded_mode():
    degraded_mode.reset()
    yield
    degraded_mode.reset()


@pytest.fixture
def repo() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def offline_repo() -> InMemoryRepository:
    return InMemoryRepository(fail_inserts=True, fail_queries=True)


@pytest.fixture
def strict_settings():
    """Settings with both failure policies set to report errors."""
    return settings.model_copy(
        update={"on_persistence_failure": "fail", "on_availability_query_failure": "fail"}
    )


@pytest.fixture
def valid_booking() -> Dict[str, Any]:
    return {
        "name": "Jo",
        "email": "jo@example.com",
        "phone": "5551234567",
        "service": "initial",
        "preferredDate": "2024-02-15",
        "preferredTime": "09:00",
    }


@pytest.fixture
def exploding_repo() -> ExplodingRepository:
    return ExplodingRepository()
