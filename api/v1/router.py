from __future__ import annotations

from fastapi import APIRouter

from api.v1.endpoints import public as public_endpoints


api_router = APIRouter()

api_router.include_router(public_endpoints.router)
