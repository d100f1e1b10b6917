from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Query

from core.config import settings
from db.database import get_database
from repositories.base import BaseRepository
from schemas.public import (
    AvailabilityResponse,
    BookingSubmissionResponse,
    BookingWindow,
    ContactSubmissionResponse,
    DegradedModeReport,
    ServiceOption,
    TimeSlotOption,
    ValidationResult,
)
from services.booking import (
    degraded_mode,
    get_available_time_slots,
    submit_consultation_booking,
    submit_contact_form,
)
from services.catalog import booking_window, list_services, list_time_slots
from services.validation import validate_booking_data


router = APIRouter(tags=["public"])


async def get_repository() -> BaseRepository:
    db = await get_database()
    return BaseRepository(db)


# Bodies are taken as raw JSON so bad input gets a structured answer, not a 422


@router.post("/bookings", response_model=BookingSubmissionResponse, response_model_exclude_none=True)
async def create_booking(
    payload: Any = Body(default=None),
    repo: BaseRepository = Depends(get_repository),
) -> BookingSubmissionResponse:
    return await submit_consultation_booking(repo, payload)


@router.post("/bookings/validate", response_model=ValidationResult)
async def validate_booking(payload: Any = Body(default=None)) -> ValidationResult:
    return validate_booking_data(payload)


@router.post("/contact", response_model=ContactSubmissionResponse, response_model_exclude_none=True)
async def create_contact_submission(
    payload: Any = Body(default=None),
    repo: BaseRepository = Depends(get_repository),
) -> ContactSubmissionResponse:
    return await submit_contact_form(repo, payload)


@router.get("/availability", response_model=AvailabilityResponse, response_model_exclude_none=True)
async def get_availability(
    date: str | None = Query(default=None, description="Day to check, YYYY-MM-DD"),
    repo: BaseRepository = Depends(get_repository),
) -> AvailabilityResponse:
    return await get_available_time_slots(repo, date)


@router.get("/services", response_model=List[ServiceOption], response_model_exclude_none=True)
async def get_services() -> List[ServiceOption]:
    return list_services()


@router.get("/time-slots", response_model=List[TimeSlotOption])
async def get_time_slots() -> List[TimeSlotOption]:
    return list_time_slots()


@router.get("/booking-window", response_model=BookingWindow)
async def get_booking_window() -> BookingWindow:
    return booking_window(settings.booking_window_days)


@router.get("/health/degraded", response_model=DegradedModeReport)
async def get_degraded_mode() -> DegradedModeReport:
    return degraded_mode.report()
