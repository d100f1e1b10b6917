"""Booking, contact and availability operations behind the public forms.

Every coroutine here is total: it always returns a response model and never
raises to its caller. Store faults (``PyMongoError``) are handled according to
the configured failure policies; anything else becomes a generic error and a
log line.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel
from pymongo.errors import PyMongoError

from core.config import AppSettings, settings
from models.booking import ConsultationBooking
from models.contact import ContactSubmission
from repositories.base import BaseRepository, utcnow
from schemas.public import (
    AvailabilityResponse,
    BookingRequest,
    BookingSubmissionResponse,
    ContactRequest,
    ContactSubmissionResponse,
    DegradedModeReport,
)
from services.catalog import SLOT_CATALOG, parse_calendar_day
from services.validation import coerce_request, is_valid_email, sanitize_string


logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"
INVALID_EMAIL = "Invalid email address"
SERVER_ERROR = "Server error occurred"
AVAILABILITY_ERROR = "Could not retrieve available time slots"


class DegradedModeCounter:
    """Counts requests answered without the store behind them."""

    def __init__(self) -> None:
        self.degraded_writes = 0
        self.failed_open_reads = 0

    def record_write(self) -> None:
        self.degraded_writes += 1

    def record_read(self) -> None:
        self.failed_open_reads += 1

    def reset(self) -> None:
        self.degraded_writes = 0
        self.failed_open_reads = 0

    def report(self) -> DegradedModeReport:
        return DegradedModeReport(
            degraded_writes=self.degraded_writes,
            failed_open_reads=self.failed_open_reads,
        )


degraded_mode = DegradedModeCounter()


def _fallback_id() -> str:
    return f"temp-{int(time.time() * 1000)}"


def _normalize_preferred_date(value: Any) -> Optional[str]:
    if not value:
        return None
    try:
        return parse_calendar_day(value).isoformat()
    except ValueError:
        return sanitize_string(value) or None


async def _persist(
    repo: BaseRepository, collection: str, record: BaseModel, config: AppSettings
) -> Optional[str]:
    """Insert ``record`` and return its id, a placeholder id, or None.

    None means the write failed and the ``fail`` policy is active.
    """
    try:
        inserted_id = await repo.insert_one(
            collection, record.model_dump(by_alias=True, exclude_none=False)
        )
    except PyMongoError:
        logger.exception("submissions.insert_failed", extra={"collection": collection})
        if config.on_persistence_failure == "fail":
            return None
        degraded_mode.record_write()
        placeholder = _fallback_id()
        logger.warning(
            "submissions.record_not_saved",
            extra={
                "collection": collection,
                "placeholder_id": placeholder,
                "record": record.model_dump(mode="json", exclude={"id"}),
            },
        )
        return placeholder
    return str(inserted_id)


async def submit_consultation_booking(
    repo: BaseRepository,
    data: Union[BookingRequest, Mapping[str, Any], None],
    config: Optional[AppSettings] = None,
) -> BookingSubmissionResponse:
    config = config or settings
    try:
        request = coerce_request(data, BookingRequest)

        # Looser than validate_booking_data; forms are expected to call that first
        if not request.name or not request.email or not request.phone:
            return BookingSubmissionResponse(success=False, error=MISSING_FIELDS)

        if not is_valid_email(request.email):
            return BookingSubmissionResponse(success=False, error=INVALID_EMAIL)

        booking = ConsultationBooking(
            name=sanitize_string(request.name),
            email=sanitize_string(request.email).lower(),
            phone=sanitize_string(request.phone),
            service=sanitize_string(request.service or ""),
            preferred_date=_normalize_preferred_date(request.preferred_date),
            preferred_time=sanitize_string(request.preferred_time or ""),
            message=sanitize_string(request.message or ""),
            new_patient=request.new_patient is True,
            submitted_at=utcnow(),
        )

        booking_id = await _persist(repo, config.bookings_collection, booking, config)
        if booking_id is None:
            return BookingSubmissionResponse(success=False, error=SERVER_ERROR)

        logger.info(
            "bookings.submitted",
            extra={"booking_id": booking_id, "date": booking.preferred_date, "time": booking.preferred_time},
        )
        return BookingSubmissionResponse(
            success=True,
            booking_id=booking_id,
            message="Booking submitted successfully",
        )
    except Exception:
        logger.exception("bookings.submit_failed")
        return BookingSubmissionResponse(success=False, error=SERVER_ERROR)


async def submit_contact_form(
    repo: BaseRepository,
    data: Union[ContactRequest, Mapping[str, Any], None],
    config: Optional[AppSettings] = None,
) -> ContactSubmissionResponse:
    config = config or settings
    try:
        request = coerce_request(data, ContactRequest)

        if not request.name or not request.email:
            return ContactSubmissionResponse(success=False, error=MISSING_FIELDS)

        if not is_valid_email(request.email):
            return ContactSubmissionResponse(success=False, error=INVALID_EMAIL)

        submission = ContactSubmission(
            name=sanitize_string(request.name),
            email=sanitize_string(request.email).lower(),
            phone=sanitize_string(request.phone or ""),
            message=sanitize_string(request.message or ""),
            submitted_at=utcnow(),
        )

        submission_id = await _persist(repo, config.contacts_collection, submission, config)
        if submission_id is None:
            return ContactSubmissionResponse(success=False, error=SERVER_ERROR)

        logger.info("contact.submitted", extra={"submission_id": submission_id})
        return ContactSubmissionResponse(
            success=True,
            submission_id=submission_id,
            message="Contact form submitted successfully",
        )
    except Exception:
        logger.exception("contact.submit_failed")
        return ContactSubmissionResponse(success=False, error=SERVER_ERROR)


async def get_available_time_slots(
    repo: BaseRepository,
    date_string: Any,
    config: Optional[AppSettings] = None,
) -> AvailabilityResponse:
    """List the catalog slots still free on the day named by ``date_string``.

    Only ISO dates ("2024-02-15") and ISO timestamps are understood. Anything
    else, "Feb 15 2024" or "" included, is answered with ``success=False``
    rather than a full day of slots.
    """
    config = config or settings
    try:
        try:
            day = parse_calendar_day(date_string).isoformat()
        except ValueError:
            logger.warning("availability.invalid_date", extra={"value": str(date_string)})
            return AvailabilityResponse(success=False, error=AVAILABILITY_ERROR)

        try:
            bookings = await repo.find_many(config.bookings_collection, {"preferred_date": day})
        except PyMongoError:
            logger.exception(
                "availability.query_failed",
                extra={"collection": config.bookings_collection, "date": day},
            )
            if config.on_availability_query_failure == "fail":
                return AvailabilityResponse(success=False, error=AVAILABILITY_ERROR)
            degraded_mode.record_read()
            bookings = []

        booked = {booking.get("preferred_time") for booking in bookings}
        available = [slot for slot in SLOT_CATALOG if slot not in booked]
        echoed = date_string if isinstance(date_string, str) else day
        return AvailabilityResponse(success=True, available_slots=available, date=echoed)
    except Exception:
        logger.exception("availability.lookup_failed", extra={"value": str(date_string)})
        return AvailabilityResponse(success=False, error=AVAILABILITY_ERROR)
