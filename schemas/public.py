from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Request bodies come straight from public web forms. Every field is typed
# loosely so malformed input reaches the validation layer instead of being
# rejected by FastAPI with a 422.


class BookingRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Any = None
    email: Any = None
    phone: Any = None
    service: Any = None
    preferred_date: Any = Field(default=None, alias="preferredDate")
    preferred_time: Any = Field(default=None, alias="preferredTime")
    message: Any = None
    new_patient: Any = Field(default=None, alias="newPatient")


class ContactRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Any = None
    email: Any = None
    phone: Any = None
    message: Any = None


class _Response(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class BookingSubmissionResponse(_Response):
    success: bool
    booking_id: Optional[str] = Field(default=None, alias="bookingId")
    message: Optional[str] = None
    error: Optional[str] = None


class ContactSubmissionResponse(_Response):
    success: bool
    submission_id: Optional[str] = Field(default=None, alias="submissionId")
    message: Optional[str] = None
    error: Optional[str] = None


class AvailabilityResponse(_Response):
    success: bool
    available_slots: Optional[List[str]] = Field(default=None, alias="availableSlots")
    date: Optional[str] = None
    error: Optional[str] = None


class ValidationResult(_Response):
    is_valid: bool = Field(alias="isValid")
    errors: List[str] = Field(default_factory=list)


class ServiceOption(BaseModel):
    value: str
    label: str
    description: str
    duration_minutes: Optional[int] = None


class TimeSlotOption(BaseModel):
    value: str
    label: str


class BookingWindow(_Response):
    min_date: str = Field(alias="minDate")
    max_date: str = Field(alias="maxDate")
    disabled_dates: List[str] = Field(default_factory=list, alias="disabledDates")


class DegradedModeReport(_Response):
    degraded_writes: int = Field(alias="degradedWrites")
    failed_open_reads: int = Field(alias="failedOpenReads")
