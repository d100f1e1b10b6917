"""Field checks and string hygiene shared by every public form.

These helpers never raise. They are safe to call on raw, untrusted input and
always return a value the caller can act on.
"""
from __future__ import annotations

import re
from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel

from schemas.public import BookingRequest, ValidationResult


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_FIELD_LENGTH = 1000

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def is_valid_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.match(value) is not None


def sanitize_string(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    # Strip after removing brackets and after truncating, either can expose
    # edge whitespace ("< a"), and the result must be a fixed point
    cleaned = value.replace("<", "").replace(">", "").strip()
    return cleaned[:MAX_FIELD_LENGTH].rstrip()


def coerce_request(data: Union[_ModelT, Mapping[str, Any], None], model: Type[_ModelT]) -> _ModelT:
    if isinstance(data, model):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)
    if not isinstance(data, Mapping):
        data = {}
    return model.model_validate(dict(data))


def _stripped_length(value: Any) -> int:
    return len(value.strip()) if isinstance(value, str) else 0


def validate_booking_data(data: Union[BookingRequest, Mapping[str, Any], None]) -> ValidationResult:
    """Check a booking form and report every problem at once."""
    request = coerce_request(data, BookingRequest)
    errors: list[str] = []

    if _stripped_length(request.name) < 2:
        errors.append("Name must be at least 2 characters")

    if not is_valid_email(request.email):
        errors.append("Invalid email address")

    if _stripped_length(request.phone) < 10:
        errors.append("Phone number must be at least 10 digits")

    if not request.service:
        errors.append("Please select a service")

    if not request.preferred_date:
        errors.append("Please select a date")

    if not request.preferred_time:
        errors.append("Please select a time")

    return ValidationResult(is_valid=not errors, errors=errors)
