from __future__ import annotations

# Re-export the public operations for convenient imports
from .booking import get_available_time_slots, submit_consultation_booking, submit_contact_form
from .validation import is_valid_email, sanitize_string, validate_booking_data

__all__ = [
    "get_available_time_slots",
    "submit_consultation_booking",
    "submit_contact_form",
    "is_valid_email",
    "sanitize_string",
    "validate_booking_data",
]
