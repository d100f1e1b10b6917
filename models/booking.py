from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from .base import MongoModel


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"


class ConsultationBooking(MongoModel):
    name: str
    email: str
    phone: str
    service: str = ""
    # Calendar day "YYYY-MM-DD" when the submitted value parsed as a date
    preferred_date: Optional[str] = None
    preferred_time: str = ""
    message: str = ""
    new_patient: bool = False
    submitted_at: datetime
    status: BookingStatus = BookingStatus.pending
