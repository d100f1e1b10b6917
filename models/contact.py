from __future__ import annotations

from datetime import datetime
from enum import Enum

from .base import MongoModel


class ContactStatus(str, Enum):
    new = "new"


class ContactSubmission(MongoModel):
    name: str
    email: str
    phone: str = ""
    message: str = ""
    submitted_at: datetime
    status: ContactStatus = ContactStatus.new
