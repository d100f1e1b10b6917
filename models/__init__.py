from .booking import BookingStatus, ConsultationBooking
from .contact import ContactStatus, ContactSubmission

__all__ = [
    "BookingStatus",
    "ConsultationBooking",
    "ContactStatus",
    "ContactSubmission",
]
