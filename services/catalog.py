from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple

from schemas.public import BookingWindow, ServiceOption, TimeSlotOption


# One consultation per slot, eight slots a day
SLOT_CATALOG: Tuple[str, ...] = (
    "09:00",
    "10:00",
    "11:00",
    "12:00",
    "13:00",
    "14:00",
    "15:00",
    "16:00",
)

SERVICES: Tuple[ServiceOption, ...] = (
    ServiceOption(
        value="initial",
        label="Initial Consultation (30 min) - $150",
        description="A comprehensive initial consultation to assess your health needs and create a personalized care plan.",
        duration_minutes=30,
    ),
    ServiceOption(
        value="followup",
        label="Follow-Up Consultation (20 min) - $100",
        description="Review your progress and adjust your treatment plan as needed.",
        duration_minutes=20,
    ),
    ServiceOption(
        value="comprehensive",
        label="Comprehensive Health Assessment (60 min) - $250",
        description="In-depth health assessment including detailed examination and personalized wellness recommendations.",
        duration_minutes=60,
    ),
    ServiceOption(
        value="specialized",
        label="Specialized Consultation - Contact for pricing",
        description="Specialized services tailored to your specific health requirements. Our team will contact you to discuss details and pricing.",
    ),
)


def slot_label(slot: str) -> str:
    """Render "13:00" as "1:00 PM"."""
    hour, minute = (int(part) for part in slot.split(":"))
    suffix = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {suffix}"


def list_time_slots() -> List[TimeSlotOption]:
    return [TimeSlotOption(value=slot, label=slot_label(slot)) for slot in SLOT_CATALOG]


def list_services() -> List[ServiceOption]:
    return list(SERVICES)


def parse_calendar_day(value: object) -> date:
    """Reduce a date, datetime or ISO string to its calendar day.

    Raises ValueError when the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        # Browsers send full ISO timestamps, sometimes with a trailing Z
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()


def booking_window(days: int, today: Optional[date] = None) -> BookingWindow:
    start = today or date.today()
    end = start + timedelta(days=days)
    weekends = [
        (start + timedelta(days=offset)).isoformat()
        for offset in range(days)
        if (start + timedelta(days=offset)).weekday() >= 5
    ]
    return BookingWindow(
        min_date=start.isoformat(),
        max_date=end.isoformat(),
        disabled_dates=weekends,
    )
