from __future__ import annotations

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings


load_dotenv()


class AppSettings(BaseSettings):
    mongo_uri: str = Field(default="mongodb://localhost:27017", alias="MONGO_URI")
    # DATABASE_NAME is read when MONGO_DB_NAME is unset
    database_name: str = Field(
        default="surecan-clinic",
        validation_alias=AliasChoices("MONGO_DB_NAME", "DATABASE_NAME"),
    )
    bookings_collection: str = Field(
        default="ConsultationBookings", alias="BOOKINGS_COLLECTION"
    )
    contacts_collection: str = Field(
        default="ContactSubmissions", alias="CONTACTS_COLLECTION"
    )

    # What to do when the store rejects a write or a read
    on_persistence_failure: Literal["degrade", "fail"] = Field(
        default="degrade", alias="ON_PERSISTENCE_FAILURE"
    )
    on_availability_query_failure: Literal["fail_open", "fail"] = Field(
        default="fail_open", alias="ON_AVAILABILITY_QUERY_FAILURE"
    )

    # Booking calendar
    booking_window_days: int = Field(default=90, alias="BOOKING_WINDOW_DAYS")
    clinic_name: str = Field(default="Surecan Clinic", alias="CLINIC_NAME")

    allowed_origins: str = Field(default="http://localhost:3000", alias="ALLOWED_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    environment: Literal["development", "production", "test"] = Field(
        default="development", alias="ENVIRONMENT"
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


settings = get_settings()
