# appointments_api/schemas/appointments/appointment.py
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_serializer, field_validator
from typing import Any, List, Optional
from datetime import date, datetime, time
import re

NAME_MAX_LENGTH = 100
MOBILE_NUMBER_MAX_LENGTH = 30
# Largest value a signed 32-bit INTEGER column holds
MAX_PEOPLE = 2**31 - 1

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")


def parse_date(value: Any) -> Optional[date]:
    """Parse a strict YYYY-MM-DD string; None for anything else."""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_time(value: Any) -> Optional[time]:
    """Parse a strict 24h HH:MM string; None for anything else."""
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        return None
    return datetime.strptime(value, "%H:%M").time()


class AppointmentCreate(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True, frozen=True)

    first_name: StrictStr = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: StrictStr = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    mobile_number: StrictStr = Field(..., min_length=1, max_length=MOBILE_NUMBER_MAX_LENGTH)
    appointment_date: date = Field(..., description="Format: YYYY-MM-DD")
    appointment_time: time = Field(..., description="Format: HH:MM")
    people: StrictInt = Field(..., ge=1, le=MAX_PEOPLE)

    @field_validator("appointment_date", mode="before")
    @classmethod
    def validate_appointment_date(cls, v):
        parsed = parse_date(v)
        if parsed is None:
            raise ValueError(f"appointment_date must be a date in YYYY-MM-DD format, received {v!r}")
        return parsed

    @field_validator("appointment_time", mode="before")
    @classmethod
    def validate_appointment_time(cls, v):
        parsed = parse_time(v)
        if parsed is None:
            raise ValueError(f"appointment_time must be a time in HH:MM format, received {v!r}")
        return parsed


class AppointmentBase(BaseModel):
    first_name: str
    last_name: str
    mobile_number: str
    appointment_date: date  # YYYY-MM-DD
    appointment_time: time  # HH:MM
    people: int

    @field_serializer("appointment_date")
    def serialize_date(self, value: date) -> str:
        return value.strftime("%Y-%m-%d")

    @field_serializer("appointment_time")
    def serialize_time(self, value: time) -> str:
        return value.strftime("%H:%M")

class AppointmentResponse(AppointmentBase):
    model_config = ConfigDict(from_attributes=True)

    id: int

class AppointmentEnvelope(BaseModel):
    data: AppointmentResponse

class AppointmentListEnvelope(BaseModel):
    data: List[AppointmentResponse]
