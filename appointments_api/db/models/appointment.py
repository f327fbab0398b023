# appointments_api/db/models/appointment.py
from typing import Optional
from datetime import date, time
from sqlmodel import SQLModel, Field

from ...schemas.appointments.appointment import MOBILE_NUMBER_MAX_LENGTH, NAME_MAX_LENGTH


class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"
    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    last_name: str = Field(max_length=NAME_MAX_LENGTH)
    mobile_number: str = Field(max_length=MOBILE_NUMBER_MAX_LENGTH)
    appointment_date: date = Field(index=True)
    appointment_time: time
    people: int
