from dataclasses import dataclass
from typing import Iterable, List, Optional
from datetime import date, time


@dataclass(frozen=True)
class NewAppointment:
    first_name: str
    last_name: str
    mobile_number: str
    appointment_date: date
    appointment_time: time
    people: int


@dataclass
class AppointmentDto:
    id: int
    first_name: str
    last_name: str
    mobile_number: str
    appointment_date: date
    appointment_time: time
    people: int


class AppointmentsRepository:
    def create(self, appointment: NewAppointment) -> AppointmentDto:
        ...

    def get_by_id(self, appointment_id: int) -> Optional[AppointmentDto]:
        ...

    def list_all(self, appointment_date: Optional[date] = None) -> List[AppointmentDto]:
        ...

    # Lifecycle: used by tests and the database management script
    def reset(self) -> None:
        ...

    def seed(self, appointments: Iterable[NewAppointment]) -> List[AppointmentDto]:
        ...

    def teardown(self) -> None:
        ...
