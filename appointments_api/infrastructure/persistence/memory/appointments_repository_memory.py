import threading
from dataclasses import replace
from datetime import date
from typing import Dict, Iterable, List, Optional

from ....application.ports.appointments_repo import (
    AppointmentsRepository,
    AppointmentDto,
    NewAppointment,
)


class InMemoryAppointmentsRepository(AppointmentsRepository):
    """Dict-backed repository with the same contract as the SQL one."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: Dict[int, AppointmentDto] = {}
        self._next_id = 1

    def create(self, appointment: NewAppointment) -> AppointmentDto:
        with self._lock:
            appt = AppointmentDto(
                id=self._next_id,
                first_name=appointment.first_name,
                last_name=appointment.last_name,
                mobile_number=appointment.mobile_number,
                appointment_date=appointment.appointment_date,
                appointment_time=appointment.appointment_time,
                people=appointment.people,
            )
            self._rows[appt.id] = appt
            self._next_id += 1
        return replace(appt)

    def get_by_id(self, appointment_id: int) -> Optional[AppointmentDto]:
        appt = self._rows.get(appointment_id)
        return replace(appt) if appt else None

    def list_all(self, appointment_date: Optional[date] = None) -> List[AppointmentDto]:
        rows = [
            a for a in self._rows.values()
            if appointment_date is None or a.appointment_date == appointment_date
        ]
        rows.sort(key=lambda a: (a.appointment_date, a.appointment_time, a.id))
        return [replace(a) for a in rows]

    def reset(self) -> None:
        with self._lock:
            self._rows.clear()
            self._next_id = 1

    def seed(self, appointments: Iterable[NewAppointment]) -> List[AppointmentDto]:
        return [self.create(appointment) for appointment in appointments]

    def teardown(self) -> None:
        self.reset()
