import logging
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from .....db.models import Appointment
from .....exceptions import StorageError
from .....application.ports.appointments_repo import (
    AppointmentsRepository,
    AppointmentDto,
    NewAppointment,
)

logger = logging.getLogger(__name__)

# sqlite3 raises OverflowError itself for integers wider than 64 bits
STORAGE_ERRORS = (SQLAlchemyError, OverflowError)


class SqlAppointmentsRepository(AppointmentsRepository):
    def __init__(self, session: Session):
        self.session = session

    def _appt_to_dto(self, a: Appointment) -> AppointmentDto:
        return AppointmentDto(
            id=a.id,
            first_name=a.first_name,
            last_name=a.last_name,
            mobile_number=a.mobile_number,
            appointment_date=a.appointment_date,
            appointment_time=a.appointment_time,
            people=a.people,
        )

    def _fail(self, action: str, exc: Exception) -> StorageError:
        self.session.rollback()
        logger.error(f"Error {action}: {exc}")
        return StorageError(str(exc))

    def _tables(self):
        return [SQLModel.metadata.tables[Appointment.__tablename__]]

    def create(self, appointment: NewAppointment) -> AppointmentDto:
        appt = Appointment(
            first_name=appointment.first_name,
            last_name=appointment.last_name,
            mobile_number=appointment.mobile_number,
            appointment_date=appointment.appointment_date,
            appointment_time=appointment.appointment_time,
            people=appointment.people,
        )
        try:
            self.session.add(appt)
            self.session.commit()
            self.session.refresh(appt)
        except STORAGE_ERRORS as e:
            raise self._fail("creating appointment", e) from e
        return self._appt_to_dto(appt)

    def get_by_id(self, appointment_id: int) -> Optional[AppointmentDto]:
        try:
            a = self.session.exec(select(Appointment).where(Appointment.id == appointment_id)).first()
        except STORAGE_ERRORS as e:
            raise self._fail(f"reading appointment {appointment_id}", e) from e
        return self._appt_to_dto(a) if a else None

    def list_all(self, appointment_date: Optional[date] = None) -> List[AppointmentDto]:
        query = select(Appointment)
        if appointment_date is not None:
            query = query.where(Appointment.appointment_date == appointment_date)
        query = query.order_by(Appointment.appointment_date, Appointment.appointment_time, Appointment.id)
        try:
            rows = self.session.exec(query).all()
        except STORAGE_ERRORS as e:
            raise self._fail("listing appointments", e) from e
        return [self._appt_to_dto(r) for r in rows]

    def reset(self) -> None:
        engine = self.session.get_bind()
        self.session.close()
        try:
            SQLModel.metadata.drop_all(engine, tables=self._tables())
            SQLModel.metadata.create_all(engine, tables=self._tables())
        except STORAGE_ERRORS as e:
            raise self._fail("resetting appointments table", e) from e

    def seed(self, appointments: Iterable[NewAppointment]) -> List[AppointmentDto]:
        return [self.create(appointment) for appointment in appointments]

    def teardown(self) -> None:
        engine = self.session.get_bind()
        self.session.close()
        try:
            SQLModel.metadata.drop_all(engine, tables=self._tables())
        except STORAGE_ERRORS as e:
            raise self._fail("dropping appointments table", e) from e
