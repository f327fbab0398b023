from dataclasses import dataclass
from typing import Any, List, Optional
import logging

from ..ports.appointments_repo import AppointmentsRepository, AppointmentDto
from ..validators.appointment_validator import ValidationFailure, parse_date, validate_appointment
from ...exceptions import MissingDataError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class AppointmentsService:
    repo: AppointmentsRepository

    def create(self, payload: Any) -> AppointmentDto:
        result = validate_appointment(payload)
        if isinstance(result, ValidationFailure):
            if result.missing_data:
                logger.info("Rejected appointment: no data object in request body")
                raise MissingDataError(result.message)
            logger.info(f"Rejected appointment: invalid fields {list(result.fields)}")
            raise ValidationError(result.fields, result.message)

        appt = self.repo.create(result)
        logger.info(f"Created appointment {appt.id} for {appt.appointment_date} {appt.appointment_time:%H:%M}")
        return appt

    def read(self, appointment_id: int) -> AppointmentDto:
        appt = self.repo.get_by_id(appointment_id)
        if not appt:
            raise NotFoundError(appointment_id)
        return appt

    def list(self, appointment_date: Optional[str] = None) -> List[AppointmentDto]:
        if appointment_date is None:
            return self.repo.list_all()
        parsed = parse_date(appointment_date)
        if parsed is None:
            raise ValidationError(
                ["date"],
                f"date must be a date in YYYY-MM-DD format, received {appointment_date!r}",
            )
        return self.repo.list_all(parsed)
