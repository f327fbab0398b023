from typing import Any, Optional
from fastapi import APIRouter, Body, Depends, Query
from sqlmodel import Session
import logging

from ..database import get_session
from ..application.ports.appointments_repo import AppointmentsRepository
from ..application.services.appointments_service import AppointmentsService
from ..infrastructure.persistence.sqlalchemy.repositories.appointments_repository_sql import SqlAppointmentsRepository
from ..schemas.appointments.appointment import (
    AppointmentEnvelope,
    AppointmentListEnvelope,
    AppointmentResponse,
)
from ..schemas.common.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


def get_appointments_repository(session: Session = Depends(get_session)) -> AppointmentsRepository:
    return SqlAppointmentsRepository(session)


def get_appointments_service(
    repo: AppointmentsRepository = Depends(get_appointments_repository),
) -> AppointmentsService:
    return AppointmentsService(repo=repo)


@router.post(
    "",
    status_code=201,
    response_model=AppointmentEnvelope,
    responses={400: {"model": ErrorResponse}},
)
def create_appointment(
    payload: Any = Body(default=None),
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    appt = appt_service.create(payload)
    return AppointmentEnvelope(data=AppointmentResponse.model_validate(appt))


@router.get(
    "",
    response_model=AppointmentListEnvelope,
    responses={400: {"model": ErrorResponse}},
)
def list_appointments(
    date: Optional[str] = Query(default=None, description="Only appointments on this day (YYYY-MM-DD)"),
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    appts = appt_service.list(date)
    return AppointmentListEnvelope(data=[AppointmentResponse.model_validate(a) for a in appts])


@router.get(
    "/{appointment_id}",
    response_model=AppointmentEnvelope,
    responses={404: {"model": ErrorResponse}},
)
def read_appointment(
    appointment_id: int,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    appt = appt_service.read(appointment_id)
    return AppointmentEnvelope(data=AppointmentResponse.model_validate(appt))
