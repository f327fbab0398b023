"""
Validation for appointment payloads.

``validate_appointment`` takes the raw request body (``{"data": {...}}``) and
returns either a normalized ``NewAppointment`` or a ``ValidationFailure``
describing every rule the payload broke. It never touches storage and never
mutates its input.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from ...exceptions import MISSING_DATA_MESSAGE
from ...schemas.appointments.appointment import AppointmentCreate, parse_date, parse_time
from ..ports.appointments_repo import NewAppointment

__all__ = [
    "REQUIRED_FIELDS",
    "FieldError",
    "ValidationFailure",
    "ValidationResult",
    "parse_date",
    "parse_time",
    "validate_appointment",
]

REQUIRED_FIELDS = tuple(AppointmentCreate.model_fields)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationFailure:
    errors: Tuple[FieldError, ...] = ()
    missing_data: bool = False

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(error.field for error in self.errors)

    @property
    def message(self) -> str:
        if self.missing_data:
            return MISSING_DATA_MESSAGE
        return "; ".join(error.message for error in self.errors)


ValidationResult = Union[NewAppointment, ValidationFailure]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def _field_message(field: str, error: Dict[str, Any]) -> str:
    if error["type"] == "value_error":
        # Our own validators already name the field
        return str(error["ctx"]["error"])
    return f"{field}: {error['msg']}"


def validate_appointment(payload: Any) -> ValidationResult:
    if not isinstance(payload, Mapping):
        return ValidationFailure(missing_data=True)
    data = payload.get("data")
    if not isinstance(data, Mapping):
        return ValidationFailure(missing_data=True)

    missing = [field for field in REQUIRED_FIELDS if _is_missing(data.get(field))]
    errors: Dict[str, FieldError] = {
        field: FieldError(field, f"{field} is required") for field in missing
    }

    try:
        appointment = AppointmentCreate.model_validate(dict(data))
    except PydanticValidationError as exc:
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            # A missing field reports only that it is required
            if field in errors or field not in REQUIRED_FIELDS:
                continue
            errors[field] = FieldError(field, _field_message(field, error))
    else:
        if not errors:
            return NewAppointment(**appointment.model_dump())

    ordered: List[FieldError] = [errors[field] for field in REQUIRED_FIELDS if field in errors]
    return ValidationFailure(errors=tuple(ordered))
