import copy
from datetime import date, time

import pytest

from appointments_api.application.ports.appointments_repo import NewAppointment
from appointments_api.application.validators.appointment_validator import (
    REQUIRED_FIELDS,
    ValidationFailure,
    parse_date,
    parse_time,
    validate_appointment,
)
from appointments_api.schemas.appointments.appointment import (
    MAX_PEOPLE,
    MOBILE_NUMBER_MAX_LENGTH,
    NAME_MAX_LENGTH,
    AppointmentCreate,
)


def test_valid_payload_is_normalized(valid_data):
    out = validate_appointment({"data": valid_data})
    assert out == NewAppointment(
        first_name="first",
        last_name="last",
        mobile_number="800-555-1212",
        appointment_date=date(2025, 1, 1),
        appointment_time=time(17, 30),
        people=2,
    )


@pytest.mark.parametrize("payload", [None, [], "data", {}, {"datum": {}}, {"data": None}, {"data": ["x"]}])
def test_missing_data_object(payload):
    out = validate_appointment(payload)
    assert isinstance(out, ValidationFailure)
    assert out.missing_data is True
    assert out.errors == ()
    assert out.message == "data is missing"


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_missing_field_is_reported(valid_data, field):
    del valid_data[field]
    out = validate_appointment({"data": valid_data})
    assert isinstance(out, ValidationFailure)
    assert out.fields == (field,)
    assert field in out.message


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_empty_string_behaves_like_missing(valid_data, field):
    missing = dict(valid_data)
    del missing[field]
    valid_data[field] = ""
    assert validate_appointment({"data": valid_data}) == validate_appointment({"data": missing})


def test_blank_text_counts_as_missing(valid_data):
    valid_data["first_name"] = "   "
    out = validate_appointment({"data": valid_data})
    assert out.fields == ("first_name",)
    assert out.message == "first_name is required"


def test_text_fields_are_trimmed(valid_data):
    valid_data["first_name"] = "  first "
    out = validate_appointment({"data": valid_data})
    assert out.first_name == "first"


def test_non_string_text_field(valid_data):
    valid_data["mobile_number"] = 8005551212
    out = validate_appointment({"data": valid_data})
    assert out.fields == ("mobile_number",)
    assert "mobile_number" in out.message


def test_every_violation_is_reported_in_field_order():
    out = validate_appointment({"data": {"people": 0, "appointment_time": "nope"}})
    assert out.fields == REQUIRED_FIELDS
    for field in REQUIRED_FIELDS:
        assert field in out.message
    assert out.message.index("first_name") < out.message.index("people")


def test_missing_field_reports_no_format_error():
    out = validate_appointment({"data": {}})
    assert out.message.count("appointment_date") == 1
    assert "YYYY-MM-DD" not in out.message


@pytest.mark.parametrize("value", ["2025-01-01", "2024-02-29", "1999-12-31"])
def test_accepts_dates(valid_data, value):
    valid_data["appointment_date"] = value
    out = validate_appointment({"data": valid_data})
    assert isinstance(out, NewAppointment)
    assert out.appointment_date.isoformat() == value


@pytest.mark.parametrize(
    "value",
    ["not-a-date", "2025/01/01", "01-01-2025", "2025-1-1", "2025-01", "2025-02-30", "20250101", "2025-01-01T10:00", 20250101],
)
def test_rejects_bad_dates(valid_data, value):
    valid_data["appointment_date"] = value
    out = validate_appointment({"data": valid_data})
    assert isinstance(out, ValidationFailure)
    assert out.fields == ("appointment_date",)
    assert "appointment_date" in out.message


@pytest.mark.parametrize("value,expected", [("17:30", time(17, 30)), ("00:00", time(0, 0)), ("23:59", time(23, 59))])
def test_accepts_times(valid_data, value, expected):
    valid_data["appointment_time"] = value
    assert validate_appointment({"data": valid_data}).appointment_time == expected


@pytest.mark.parametrize("value", ["not-a-time", "7:30", "24:00", "12:60", "17:30:00", "5pm", 1730])
def test_rejects_bad_times(valid_data, value):
    valid_data["appointment_time"] = value
    out = validate_appointment({"data": valid_data})
    assert out.fields == ("appointment_time",)
    assert "appointment_time" in out.message


@pytest.mark.parametrize("value", [0, -1, "2", 2.5, 2.0, True, [2]])
def test_rejects_bad_people(valid_data, value):
    valid_data["people"] = value
    out = validate_appointment({"data": valid_data})
    assert isinstance(out, ValidationFailure)
    assert out.fields == ("people",)
    assert "people" in out.message


@pytest.mark.parametrize("value", [1, 2, 12])
def test_accepts_people(valid_data, value):
    valid_data["people"] = value
    assert validate_appointment({"data": valid_data}).people == value


def test_extraneous_fields_are_stripped(valid_data):
    valid_data["id"] = 42
    valid_data["notes"] = "window seat"
    out = validate_appointment({"data": valid_data})
    assert isinstance(out, NewAppointment)
    assert not hasattr(out, "id")
    assert not hasattr(out, "notes")


def test_validation_is_idempotent_and_does_not_mutate_input(valid_data):
    valid_data["first_name"] = " first "
    payload = {"data": valid_data}
    snapshot = copy.deepcopy(payload)
    assert validate_appointment(payload) == validate_appointment(payload)
    assert payload == snapshot

    bad = {"data": {"people": "2"}}
    assert validate_appointment(bad) == validate_appointment(bad)


def test_parse_helpers():
    assert parse_date("2025-01-01") == date(2025, 1, 1)
    assert parse_date("2025-13-01") is None
    assert parse_date(None) is None
    assert parse_time("09:05") == time(9, 5)
    assert parse_time("9:05") is None


@pytest.mark.parametrize("value", [2**31, 2**63, 10**30])
def test_rejects_people_too_large_for_storage(valid_data, value):
    valid_data["people"] = value
    out = validate_appointment({"data": valid_data})
    assert isinstance(out, ValidationFailure)
    assert out.fields == ("people",)
    assert "people" in out.message


def test_accepts_largest_storable_people(valid_data):
    valid_data["people"] = MAX_PEOPLE
    assert validate_appointment({"data": valid_data}).people == 2**31 - 1


@pytest.mark.parametrize(
    "field,limit",
    [("first_name", NAME_MAX_LENGTH), ("last_name", NAME_MAX_LENGTH), ("mobile_number", MOBILE_NUMBER_MAX_LENGTH)],
)
def test_text_length_matches_column(valid_data, field, limit):
    valid_data[field] = "x" * limit
    assert isinstance(validate_appointment({"data": valid_data}), NewAppointment)

    valid_data[field] = "x" * (limit + 1)
    out = validate_appointment({"data": valid_data})
    assert out.fields == (field,)
    assert field in out.message


def test_long_name_is_checked_after_trimming(valid_data):
    valid_data["first_name"] = "  " + "x" * NAME_MAX_LENGTH + "  "
    assert validate_appointment({"data": valid_data}).first_name == "x" * NAME_MAX_LENGTH


def test_appointment_create_model_matches_validator(valid_data):
    model = AppointmentCreate.model_validate(valid_data)
    assert model.appointment_date == date(2025, 1, 1)
    assert model.appointment_time == time(17, 30)
    assert NewAppointment(**model.model_dump()) == validate_appointment({"data": valid_data})
