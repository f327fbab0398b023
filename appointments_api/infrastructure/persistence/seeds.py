# Fixture set loaded by `manage_database.py seed` and SEED_ON_STARTUP
from datetime import date, time

from ...application.ports.appointments_repo import NewAppointment


SEED_APPOINTMENTS = [
    NewAppointment(
        first_name="Rick",
        last_name="Sanchez",
        mobile_number="202-555-0164",
        appointment_date=date(2020, 12, 31),
        appointment_time=time(20, 0),
        people=6,
    ),
    NewAppointment(
        first_name="Frank",
        last_name="Palicky",
        mobile_number="202-555-0153",
        appointment_date=date(2020, 12, 30),
        appointment_time=time(20, 0),
        people=1,
    ),
    NewAppointment(
        first_name="Bird",
        last_name="Person",
        mobile_number="808-555-0141",
        appointment_date=date(2020, 12, 30),
        appointment_time=time(18, 0),
        people=1,
    ),
    NewAppointment(
        first_name="Tiger",
        last_name="Lion",
        mobile_number="808-555-0140",
        appointment_date=date(2025, 12, 30),
        appointment_time=time(18, 0),
        people=3,
    ),
]
