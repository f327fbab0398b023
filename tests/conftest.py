import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from appointments_api.database import get_session
from appointments_api.infrastructure.persistence.memory.appointments_repository_memory import (
    InMemoryAppointmentsRepository,
)
from appointments_api.infrastructure.persistence.seeds import SEED_APPOINTMENTS
from appointments_api.infrastructure.persistence.sqlalchemy.repositories.appointments_repository_sql import (
    SqlAppointmentsRepository,
)
from appointments_api.main import app
from appointments_api.routers.appointments_router import get_appointments_repository


VALID_DATA = {
    "first_name": "first",
    "last_name": "last",
    "mobile_number": "800-555-1212",
    "appointment_date": "2025-01-01",
    "appointment_time": "17:30",
    "people": 2,
}


@pytest.fixture
def valid_data():
    return dict(VALID_DATA)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def sql_repo(engine):
    """Fresh, seeded appointments table for each test."""
    with Session(engine) as session:
        repo = SqlAppointmentsRepository(session)
        repo.reset()
        repo.seed(SEED_APPOINTMENTS)
        yield repo
        repo.teardown()


@pytest.fixture
def client(sql_repo):
    def override_get_session():
        return sql_repo.session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def memory_repo():
    return InMemoryAppointmentsRepository()


@pytest.fixture
def memory_client(memory_repo):
    app.dependency_overrides[get_appointments_repository] = lambda: memory_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
