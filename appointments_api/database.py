from sqlmodel import SQLModel, create_engine, Session
import logging
from .config import settings
from .db.models import Appointment  # noqa: F401  (registers the table on SQLModel.metadata)

logger = logging.getLogger(__name__)

# Choose engine options based on database scheme
db_url = settings.DATABASE_URL
engine_kwargs = {}

if settings.is_sqlite:
    # SQLite specific connect args
    engine_kwargs.update({
        "connect_args": {"check_same_thread": False}
    })
else:
    # Better resiliency for managed Postgres
    engine_kwargs.update({
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": 5,
        "max_overflow": 10,
    })

engine = create_engine(db_url, echo=settings.DATABASE_ECHO, **engine_kwargs)

def create_db_and_tables(bind=None):
    SQLModel.metadata.create_all(bind or engine)
    logger.info("Database tables created")

def get_session():
    with Session(engine) as session:
        yield session
