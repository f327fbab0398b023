#!/usr/bin/env python3
"""
Database management script

    python manage_database.py migrate    # create the appointments table
    python manage_database.py rollback   # drop it
    python manage_database.py seed       # load the fixture appointments
    python manage_database.py reset      # rollback + migrate + seed
"""
import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from appointments_api.config import settings
from appointments_api.database import create_db_and_tables, engine
from appointments_api.exceptions import StorageError
from appointments_api.infrastructure.persistence.seeds import SEED_APPOINTMENTS
from appointments_api.infrastructure.persistence.sqlalchemy.repositories.appointments_repository_sql import (
    SqlAppointmentsRepository,
)

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO), format=settings.LOG_FORMAT)
logger = logging.getLogger("manage_database")


def migrate():
    create_db_and_tables(engine)


def rollback():
    with Session(engine) as session:
        SqlAppointmentsRepository(session).teardown()
    logger.info("Dropped appointments table")


def seed():
    with Session(engine) as session:
        created = SqlAppointmentsRepository(session).seed(SEED_APPOINTMENTS)
    logger.info(f"Seeded {len(created)} appointments")


def reset():
    with Session(engine) as session:
        repo = SqlAppointmentsRepository(session)
        repo.reset()
        created = repo.seed(SEED_APPOINTMENTS)
    logger.info(f"Reset appointments table and seeded {len(created)} appointments")


COMMANDS = {
    "migrate": migrate,
    "rollback": rollback,
    "seed": seed,
    "reset": reset,
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Manage the appointments database")
    parser.add_argument("command", choices=sorted(COMMANDS))
    args = parser.parse_args(argv)

    logger.info(f"Running '{args.command}' against {engine.url.render_as_string(hide_password=True)}")
    try:
        COMMANDS[args.command]()
    except (SQLAlchemyError, StorageError) as e:
        logger.error(f"'{args.command}' failed: {getattr(e, 'message', e)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
