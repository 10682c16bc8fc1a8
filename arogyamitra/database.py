# database.py
import logging

from databases import Database
from fastapi import Request
import sqlalchemy

from .models import metadata, PROFILE_MIGRATION_COLUMNS

logger = logging.getLogger(__name__)


def build_database(database_url: str) -> Database:
    """Create the shared async handle; connected/disconnected by the app lifespan."""
    return Database(database_url)


def init_db(database_url: str):
    """Create missing tables and add the profile columns older databases lack."""
    # schema work runs once at startup on a short-lived sync engine
    engine = sqlalchemy.create_engine(database_url.replace("+aiosqlite", ""))
    try:
        metadata.create_all(engine)

        inspector = sqlalchemy.inspect(engine)
        existing = {column["name"] for column in inspector.get_columns("profiles")}
        with engine.begin() as conn:
            for column in PROFILE_MIGRATION_COLUMNS:
                if column not in existing:
                    logger.info("Migrating profiles: adding column %s", column)
                    conn.execute(sqlalchemy.text(f"ALTER TABLE profiles ADD COLUMN {column} TEXT"))

        logger.info("Database tables: %s", sorted(sqlalchemy.inspect(engine).get_table_names()))
    finally:
        engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database
