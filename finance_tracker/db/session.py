from fastapi import FastAPI, Request

from finance_tracker.core.config import Settings
from finance_tracker.core.logging import get_logger
from finance_tracker.db.json_store import JsonDatabase

logger = get_logger(__name__)


def open_database(app: FastAPI, settings: Settings) -> JsonDatabase:
    """Create the backing files if needed and attach the database to the app."""
    database = JsonDatabase(settings.users_path, settings.database_path)
    database.initialize()
    app.state.db = database
    logger.info(
        "Opened JSON database: users=%s data=%s",
        settings.users_path,
        settings.database_path,
    )
    return database


def close_database(app: FastAPI) -> None:
    """Detach the database from the app."""
    if getattr(app.state, "db", None) is not None:
        app.state.db = None
        logger.info("Closed JSON database")


def get_db(request: Request) -> JsonDatabase:
    """Return the database attached to the running application."""
    return request.app.state.db
