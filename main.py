"""
main.py
-------
Entry point for the Student Registry console application.

Responsibilities:
    - Build the database configuration from the environment.
    - Ensure the `students` table exists.
    - Wire repository, service and menu controller, then run the menu.
"""

import sys

from config import STORE_FAILURE_MODE, DatabaseConfig
from db.connection import DataSource
from db.errors import DataAccessError
from db.init_db import create_tables
from handlers.console import TerminalConsole
from handlers.menu_handler import MenuController
from repositories.student_repo import StudentRepository
from services.student_service import StudentService
from utils.logger import get_logger

logger = get_logger(__name__)


def build_controller(data_source: DataSource, console=None) -> MenuController:
    """Wire the layers around an existing data source."""
    repo = StudentRepository(data_source, failure_mode=STORE_FAILURE_MODE)
    service = StudentService(repo)
    return MenuController(service, console or TerminalConsole())


def main() -> int:
    """Initialize the schema and run the menu loop."""

    # ── 1. Database setup ─────────────────────────────────
    config = DatabaseConfig.from_env()
    logger.info(f"Using database {config.host}:{config.port}/{config.dbname}")
    data_source = DataSource(config)
    try:
        create_tables(data_source)
    except DataAccessError as e:
        logger.error(f"Cannot start: {e}")
        return 1

    # ── 2. Menu loop ──────────────────────────────────────
    controller = build_controller(data_source)
    controller.run()
    logger.info("Student Registry stopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
