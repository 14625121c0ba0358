"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from config import DatabaseConfig
from db.connection import DataSource
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Students table: one row per registered student
CREATE TABLE IF NOT EXISTS students (
    id      SERIAL PRIMARY KEY,
    name    TEXT NOT NULL
);
"""


def create_tables(data_source: DataSource) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Raises:
        DatabaseConnectionError: If the store is unreachable.
    """
    with data_source.connection() as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
            conn.commit()
            logger.info("Database schema initialized successfully.")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to initialize schema: {e}")
            raise


if __name__ == "__main__":
    create_tables(DataSource(DatabaseConfig.from_env()))
    print("Database schema created successfully.")
