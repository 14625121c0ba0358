"""
db/connection.py
----------------
Opens and releases PostgreSQL connections.
Each call to `get_connection()` opens a fresh psycopg2 session; there is
no pool, so every repository operation owns its connection end to end.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2.extensions import connection as PgConnection

from config import DatabaseConfig
from db.errors import DatabaseConnectionError
from utils.logger import get_logger

logger = get_logger(__name__)


class DataSource:
    """Connection factory bound to one DatabaseConfig."""

    def __init__(self, config: DatabaseConfig, connect=psycopg2.connect):
        self.config = config
        self._connect = connect

    def get_connection(self) -> PgConnection:
        """
        Open a new connection to the store.

        Returns:
            A psycopg2 connection object.

        Raises:
            DatabaseConnectionError: If the driver cannot establish a session
                (bad credentials, unreachable host, driver error).
        """
        # not logged here; the caller that handles the error logs it
        try:
            return self._connect(self.config.dsn())
        except psycopg2.Error as e:
            raise DatabaseConnectionError(
                f"cannot connect to database at {self.config.host}:{self.config.port}/"
                f"{self.config.dbname}: {str(e).strip()}"
            ) from e

    def close_connection(self, conn: Optional[PgConnection]) -> None:
        """
        Close a connection, best effort.

        Errors raised while closing are logged and never propagated.

        Args:
            conn: The connection to release. ``None`` is ignored.
        """
        if conn is None:
            return
        try:
            conn.close()
        except Exception as e:
            logger.warning(f"Failed to close database connection: {e}")

    @contextmanager
    def connection(self) -> Iterator[PgConnection]:
        """
        Scoped acquisition: yield a connection and always release it.

        Usage:
            with data_source.connection() as conn:
                ...
        """
        conn = self.get_connection()
        try:
            yield conn
        finally:
            self.close_connection(conn)
