"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from psycopg2.extensions import make_dsn

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "students")
DB_USER: str = os.getenv("DB_USER", "postgres")
DB_PASS: str = os.getenv("DB_PASS", "")
DB_CONNECT_TIMEOUT: int = int(os.getenv("DB_CONNECT_TIMEOUT", "10"))

# ── Store failure policy ──────────────────────────────────
# 'degrade': log and return an empty/false/no-op result
# 'raise':   log and raise DataAccessError to the caller
STORE_FAILURE_MODE: str = os.getenv("STORE_FAILURE_MODE", "degrade").strip().lower()

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Connection parameters for the PostgreSQL store.

    Built once at process start and passed explicitly to the DataSource.
    """
    host: str
    port: int
    dbname: str
    user: str
    password: str
    connect_timeout: int = 10

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Build a config from the module-level environment constants."""
        return cls(
            host=DB_HOST,
            port=DB_PORT,
            dbname=DB_NAME,
            user=DB_USER,
            password=DB_PASS,
            connect_timeout=DB_CONNECT_TIMEOUT,
        )

    def dsn(self) -> str:
        """Render a libpq keyword/value connection string (empty values omitted)."""
        return make_dsn(
            host=self.host or None,
            port=self.port,
            dbname=self.dbname or None,
            user=self.user or None,
            password=self.password or None,
            connect_timeout=self.connect_timeout,
        )

    def __repr__(self) -> str:
        return (
            f"DatabaseConfig(host={self.host!r}, port={self.port}, "
            f"dbname={self.dbname!r}, user={self.user!r}, password='***')"
        )
