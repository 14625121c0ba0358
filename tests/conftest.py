"""Pytest configuration for the test suite.

Ensure the repository root is on sys.path so the application packages
(`db`, `repositories`, `services`, ...) can be imported regardless of how
pytest is invoked by IDEs or CI.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from config import DatabaseConfig  # noqa: E402
from models.student import Student  # noqa: E402


@pytest.fixture
def db_config() -> DatabaseConfig:
    return DatabaseConfig(
        host="db.example.test",
        port=5432,
        dbname="students",
        user="tester",
        password="secret",
        connect_timeout=3,
    )


@pytest.fixture
def events() -> list:
    """Ordered log of resource releases recorded by the mock connection."""
    return []


@pytest.fixture
def mock_cursor() -> MagicMock:
    cursor = MagicMock()
    cursor.rowcount = 0
    cursor.fetchall.return_value = []
    cursor.fetchone.return_value = (0,)
    return cursor


@pytest.fixture
def mock_connection(mock_cursor, events) -> MagicMock:
    conn = MagicMock()
    cursor_cm = conn.cursor.return_value
    cursor_cm.__enter__.return_value = mock_cursor
    cursor_cm.__exit__.side_effect = lambda *exc: events.append("cursor_closed")
    conn.close.side_effect = lambda: events.append("connection_closed")
    return conn


class InMemoryStudentRepository:
    """Repository double keeping rows in a dict; ids start at 1."""

    def __init__(self):
        self.rows: dict[int, str] = {}
        self.calls: list[tuple] = []
        self._next_id = 1

    def get_all(self) -> list[Student]:
        self.calls.append(("get_all",))
        return [Student(id=i, name=n) for i, n in sorted(self.rows.items())]

    def add(self, name: str) -> int:
        self.calls.append(("add", name))
        student_id = self._next_id
        self.rows[student_id] = name
        self._next_id += 1
        return student_id

    def update(self, student_id: int, name: str) -> None:
        self.calls.append(("update", student_id, name))
        if student_id in self.rows:
            self.rows[student_id] = name

    def delete(self, student_id: int) -> None:
        self.calls.append(("delete", student_id))
        self.rows.pop(student_id, None)

    def exists_by_name(self, name: str) -> bool:
        self.calls.append(("exists_by_name", name))
        return name in self.rows.values()


@pytest.fixture
def memory_repo() -> InMemoryStudentRepository:
    return InMemoryStudentRepository()
