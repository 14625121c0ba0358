"""
repositories/student_repo.py
-----------------------------
Data access layer for student records.
All SQL queries related to the `students` table live here.

Every operation opens its own connection and releases it in a `finally`
block, after the cursor has been closed by its `with` block.
"""

from typing import Optional

from db.connection import DataSource
from db.errors import DataAccessError
from models.student import Student
from utils.logger import get_logger

logger = get_logger(__name__)

FAILURE_MODES = ("degrade", "raise")


class StudentRepository:
    """
    Repository for CRUD operations on the students table.

    Args:
        data_source: Connection factory for the store.
        failure_mode: 'degrade' logs store failures and returns an
            empty/false/no-op result; 'raise' logs them and raises
            DataAccessError.
    """

    def __init__(self, data_source: DataSource, failure_mode: str = "degrade"):
        if failure_mode not in FAILURE_MODES:
            raise ValueError(
                f"Unknown failure mode {failure_mode!r}, expected one of {FAILURE_MODES}"
            )
        self.data_source = data_source
        self.failure_mode = failure_mode

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[Student]:
        """
        Fetch every student.

        Returns:
            List of Student objects ordered by id ascending.
        """
        sql = "SELECT id, name FROM students ORDER BY id;"
        conn = None
        try:
            conn = self.data_source.get_connection()
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_student(r) for r in cur.fetchall()]
        except Exception as e:
            return self._handle_failure(conn, "list students", e, default=[])
        finally:
            self.data_source.close_connection(conn)

    def exists_by_name(self, name: str) -> bool:
        """
        Check whether at least one student has exactly this name.

        Returns:
            True if the count of matching rows is greater than zero.
        """
        sql = "SELECT COUNT(*) FROM students WHERE name = %s;"
        conn = None
        try:
            conn = self.data_source.get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, (name,))
                row = cur.fetchone()
                return bool(row and row[0] > 0)
        except Exception as e:
            return self._handle_failure(conn, f"check student '{name}'", e, default=False)
        finally:
            self.data_source.close_connection(conn)

    # ── CREATE ────────────────────────────────────────────

    def add(self, name: str) -> Optional[int]:
        """
        Insert a new student. The store assigns the id.

        Args:
            name: Student name (already validated by the service).

        Returns:
            The id assigned by the store, or None if the insert failed
            in degrade mode.
        """
        sql = "INSERT INTO students (name) VALUES (%s) RETURNING id;"
        conn = None
        try:
            conn = self.data_source.get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, (name,))
                student_id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Added student '{name}' #{student_id}")
            return student_id
        except Exception as e:
            return self._handle_failure(conn, f"add student '{name}'", e)
        finally:
            self.data_source.close_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, student_id: int, name: str) -> None:
        """
        Rename an existing student. A missing id is a no-op.
        """
        sql = "UPDATE students SET name = %s WHERE id = %s;"
        conn = None
        try:
            conn = self.data_source.get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, (name, student_id))
                updated = cur.rowcount > 0
            conn.commit()
            if updated:
                logger.info(f"Updated student #{student_id}")
        except Exception as e:
            self._handle_failure(conn, f"update student #{student_id}", e)
        finally:
            self.data_source.close_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, student_id: int) -> None:
        """
        Delete a student by id. A missing id is a no-op.
        """
        sql = "DELETE FROM students WHERE id = %s;"
        conn = None
        try:
            conn = self.data_source.get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, (student_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted student #{student_id}")
        except Exception as e:
            self._handle_failure(conn, f"delete student #{student_id}", e)
        finally:
            self.data_source.close_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _handle_failure(self, conn, action: str, error: Exception, default=None):
        """
        Roll back, log, then either return `default` or raise DataAccessError.
        """
        if conn is not None:
            try:
                conn.rollback()
            except Exception as rollback_error:
                logger.warning(f"Rollback failed after '{action}': {rollback_error}")

        logger.error(f"Failed to {action}: {error}")
        if self.failure_mode == "raise":
            if isinstance(error, DataAccessError):
                raise error
            raise DataAccessError(f"Failed to {action}") from error
        return default

    @staticmethod
    def _row_to_student(row: tuple) -> Student:
        """Convert a database row tuple to a Student domain object."""
        return Student(id=row[0], name=row[1])
