"""
services/student_service.py
----------------------------
Business logic for managing students.
Validates user input before delegating to the StudentRepository.
"""

from typing import Optional

from models.student import Student
from repositories.student_repo import StudentRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ValidationError(ValueError):
    """Input rejected before it reaches the store."""


class StudentService:
    """
    Handles all business rules related to students.

    The service performs no I/O itself: every call either raises
    ValidationError or forwards cleaned input to the repository.
    """

    def __init__(self, repo: StudentRepository):
        self.repo = repo

    def list_all(self) -> list[Student]:
        """Return every student, ordered by id."""
        return self.repo.get_all()

    def add_student(self, name: Optional[str]) -> Optional[int]:
        """
        Register a new student.

        Returns:
            The new id, or None if the store swallowed a failure.

        Raises:
            ValidationError: If the name is blank after trimming.
        """
        return self.repo.add(self._clean_name(name))

    def update_student(self, student_id: int, name: Optional[str]) -> None:
        """
        Rename an existing student.

        Raises:
            ValidationError: If the id is not positive or the name is blank.
        """
        self._check_id(student_id)
        self.repo.update(student_id, self._clean_name(name))

    def delete_student(self, student_id: int) -> None:
        """
        Delete a student by id.

        Raises:
            ValidationError: If the id is not positive.
        """
        self._check_id(student_id)
        self.repo.delete(student_id)

    def student_exists(self, name: Optional[str]) -> bool:
        """Check whether a student with this (trimmed) name is stored."""
        cleaned = (name or "").strip()
        if not cleaned:
            return False
        return self.repo.exists_by_name(cleaned)

    @staticmethod
    def _clean_name(name: Optional[str]) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            logger.debug("Rejected blank student name")
            raise ValidationError("name required")
        return cleaned

    @staticmethod
    def _check_id(student_id: int) -> None:
        if student_id is None or student_id <= 0:
            logger.debug(f"Rejected student id {student_id!r}")
            raise ValidationError("invalid id")
