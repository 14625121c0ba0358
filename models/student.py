"""
models/student.py
-----------------
Domain model for a registered student.
"""

from dataclasses import dataclass


@dataclass
class Student:
    """
    Represents one row of the `students` table.

    Attributes:
        name: Display name, never blank once persisted.
        id: Database primary key (0 for records not yet stored).
    """
    name: str
    id: int = 0

    def is_new(self) -> bool:
        """Returns True if the store has not assigned an id yet."""
        return self.id == 0

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
