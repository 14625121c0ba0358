"""
handlers/menu_handler.py
-------------------------
Console menu loop for the student registry.
Reads a choice, delegates to StudentService, prints the result.
No business logic lives here.
"""

from typing import Callable, Optional

from db.errors import DataAccessError
from handlers.console import ConsoleIO
from services.student_service import StudentService, ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)

MENU_TEXT = """
===== Student Registry =====
1. Show students
2. Add student
3. Edit student
4. Delete student
5. Exit
"""

EXIT_CHOICE = "5"


class MenuController:
    """
    Single-state menu loop: every action returns to "awaiting choice"
    except exit, which ends `run()`.
    """

    def __init__(self, service: StudentService, console: ConsoleIO):
        self.service = service
        self.console = console
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.show_students,
            "2": self.add_student,
            "3": self.edit_student,
            "4": self.delete_student,
        }

    def run(self) -> None:
        """Loop until the user picks exit or input ends."""
        while True:
            self.console.write(MENU_TEXT)
            try:
                choice = self.console.read("Choose an option: ").strip()
            except (EOFError, KeyboardInterrupt):
                choice = EXIT_CHOICE

            if choice == EXIT_CHOICE:
                self.console.write("Goodbye!")
                return

            action = self._actions.get(choice)
            if action is None:
                self.console.write(f"⚠️ Unknown option '{choice}'. Pick a number from 1 to 5.")
                continue

            try:
                action()
            except ValidationError as e:
                self.console.write(f"⚠️ {e}")
            except (EOFError, KeyboardInterrupt):
                self.console.write("Goodbye!")
                return
            except DataAccessError as e:
                logger.error(f"Menu option {choice} failed: {e}")
                self.console.write(f"❌ Database error: {e}")

    # ── ACTIONS ───────────────────────────────────────────

    def show_students(self) -> None:
        students = self.service.list_all()
        if not students:
            self.console.write("📭 No students registered.")
            return
        for student in students:
            self.console.write(f"  {student}")

    def add_student(self) -> None:
        name = self.console.read("Name: ")
        student_id = self.service.add_student(name)
        if student_id:
            self.console.write(f"✅ Student '{name.strip()}' saved as #{student_id}.")
        else:
            self.console.write(f"⚠️ Student '{name.strip()}' could not be saved.")

    def edit_student(self) -> None:
        student_id = self._read_id("Student id to edit: ")
        name = self.console.read("New name: ")
        self.service.update_student(student_id, name)
        self.console.write(f"✏️ Student #{student_id} updated.")

    def delete_student(self) -> None:
        student_id = self._read_id("Student id to delete: ")
        self.service.delete_student(student_id)
        self.console.write(f"🗑️ Student #{student_id} deleted.")

    # ── HELPERS ───────────────────────────────────────────

    def _read_id(self, prompt: str) -> int:
        raw = self.console.read(prompt).strip()
        student_id = _parse_int(raw)
        if student_id is None:
            raise ValidationError("invalid id")
        return student_id


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None
