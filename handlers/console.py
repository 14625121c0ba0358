"""
handlers/console.py
--------------------
Text input/output port used by the menu controller.
Tests swap `TerminalConsole` for a scripted fake.
"""

from typing import Protocol


class ConsoleIO(Protocol):
    """Minimal text interface the controller depends on."""

    def read(self, prompt: str) -> str: ...
    def write(self, text: str) -> None: ...


class TerminalConsole:
    """ConsoleIO backed by stdin/stdout."""

    def read(self, prompt: str) -> str:
        # EOFError / KeyboardInterrupt propagate; the controller treats them as exit
        return input(prompt)

    def write(self, text: str) -> None:
        print(text)
