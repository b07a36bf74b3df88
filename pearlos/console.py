"""Text console: coloured output, formatted printing, line input and kernel messages."""

from __future__ import annotations

from collections.abc import Callable

from pearlos.display import TRANSPARENT, Color, Display, attribute
from pearlos.errors import KernelPanic
from pearlos.printf import format_string

RED_ON_BLACK = attribute(Color.RED, Color.BLACK)


class Console:
    """Writes to a display and reads lines from a character source."""

    def __init__(
        self,
        display: Display | None = None,
        read_char: Callable[[], str] | None = None,
    ) -> None:
        self.display = display if display is not None else Display()
        self._read_char = read_char

    def write(self, text: str, color: int = TRANSPARENT) -> None:
        """Print ``text`` up to its first NUL character."""
        self.display.write(text.split("\0", 1)[0], color)

    def writeln(self, text: str, color: int = TRANSPARENT) -> None:
        """Print ``text`` and move to the next line."""
        self.write(text, color)
        self.display.newline()

    def printf(self, fmt: str, *args) -> int:
        """Print formatted text; return the number of characters produced."""
        text = format_string(fmt, *args)
        self.display.write(text)
        return len(text)

    def scan(self) -> str:
        """Read and echo characters up to a newline; backspace erases."""
        if self._read_char is None:
            raise EOFError("console has no input source")
        typed: list[str] = []
        while True:
            character = self._read_char()
            if not character:
                raise EOFError("input ended before a newline")
            if character == "\n":
                break
            if character == "\b":
                if typed:
                    typed.pop()
                    self.display.delete_char()
                continue
            self.display.put_char(character)
            typed.append(character)
        self.display.newline()
        return "".join(typed)

    def info(self, message: str) -> None:
        """Report information from the system or a program."""
        self.printf("[INFO] %s\n", message)

    def warning(self, message: str) -> None:
        """Report a possible problem."""
        self.printf("[WARNING] %s\n", message)

    def error(self, message: str) -> None:
        """Report a problem."""
        self.printf("[ERROR] %s\n", message)

    def panic(self, message: str) -> None:
        """Report a fatal problem in red and halt by raising KernelPanic."""
        self.write("[PANIC] ", RED_ON_BLACK)
        self.write(message, RED_ON_BLACK)
        self.display.newline()
        raise KernelPanic(message)