"""The kernel shell: reads commands from the console and runs them."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from pearlos.console import Console
from pearlos.conv import str_to_int
from pearlos.display import Color, attribute
from pearlos.errors import (
    FIRMWARE_ERROR_ISR_EXCEPTION,
    KERNEL_INFO_MANUAL_HELP,
    KERNEL_INFO_SHELL_UNKNOWN_COMMAND,
    KERNEL_INFO_SHELL_WELCOME,
    KernelPanic,
)
from pearlos.fs import FileAlreadyExists, FileNotFound, FileSystem, TooManyFiles
from pearlos.memory import KernelMemory
from pearlos.rand import Random

OS_VERSION = "Demon"
OS_GENERIC = "1.5.0"
KSH_VERSION = "1.2.2"

KSH_PROMPT = "%"
KSH_PROMPT2 = ">"
KSH_COMMENT = ";"

BLACK_ON_WHITE = attribute(Color.BLACK, Color.WHITE)
WHITE_ON_BLACK = attribute(Color.WHITE, Color.BLACK)
WHITE_ON_BLUE = attribute(Color.WHITE, Color.BLUE)
GREEN_ON_BLACK = attribute(Color.GREEN, Color.BLACK)
RED_ON_BLACK = attribute(Color.RED, Color.BLACK)

HELP_LINES = (
    "help           prints this message",
    'echo           prints "X" to the display',
    "wipe           clears screen",
    "exit           exit kernel shell",
    "fortune        digital fortune cookie",
    "kowsay         a minimal version of cowsay",
    "version        get OS version",
    "pearlfetch     show info about your system",
    "calc           simple calculator",
    "theme-light    changes the theme to a light theme",
    "theme-dark     changes the theme to a dark theme",
    "theme-pascal   changes the theme to pascal",
    "theme-hacker   changes the theme to hacker >:D",
    "memstat        get allocated memory usage",
    "memalloc       allocate memory",
    "random         get random number between 0-100",
    "panic          invoke kernel panic",
    "exit           exit OS",
    "ls             list all files",
    "mk             create new file",
    "rm             delete file",
    "cat            read file content",
    "to             write to file",
)

FORTUNES = (
    "Pohl's Law: Nothing is so good that somebody, somewhere, will not hate it.\n",
    "You either die a smart fella, or live long enough to become a fart smella\n",
    "Everyone asked you about your favorite dinosaur as a kid, now, nobody cares\n",
    "3rd Law of Comprinting:\n"
    "    Anything that can go wr\n"
    "fortune: Segmentation violation -- Core dumped\n",
    "Experience, n.:\n"
    "    Something you don't get until just after you need it.\n"
    "        -- Olivier\n",
    "Famous quotations:\n\n"
    '    " "\n'
    "        -- Charlie Chaplin\n\n"
    '    " "\n'
    "        -- Harpo Marx\n\n"
    '    " "\n'
    "        -- Marcel Marceau\n",
    "Ginsberg's Theorem:\n"
    "   (1) You can't win.\n"
    "   (2) You can't break even.\n"
    "   (3) You can't even quit the game.\n\n"
    "Freeman's Commentary on Ginsberg's theorem:\n"
    "   Every major philosophy that attempts to make life seem\n"
    "   meaningful is based on the negation of one part of Ginsberg's\n"
    "   Theorem. To wit:\n\n"
    "   (1) Capitalism is based on the assumption that you can win.\n"
    "   (2) Socialism is based on the assumption that you can break even.\n"
    "   (3) Mysticism is based on the assumption that you can quit the game.\n"
    "Some code you wrote is probably in someone else's project right now.",
)

PEARLFETCH_ART = (
    "           _.-''|''-._         \n"
    "        .-'     |     `-.      \n"
    "      .'\\       |       /`.   \n"
    "    .'   \\      |      /   `. \n"
    "    \\     \\     |     /     /\n"
    "     `\\    \\    |    /    /' \n"
    "       `\\   \\   |   /   /'   \n"
    "         `\\  \\  |  /  /'     \n"
    "        _.-`\\ \\ | / /'-._    \n"
    "       {_____`\\\\|//'_____}   \n"
    "               `-'             \n"
)

COW = (
    "        %c   ^__^\n"
    "         %c  (Oo)\\_______\n"
    "            (__)\\       )\\/\\\n"
    "                ||----w |\n"
    "                ||     ||\n"
)

_THEMES = {
    "theme-light": (BLACK_ON_WHITE, "Generic light"),
    "theme-dark": (WHITE_ON_BLACK, "Generic dark"),
    "theme-pascal": (WHITE_ON_BLUE, "Generic pascal"),
    "theme-hacker": (GREEN_ON_BLACK, "Hacker >:D"),
}


class ShellStatus(IntEnum):
    """What the shell should do after a command."""

    OK = 0
    EXIT = 1


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


class Shell:
    """An interactive command interpreter over the console."""

    bios_name = "Unknown"
    bios_version = "Unknown"

    def __init__(
        self,
        console: Console,
        filesystem: FileSystem,
        memory: KernelMemory,
        random: Random,
    ) -> None:
        self.console = console
        self.filesystem = filesystem
        self.memory = memory
        self.random = random
        self.theme = "Generic pascal"
        self._commands: dict[str, Callable[[], ShellStatus | None]] = {
            "help": self._help,
            "echo": self._echo,
            "wipe": self.console.display.clear,
            "version": self._version,
            "memstat": self._memstat,
            "fortune": self._fortune,
            "kowsay": self._kowsay,
            "calc": self._calc,
            "memalloc": self._memalloc,
            "pearlfetch": self._pearlfetch,
            "ls": self._list_files,
            "mk": self._make_file,
            "rm": self._remove_file,
            "cat": self._read_file,
            "to": self._write_to_file,
            "exit": self._exit,
            "random": self._random,
            "panic": self._panic,
        }

    def interpret(self, command: str) -> ShellStatus:
        """Run one command line and report whether the shell should exit."""
        if not command or command.startswith(KSH_COMMENT):
            return ShellStatus.OK
        if command in _THEMES:
            self._set_theme(command)
            return ShellStatus.OK
        handler = self._commands.get(command)
        if handler is None:
            self.console.write(KERNEL_INFO_SHELL_UNKNOWN_COMMAND)
            return ShellStatus.OK
        status = handler()
        return status if status is not None else ShellStatus.OK

    def run(self) -> None:
        """Greet, then read and run commands until exit or end of input."""
        self.theme = "Generic pascal"
        self.console.write(KERNEL_INFO_SHELL_WELCOME)
        self.console.write(KERNEL_INFO_MANUAL_HELP)
        while True:
            self.console.printf("%s ", KSH_PROMPT)
            try:
                line = self.console.scan()
            except EOFError:
                return
            if self.interpret(line) is ShellStatus.EXIT:
                return

    def _allocate(self, size: int) -> int:
        try:
            return self.memory.kmalloc(size & 0xFFFFFFFF)
        except KernelPanic as exc:
            self.console.panic(exc.message)
            raise

    def _ask(self, prompt: str = "") -> str:
        self.console.printf("%s%s ", prompt, KSH_PROMPT2)
        return self.console.scan()

    def _set_theme(self, command: str) -> None:
        color, name = _THEMES[command]
        self.console.display.set_theme(color)
        self.theme = name
        if command == "theme-hacker":
            self.console.writeln("You are a hacker now! >:D", RED_ON_BLACK)

    def _help(self) -> None:
        for line in HELP_LINES:
            self.console.writeln(line)

    def _echo(self) -> None:
        self._allocate(255)
        text = self._ask()
        self.console.printf("%s\n", text)

    def _version(self) -> None:
        self.console.printf("OS version: %s\n", OS_VERSION)
        self.console.printf("OS version (generic): %s\n", OS_GENERIC)
        self.console.printf("KSH version: %s\n", KSH_VERSION)

    def _memstat(self) -> None:
        self.console.writeln("Memory usage:")
        self.console.printf("total: %d\n", self.memory.usage())
        self.console.printf("effective: %d\n", self.memory.usage_effective())

    def _fortune(self) -> None:
        self.console.write(FORTUNES[self.random.rand() % len(FORTUNES)])

    def _kowsay(self) -> None:
        self._allocate(255)
        text = self._ask()
        self.console.printf("%s", "_" * len(text))
        self.console.printf("\n<%s>\n", text)
        self.console.printf("%s\n", "-" * len(text))
        self.console.printf(COW, "\\", "\\")

    def _calc(self) -> None:
        for _ in range(3):
            self._allocate(255)
        first = self._ask("num")
        second = self._ask("num")
        operator = self._ask("op")
        try:
            a = str_to_int(first)
            b = str_to_int(second)
        except ValueError:
            self.console.writeln("Invalid number.")
            return
        if operator == "+":
            result = a + b
        elif operator == "-":
            result = a - b
        elif operator == "*":
            result = a * b
        elif operator == "/":
            if b == 0:
                self.console.error(FIRMWARE_ERROR_ISR_EXCEPTION)
                self.console.writeln("Division By Zero")
                return
            result = _truncating_divide(a, b)
        elif operator == "^":
            result = pow(a, b, 1 << 32) if b > 0 else 1
        else:
            self.console.writeln("Invalid operator.")
            return
        self.console.printf("%d\n", result)

    def _memalloc(self) -> None:
        self._allocate(255)
        text = self._ask()
        try:
            size = str_to_int(text)
        except ValueError:
            self.console.writeln("Invalid number.")
            return
        self._allocate(size)

    def _pearlfetch(self) -> None:
        self.console.write(PEARLFETCH_ART)
        self.console.printf("OS: pearlOS %s\n", OS_VERSION)
        self.console.printf("BIOS name: %s\n", self.bios_name)
        self.console.printf("BIOS version: %s\n", self.bios_version)
        self.console.printf("Memory: %d/%d\n", self.memory.usage(), self.memory.total())
        self.console.printf("Theme: %s\n", self.theme)

    def _list_files(self) -> None:
        for name in self.filesystem.names():
            self.console.printf("%s\n", name)

    def _make_file(self) -> None:
        self.console.printf("%s ", KSH_PROMPT2)
        buffer = self._allocate(512)
        name = self.console.scan()
        try:
            self.filesystem.make(name)
        except FileAlreadyExists:
            self.console.writeln("File already exists!")
        except TooManyFiles:
            self.console.writeln("There are too many files!")
        self.memory.kfree(buffer)

    def _remove_file(self) -> None:
        name = self._ask()
        try:
            self.filesystem.remove(name)
        except FileNotFound:
            self.console.printf("File not found!\n")

    def _read_file(self) -> None:
        name_buffer = self._allocate(256)
        name = self._ask()
        if not self.filesystem.exists(name):
            self.console.printf("File not found\n")
            self.memory.kfree(name_buffer)
            return
        content_buffer = self._allocate(self.filesystem.size(name))
        self.console.write(self.filesystem.read(name).decode("latin-1"))
        self.memory.kfree(name_buffer)
        self.memory.kfree(content_buffer)

    def _write_to_file(self) -> None:
        self.console.printf("%s ", KSH_PROMPT2)
        name_buffer = self._allocate(256)
        name = self.console.scan()
        data_buffer = self._allocate(256)
        data = self._ask() + "\n"
        try:
            self.filesystem.clean(name)
            self.filesystem.write(name, data)
        except FileNotFound:
            self.console.printf("File not found!\n")
        self.memory.kfree(name_buffer)
        self.memory.kfree(data_buffer)

    def _exit(self) -> ShellStatus:
        self._allocate(255)
        self.console.warning("This will permanently exit you out of the OS. Are you sure?")
        self.console.write("[y/n, default n] ")
        answer = self.console.scan()
        return ShellStatus.EXIT if answer == "y" else ShellStatus.OK

    def _random(self) -> None:
        self.console.printf("%d\n", self.random.rand() % 100)

    def _panic(self) -> None:
        self._allocate(255)
        message = self._ask()
        self.console.panic(message)