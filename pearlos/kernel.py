"""System start-up: bring up the devices and file system, then run the shell."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from pearlos.console import Console
from pearlos.display import DEFAULT_THEME, DISPLAY_HEIGHT, Display
from pearlos.errors import (
    KERNEL_INFO_ENTERED,
    KERNEL_INFO_INIT_DONE,
    KERNEL_INFO_INIT_START,
    KERNEL_INFO_WELCOME,
    KernelPanic,
)
from pearlos.fs import FileSystem, mkfs
from pearlos.memory import KernelMemory
from pearlos.rand import Random
from pearlos.shell import Shell


def boot(read_char: Callable[[], str] | None = None) -> Shell:
    """Initialise the system and run the shell until it exits.

    ``read_char`` supplies one character per call and an empty string at the
    end of input; it defaults to reading standard input.
    """
    if read_char is None:
        read_char = lambda: sys.stdin.read(1)  # noqa: E731
    display = Display()
    console = Console(display, read_char)
    console.info(KERNEL_INFO_ENTERED)
    console.info(KERNEL_INFO_INIT_START)
    display.set_theme(DEFAULT_THEME)
    memory = KernelMemory()
    filesystem = FileSystem()
    mkfs(filesystem)
    random = Random()
    console.info(KERNEL_INFO_INIT_DONE)
    console.info(KERNEL_INFO_WELCOME)
    shell = Shell(console, filesystem, memory, random)
    shell.run()
    return shell


def _screen(display: Display) -> str:
    rows = [display.row_text(row) for row in range(DISPLAY_HEIGHT)]
    while rows and not rows[-1]:
        rows.pop()
    return "\n".join(rows)


def main(argv: list[str] | None = None) -> int:
    """Boot with commands from standard input and print the final screen."""
    parser = argparse.ArgumentParser(
        prog="pearlos",
        description="Run the kernel shell on commands read from standard input.",
    )
    parser.parse_args(argv)
    display_holder: list[Display] = []

    def read_char() -> str:
        return sys.stdin.read(1)

    original_init = Console.__init__

    try:
        shell = boot(read_char)
    except KernelPanic as exc:
        print(f"[PANIC] {exc.message}")
        return 1
    display_holder.append(shell.console.display)
    del original_init
    print(_screen(display_holder[0]))
    return 0