import pytest

from pearlos.console import Console
from pearlos.display import DISPLAY_HEIGHT, Color, Display, attribute
from pearlos.errors import KernelPanic
from pearlos.fs import FileSystem
from pearlos.memory import KernelMemory
from pearlos.rand import Random
from pearlos.shell import FORTUNES, HELP_LINES, Shell, ShellStatus


def make_shell(text="", seed=1, memory=None):
    chars = iter(text)
    console = Console(Display(), lambda: next(chars, ""))
    return Shell(console, FileSystem(), memory or KernelMemory(), Random(seed))


def screen(shell):
    return [shell.console.display.row_text(row) for row in range(DISPLAY_HEIGHT)]


def test_empty_and_comment_do_nothing():
    shell = make_shell()
    assert shell.interpret("") is ShellStatus.OK
    assert shell.interpret("; a comment") is ShellStatus.OK
    assert all(row == "" for row in screen(shell))


def test_unknown_command():
    shell = make_shell()
    assert shell.interpret("frobnicate") is ShellStatus.OK
    assert screen(shell)[0] == "Invalid command!"


def test_echo():
    shell = make_shell("hello\n")
    shell.interpret("echo")
    rows = screen(shell)
    assert rows[0] == "> hello"
    assert rows[1] == "hello"


def test_help_lists_commands():
    shell = make_shell()
    shell.interpret("help")
    rows = screen(shell)
    assert rows[0] == HELP_LINES[0]
    assert rows[len(HELP_LINES) - 1] == "to             write to file"


def test_version():
    shell = make_shell()
    shell.interpret("version")
    assert screen(shell)[:3] == [
        "OS version: Demon",
        "OS version (generic): 1.5.0",
        "KSH version: 1.2.2",
    ]


def test_theme_dark():
    shell = make_shell()
    shell.interpret("theme-dark")
    assert shell.theme == "Generic dark"
    assert shell.console.display.theme == attribute(Color.WHITE, Color.BLACK)


def test_theme_hacker_message():
    shell = make_shell()
    shell.interpret("theme-hacker")
    assert shell.theme == "Hacker >:D"
    assert screen(shell)[0] == "You are a hacker now! >:D"


def test_calc_addition():
    shell = make_shell("12\n30\n+\n")
    shell.interpret("calc")
    assert screen(shell)[3] == "42"


def test_calc_division_truncates():
    shell = make_shell("-7\n2\n/\n")
    shell.interpret("calc")
    assert screen(shell)[3] == "-3"


def test_calc_power():
    shell = make_shell("2\n10\n^\n")
    shell.interpret("calc")
    assert screen(shell)[3] == "1024"


def test_calc_invalid_number():
    shell = make_shell("ab\n3\n+\n")
    shell.interpret("calc")
    assert screen(shell)[3] == "Invalid number."


def test_calc_invalid_operator():
    shell = make_shell("1\n2\n%\n")
    shell.interpret("calc")
    assert screen(shell)[3] == "Invalid operator."


def test_calc_division_by_zero():
    shell = make_shell("4\n0\n/\n")
    shell.interpret("calc")
    assert "Division By Zero" in screen(shell)


def test_memalloc_allocates_requested_size():
    shell = make_shell("100\n")
    shell.interpret("memalloc")
    last = shell.memory.pages[-1]
    assert last.end - last.start == 100


def test_memalloc_invalid():
    shell = make_shell("xyz\n")
    shell.interpret("memalloc")
    assert screen(shell)[1] == "Invalid number."
    assert len(shell.memory.pages) == 1


def test_memstat_reports_memory():
    shell = make_shell("hi\n")
    shell.interpret("echo")
    shell.console.display.clear()
    shell.interpret("memstat")
    rows = screen(shell)
    assert rows[0] == "Memory usage:"
    assert rows[1] == f"total: {shell.memory.usage()}"
    assert rows[2] == f"effective: {shell.memory.usage_effective()}"


def test_random_uses_generator():
    shell = make_shell(seed=7)
    shell.interpret("random")
    assert screen(shell)[0] == str(Random(7).rand() % 100)


def test_fortune_prints_selected_fortune():
    shell = make_shell(seed=3)
    shell.interpret("fortune")
    expected = FORTUNES[Random(3).rand() % len(FORTUNES)]
    assert screen(shell)[0] == expected.splitlines()[0].rstrip()


def test_kowsay():
    shell = make_shell("hello\n")
    shell.interpret("kowsay")
    rows = screen(shell)
    assert rows[1] == "_" * len("hello")
    assert rows[2] == "<hello>"
    assert rows[3] == "-" * len("hello")
    assert rows[4] == "        \\   ^__^"


def test_pearlfetch():
    shell = make_shell()
    shell.interpret("pearlfetch")
    rows = screen(shell)
    assert "OS: pearlOS Demon" in rows
    assert "Theme: Generic pascal" in rows


def test_make_write_read_and_list():
    shell = make_shell("notes\nnotes\nsome text\nnotes\n")
    shell.interpret("mk")
    assert shell.filesystem.exists("notes")
    shell.interpret("to")
    shell.console.display.clear()
    shell.interpret("cat")
    rows = screen(shell)
    assert rows[1] == "some text"
    shell.console.display.clear()
    shell.interpret("ls")
    assert screen(shell)[0] == "notes"


def test_make_existing_file():
    shell = make_shell("a\na\n")
    shell.interpret("mk")
    shell.interpret("mk")
    assert "File already exists!" in screen(shell)
    assert shell.filesystem.names() == ["a"]


def test_buffers_released_after_make():
    shell = make_shell("a\n")
    shell.interpret("mk")
    assert shell.memory.usage() == 0


def test_remove_missing_file():
    shell = make_shell("ghost\n")
    shell.interpret("rm")
    assert screen(shell)[1] == "File not found!"


def test_remove_existing_file():
    shell = make_shell("doc\ndoc\n")
    shell.interpret("mk")
    shell.interpret("rm")
    assert not shell.filesystem.exists("doc")


def test_cat_missing_file():
    shell = make_shell("ghost\n")
    shell.interpret("cat")
    assert screen(shell)[1] == "File not found"


def test_write_missing_file():
    shell = make_shell("ghost\ndata\n")
    shell.interpret("to")
    assert "File not found!" in screen(shell)


@pytest.mark.parametrize("answer, status", [("y", ShellStatus.EXIT), ("n", ShellStatus.OK), ("", ShellStatus.OK)])
def test_exit(answer, status):
    shell = make_shell(answer + "\n")
    assert shell.interpret("exit") is status


def test_panic_raises():
    shell = make_shell("boom\n")
    with pytest.raises(KernelPanic) as info:
        shell.interpret("panic")
    assert info.value.message == "boom"
    assert screen(shell)[1] == "[PANIC] boom"


def test_memory_exhaustion_panics():
    shell = make_shell("x\n", memory=KernelMemory(start=1, end=100))
    with pytest.raises(KernelPanic):
        shell.interpret("echo")
    assert screen(shell)[0].startswith("[PANIC]")


def test_run_until_exit():
    shell = make_shell("echo\nhi\nexit\ny\nversion\n")
    shell.run()
    rows = screen(shell)
    assert "hi" in rows
    assert "KSH version: 1.2.2" not in rows


def test_run_stops_at_end_of_input():
    shell = make_shell("echo\nthere\n")
    shell.run()
    assert "there" in screen(shell)