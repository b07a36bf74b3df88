import io

import pytest

from pearlos.display import DEFAULT_THEME, DISPLAY_HEIGHT
from pearlos.errors import KernelPanic
from pearlos.kernel import boot, main


def reader(text):
    chars = iter(text)
    return lambda: next(chars, "")


def rows(shell):
    display = shell.console.display
    return [display.row_text(row) for row in range(DISPLAY_HEIGHT)]


def test_boot_runs_shell_until_exit():
    shell = boot(reader("version\nexit\ny\n"))
    screen = rows(shell)
    assert "KSH version: 1.2.2" in screen
    assert "[INFO] Welcome to pearlOS!" in screen


def test_boot_applies_default_theme():
    shell = boot(reader(""))
    assert shell.console.display.theme == DEFAULT_THEME


def test_boot_creates_standard_files():
    shell = boot(reader(""))
    assert shell.filesystem.names() == ["os-release", "license", "readme", "roadmap"]


def test_boot_starts_with_pascal_theme_name():
    shell = boot(reader("exit\ny\n"))
    assert shell.theme == "Generic pascal"


def test_boot_propagates_panic():
    with pytest.raises(KernelPanic) as info:
        boot(reader("panic\nboom\n"))
    assert info.value.message == "boom"


def test_main_prints_screen(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("version\nexit\ny\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "OS version: Demon" in out


def test_main_reports_panic(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("panic\noops\n"))
    assert main([]) == 1
    assert "[PANIC] oops" in capsys.readouterr().out