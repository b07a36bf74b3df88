"""Text-mode display: an 80x25 grid of character and attribute bytes."""

from __future__ import annotations

from enum import IntEnum

DISPLAY_WIDTH = 80
DISPLAY_HEIGHT = 25

# Bytes copied per row when scrolling: one full row of character/attribute pairs.
_ROW_BYTES = DISPLAY_WIDTH + 80
_SCROLL_THRESHOLD = DISPLAY_HEIGHT - 2
# Theme painting covers this many bytes, more than the visible screen.
_MEMORY_SIZE = DISPLAY_WIDTH * DISPLAY_WIDTH
_LAST_WRITABLE = (DISPLAY_WIDTH * DISPLAY_HEIGHT - 2) * 2

TRANSPARENT = 0x00


class Color(IntEnum):
    """The sixteen text-mode colours."""

    BLACK = 0x0
    BLUE = 0x1
    GREEN = 0x2
    CYAN = 0x3
    RED = 0x4
    PURPLE = 0x5
    BROWN = 0x6
    GRAY = 0x7
    DARK_GRAY = 0x8
    LIGHT_BLUE = 0x9
    LIGHT_GREEN = 0xA
    LIGHT_CYAN = 0xB
    LIGHT_RED = 0xC
    LIGHT_PURPLE = 0xD
    YELLOW = 0xE
    WHITE = 0xF


def attribute(foreground: int, background: int) -> int:
    """Attribute byte for ``foreground`` text on ``background``."""
    return ((int(background) & 0xF) << 4) | (int(foreground) & 0xF)


DEFAULT_THEME = attribute(Color.WHITE, Color.BLUE)


def get_offset(column: int, row: int) -> int:
    """Byte offset of the cell at ``column``, ``row``."""
    return 2 * (row * DISPLAY_WIDTH + column)


def get_offset_row(offset: int) -> int:
    """Row holding the byte ``offset``."""
    return offset // (2 * DISPLAY_WIDTH)


def get_offset_column(offset: int) -> int:
    """Column holding the byte ``offset``."""
    return (offset - get_offset_row(offset) * 2 * DISPLAY_WIDTH) // 2


class Display:
    """Video memory with a cursor, scrolling and a colour theme."""

    def __init__(self, theme: int = DEFAULT_THEME) -> None:
        self._memory = bytearray(_MEMORY_SIZE)
        self._cursor = 0
        self._theme = 0
        self.set_theme(theme)

    @property
    def memory(self) -> bytes:
        """A copy of video memory: character bytes at even offsets, attributes at odd."""
        return bytes(self._memory)

    @property
    def theme(self) -> int:
        return self._theme

    @property
    def cursor(self) -> int:
        """Cursor position as a byte offset."""
        return self._cursor

    @cursor.setter
    def cursor(self, offset: int) -> None:
        # The hardware cursor counts cells, so odd offsets round down.
        self._cursor = (offset // 2) * 2

    @property
    def column(self) -> int:
        return (self._cursor // 2) % DISPLAY_WIDTH

    @property
    def row(self) -> int:
        return (self._cursor // 2) // DISPLAY_WIDTH

    def _move(self, column: int, row: int) -> None:
        self.cursor = get_offset(column, row)

    def put_char(self, character: str, color: int = TRANSPARENT) -> None:
        """Draw one character at the cursor and advance it."""
        if character == "\n":
            self.newline()
            return
        if self._cursor <= _LAST_WRITABLE:
            self._memory[self._cursor] = ord(character) & 0xFF
            if color != TRANSPARENT:
                self._memory[self._cursor + 1] = color & 0xFF
            self.cursor = self._cursor + 2
        else:
            self.newline()

    def newline(self) -> None:
        """Move the cursor to the start of the next row, scrolling at the bottom."""
        row = get_offset_row(self._cursor)
        self._move(0, row + 1)
        if row > _SCROLL_THRESHOLD:
            self.scroll()

    def write(self, text: str, color: int = TRANSPARENT) -> None:
        """Draw every character of ``text``."""
        for character in text:
            self.put_char(character, color)

    def _copy_row(self, dest: int, src: int) -> None:
        start = get_offset(0, src)
        target = get_offset(0, dest)
        self._memory[target:target + _ROW_BYTES] = self._memory[start:start + _ROW_BYTES]

    def scroll(self) -> None:
        """Move every row up by one and the cursor with them."""
        for row in range(1, DISPLAY_HEIGHT + 1):
            self._copy_row(row - 1, row)
        self._move(0, get_offset_row(self._cursor) - 1)

    def clear(self) -> None:
        """Blank all characters, home the cursor and repaint the theme."""
        for cell in range(DISPLAY_WIDTH * DISPLAY_HEIGHT):
            self._memory[cell * 2] = 0
        self._cursor = 0
        self.set_theme(self._theme)

    def set_theme(self, color: int) -> None:
        """Paint ``color`` into every attribute byte."""
        self._theme = color & 0xFF
        self._memory[1::2] = bytes([self._theme]) * (_MEMORY_SIZE // 2)

    def delete_char(self) -> None:
        """Erase the character before the cursor and step back onto it."""
        if self._cursor == 0:
            return
        self.cursor = self._cursor - 1
        self.put_char("\0")
        self.cursor = self._cursor - 1

    def row_text(self, row: int) -> str:
        """Text shown on ``row``, empty cells as spaces, trailing blanks removed."""
        if not 0 <= row < DISPLAY_HEIGHT:
            raise IndexError(f"row {row} is off the display")
        start = get_offset(0, row)
        cells = self._memory[start:start + 2 * DISPLAY_WIDTH:2]
        return cells.decode("latin-1").replace("\0", " ").rstrip()