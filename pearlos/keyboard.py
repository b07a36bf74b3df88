"""Scan-code set 1 keyboard decoding with modifiers, locks and alt codes."""

from __future__ import annotations

from enum import IntEnum

REG_KEYBOARD_DATA = 0x60
REG_KEYBOARD_CMD = 0x64

_EXTENDED_PREFIX = 0xE0
_RELEASE = 0x80

_TAIL = (
    b"\x80\x81\x82\x83\x84\x85\x86\x87\x88\x89\x00\x00"
    b"789-456+1230.\x00\x00\x00\x8a\x8b"
)

_LOWER = (
    b"\x1b1234567890-=\b\tqwertyuiop[]\n\x00asdfghjkl;'`\x00\\zxcvbnm,./"
    b"\x00*\x00 \x00" + _TAIL
).ljust(128, b"\x00")

_UPPER = (
    b"\x1b!@#$%^&*()_+\b\tQWERTYUIOP{}\n\x00ASDFGHJKL:\"~\x00|ZXCVBNM<>?"
    b"\x00*\x00 \x00" + _TAIL
).ljust(128, b"\x00")

_ASCII = (
    b"\x1b1234567890-=\b\t\x11\x17\x05\x12\x14\x19\x15\x09\x0f\x10[]\r\x00"
    b"\x01\x13\x04\x06\x07\x08\x0a\x0b\x0c;'`\x00\\\x1a\x18\x03\x16\x02\x0e\x0d,./"
    b"\x00*\x00 \x00"
    b"\x80\x81\x82\x83\x84\x85\x86\x87\x88\x89\x8a\x00"
    b"789-456+1230.\x00\x00\x00\x8a\x8b"
).ljust(128, b"\x00")


def _special_map() -> bytes:
    table = bytearray(128)
    for scancode, value in {
        0x1C: 0x0A, 0x35: ord("/"),
        0x47: 0x90, 0x48: 0x8C, 0x49: 0x92, 0x4B: 0x8D, 0x4D: 0x8E,
        0x4F: 0x91, 0x50: 0x8F, 0x51: 0x93, 0x52: 0x94, 0x53: 0x7F,
        0x5B: 0x95, 0x5C: 0x96,
    }.items():
        table[scancode - 1] = value
    return bytes(table)


_SPECIAL = _special_map()


class KeyEvent(IntEnum):
    """Names for physical keys."""

    KEY_VOID = 0
    KEY_DOWN_BACKTICK = 1
    KEY_DOWN_DASH = 2
    KEY_DOWN_EQUALS = 3
    KEY_DOWN_BACKSPACE = 4
    KEY_DOWN_TAB = 5
    KEY_DOWN_1 = 6
    KEY_DOWN_2 = 7
    KEY_DOWN_3 = 8
    KEY_DOWN_4 = 9
    KEY_DOWN_5 = 10
    KEY_DOWN_6 = 11
    KEY_DOWN_7 = 12
    KEY_DOWN_8 = 13
    KEY_DOWN_9 = 14
    KEY_DOWN_0 = 15
    KEY_DOWN_Q = 16
    KEY_DOWN_W = 17
    KEY_DOWN_E = 18
    KEY_DOWN_R = 19
    KEY_DOWN_T = 20
    KEY_DOWN_Y = 21
    KEY_DOWN_U = 22
    KEY_DOWN_I = 23
    KEY_DOWN_O = 24
    KEY_DOWN_P = 25
    KEY_DOWN_LEFT_SQUARE_BRACKET = 26
    KEY_DOWN_RIGHT_SQUARE_BRACKET = 27
    KEY_DOWN_ENTER = 28
    KEY_DOWN_CAPS_LOCK = 29
    KEY_DOWN_A = 30
    KEY_DOWN_S = 31
    KEY_DOWN_D = 32
    KEY_DOWN_F = 33
    KEY_DOWN_G = 34
    KEY_DOWN_H = 35
    KEY_DOWN_J = 36
    KEY_DOWN_K = 37
    KEY_DOWN_L = 38
    KEY_DOWN_SEMICOLON = 39
    KEY_DOWN_APOSTROPHE = 40
    KEY_DOWN_BACKSLASH = 41
    KEY_DOWN_LEFT_SHIFT = 42
    KEY_DOWN_SMALLER = 43
    KEY_DOWN_Z = 44
    KEY_DOWN_X = 45
    KEY_DOWN_C = 46
    KEY_DOWN_V = 47
    KEY_DOWN_B = 48
    KEY_DOWN_N = 49
    KEY_DOWN_M = 50
    KEY_DOWN_COMMA = 51
    KEY_DOWN_DOT = 52
    KEY_DOWN_FRONT_SLASH = 53
    KEY_DOWN_RIGHT_SHIFT = 54
    KEY_DOWN_LEFT_CTRL = 55
    KEY_DOWN_LEFT_SUPER = 56
    KEY_DOWN_LEFT_ALT = 57
    KEY_DOWN_SPACE = 58
    KEY_DOWN_RIGHT_ALT = 59
    KEY_DOWN_RIGHT_SUPER = 60
    KEY_DOWN_FN = 61
    KEY_DOWN_RIGHT_CTRL = 62


def _lookup(table: bytes, scancode: int) -> int:
    return table[scancode - 1] if scancode else 0


def _is_keypad(scancode: int) -> bool:
    return 0x47 <= scancode <= 0x52


class Keyboard:
    """Turns a stream of scan codes into characters.

    Held keys repeat their scan code; a repeated character is reported
    only once until a key is released.
    """

    def __init__(self) -> None:
        self._keydown = [False] * 384
        self._caps_lock = False
        self._num_lock = True
        self._scroll_lock = False
        self._left_shift = self._left_ctrl = self._left_alt = False
        self._right_shift = self._right_ctrl = self._right_alt = False
        self._extended = False
        self._code = 0
        self._char = 0
        self._last = 0
        self._alt_digits = ""
        self.alt_char = False

    def feed(self, scancode: int) -> str | None:
        """Process one scan code; return the character it produces, if any."""
        if not 0 <= scancode <= 0xFF:
            raise ValueError(f"scan code out of range: {scancode!r}")
        if self._code >= _RELEASE or self._code == _EXTENDED_PREFIX:
            self._last = 0
        self._handle(scancode)
        if self._char == self._last or self._code >= _RELEASE:
            return None
        self._last = self._char
        return chr(self._char)

    def led_state(self) -> int:
        """LED byte: bit 0 scroll lock, bit 1 num lock, bit 2 caps lock."""
        return (
            int(self._scroll_lock)
            | int(self._num_lock) << 1
            | int(self._caps_lock) << 2
        )

    def is_down(self, scancode: int, extended: bool = False) -> bool:
        """Whether the key with ``scancode`` is currently held."""
        index = scancode + 127 if extended else scancode - 1
        if not 0 <= index < len(self._keydown):
            raise ValueError(f"scan code out of range: {scancode!r}")
        return self._keydown[index]

    @property
    def _alt(self) -> bool:
        return self._left_alt or self._right_alt

    @property
    def _ctrl(self) -> bool:
        return self._left_ctrl or self._right_ctrl

    @property
    def _shift(self) -> bool:
        return self._left_shift or self._right_shift

    def _set_down(self, index: int, state: bool) -> None:
        if 0 <= index < len(self._keydown):
            self._keydown[index] = state

    def _handle(self, scancode: int) -> None:
        self._code = scancode
        self.alt_char = False
        self._char = 0
        if scancode == _EXTENDED_PREFIX:
            self._extended = True
        elif scancode < _RELEASE:
            self._press(scancode)
        else:
            self._release(scancode - _RELEASE)

    def _press(self, code: int) -> None:
        if not self._num_lock and _is_keypad(code):
            self._extended = True
        if self._extended:
            self._extended = False
            if code == 0x1D:
                self._right_ctrl = True
            elif code == 0x38:
                self._right_alt = True
            else:
                self._char = _lookup(_SPECIAL, code)
                self._set_down(code + 127, True)
            return
        if code == 0x1D:
            self._left_ctrl = True
        elif code == 0x2A:
            self._left_shift = True
        elif code == 0x36:
            self._right_shift = True
        elif code == 0x38:
            self._left_alt = True
        elif code == 0x3A:
            self._caps_lock = not self._caps_lock
        elif code == 0x45:
            self._num_lock = not self._num_lock
        elif code == 0x46:
            self._scroll_lock = not self._scroll_lock
        elif self._alt:
            digit = _lookup(_LOWER, code)
            if (
                ord("0") <= digit <= ord("9")
                and len(self._alt_digits) < 3
                and _is_keypad(code)
            ):
                self._alt_digits += chr(digit)
        else:
            if self._ctrl:
                table = _ASCII
            elif self._caps_lock != self._shift:
                table = _UPPER
            else:
                table = _LOWER
            self._char = _lookup(table, code)
            self._set_down(code - 1, True)

    def _release(self, code: int) -> None:
        if not self._num_lock and _is_keypad(code):
            self._extended = True
        if self._extended:
            self._extended = False
            self._code = code
            if code == 0x1D:
                self._right_ctrl = False
            elif code == 0x38:
                self._right_alt = False
            else:
                self._set_down(code + 127, False)
        elif code == 0x1D:
            self._left_ctrl = False
        elif code == 0x2A:
            self._left_shift = False
        elif code == 0x36:
            self._right_shift = False
        elif code == 0x38:
            self._left_alt = False
        elif code not in (0x3A, 0x45, 0x46):
            self._set_down(code - 1, False)
        if not self._alt and self._alt_digits:
            self._char = int(self._alt_digits) % 256
            self._alt_digits = ""
            self.alt_char = True