"""A small printf-style formatter supporting %s %d %u %x %X %c and %%."""

from __future__ import annotations

import re

_PAD_RIGHT = 1
_PAD_ZERO = 2

_FORMAT_PIECE = re.compile(r"%%|%(-)?(0*)([0-9]*)(.)?|[^%]+", re.DOTALL)


def _to_int32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - (1 << 32) if number & 0x80000000 else number


def _pad(text: str, width: int, pad: int) -> str:
    padchar = " "
    if width > 0:
        width = 0 if len(text) >= width else width - len(text)
        if pad & _PAD_ZERO:
            padchar = "0"
    else:
        width = 0
    if pad & _PAD_RIGHT:
        return text + padchar * width
    return padchar * width + text


def _digits(number: int, base: int, upper: bool) -> str:
    alphabet = "0123456789ABCDEF" if upper else "0123456789abcdef"
    out = []
    while number:
        number, remainder = divmod(number, base)
        out.append(alphabet[remainder])
    return "".join(reversed(out))


def _integer(value, base: int, signed: bool, width: int, pad: int, upper: bool) -> str:
    number = _to_int32(int(value))
    if number == 0:
        return _pad("0", width, pad)
    negative = signed and base == 10 and number < 0
    unsigned = -number if negative else number & 0xFFFFFFFF
    text = _digits(unsigned, base, upper)
    prefix = ""
    if negative:
        if width and pad & _PAD_ZERO:
            prefix = "-"
            width -= 1
        else:
            text = "-" + text
    return prefix + _pad(text, width, pad)


def _string(value) -> str:
    if value is None:
        return "(null)"
    return str(value).split("\0", 1)[0]


def _char(value) -> str:
    character = value[:1] if isinstance(value, str) else chr(int(value) & 0xFF)
    return "" if character == "\0" else character


def format_string(fmt: str, *args) -> str:
    """Render ``fmt`` with ``args``; unknown conversions are dropped."""
    values = iter(args)

    def take():
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out = []
    for match in _FORMAT_PIECE.finditer(fmt):
        piece = match.group(0)
        if piece == "%%":
            out.append("%")
            continue
        if not piece.startswith("%"):
            out.append(piece)
            continue
        right, zeros, digits, conversion = match.groups()
        if conversion is None:
            break
        pad = (_PAD_RIGHT if right else 0) | (_PAD_ZERO if zeros else 0)
        width = int(digits) if digits else 0
        if conversion == "s":
            out.append(_pad(_string(take()), width, pad))
        elif conversion == "d":
            out.append(_integer(take(), 10, True, width, pad, False))
        elif conversion == "x":
            out.append(_integer(take(), 16, False, width, pad, False))
        elif conversion == "X":
            out.append(_integer(take(), 16, False, width, pad, True))
        elif conversion == "u":
            out.append(_integer(take(), 10, False, width, pad, False))
        elif conversion == "c":
            out.append(_pad(_char(take()), width, pad))
    return "".join(out)