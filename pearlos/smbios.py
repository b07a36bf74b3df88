"""Locating the SMBIOS entry point and reading the BIOS information strings."""

from __future__ import annotations

import struct

from pearlos.errors import FIRMWARE_ERROR_SMBIOS_ENTRY_MISSING

SCAN_START = 0xF0000
SCAN_END = 0x100000
_ANCHOR = b"_SM_"
_STEP = 16
_LENGTH_FIELD = 5
_TABLE_ADDRESS_FIELD = 0x18


def _signed(value: int) -> int:
    return value - 256 if value >= 128 else value


def find_entry_point(memory, base: int = SCAN_START) -> int:
    """Offset of the first valid entry point on a 16-byte boundary from ``base``."""
    data = bytes(memory)
    for offset in range(base, min(len(data), SCAN_END), _STEP):
        if data[offset:offset + 4] != _ANCHOR or offset + _LENGTH_FIELD >= len(data):
            continue
        length = _signed(data[offset + _LENGTH_FIELD])
        if sum(data[offset:offset + max(length, 0)]) % 256 == 0:
            return offset
    raise LookupError(FIRMWARE_ERROR_SMBIOS_ENTRY_MISSING)


def table_address(memory, entry: int) -> int:
    """Address of the structure table named by the entry point at ``entry``."""
    return struct.unpack_from("<I", bytes(memory), entry + _TABLE_ADDRESS_FIELD)[0]


def table_length(memory, offset: int) -> int:
    """Full size of the structure at ``offset``, including its string set."""
    data = bytes(memory)
    strings = offset + data[offset + 1]
    end = data.find(b"\0\0", strings)
    if end < 0:
        raise ValueError("structure strings are not terminated")
    return data[offset + 1] + (end - strings) + 2


def _string_at(data: bytes, start: int) -> tuple[str, int]:
    end = data.index(0, start)
    return data[start:end].decode("latin-1"), end + 1


def bios_version(memory, header: int) -> str:
    """First string following the BIOS structure at ``header``."""
    data = bytes(memory)
    text, _ = _string_at(data, header + data[header + 1])
    return text


def bios_name(memory, header: int) -> str:
    """Second string following the BIOS structure at ``header``."""
    data = bytes(memory)
    _, following = _string_at(data, header + data[header + 1])
    text, _ = _string_at(data, following)
    return text