"""ASCII <-> EBCDIC translation tables for code pages 037 and 1047."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Codeset",
    "PLI_NOT_SYMBOL",
    "encode_table",
    "decode_table",
    "translate",
]

# The PL/I NOT symbol often maps to 0x5F or 0xAC depending on the terminal.
PLI_NOT_SYMBOL = 0x5F


class Codeset(str, Enum):
    """EBCDIC code pages supported for record translation."""

    CP037 = "037"
    CP1047 = "1047"


def _table(rows: str) -> bytes:
    table = bytes.fromhex(rows).ljust(256, b"\x00")
    if len(table) != 256:
        raise ValueError("translation table must hold 256 entries")
    return table


_ASCII_TO_EBCDIC_037 = _table(
    """
    00 01 02 03 37 2D 2E 2F 16 05 25 0B 0C 0D 0E 0F
    10 11 12 13 3C 3D 32 26 18 19 3F 27 1C 1D 1E 1F
    40 5A 7F 7B 5B 6C 50 7D 4D 5D 5C 4E 6B 60 4B 61
    F0 F1 F2 F3 F4 F5 F6 F7 F8 F9 7A 5E 4C 7E 6E 6F
    7C C1 C2 C3 C4 C5 C6 C7 C8 C9 D1 D2 D3 D4 D5 D6
    D7 D8 D9 E2 E3 E4 E5 E6 E7 E8 E9 BA E0 BB B0 6D
    79 81 82 83 84 85 86 87 88 89 91 92 93 94 95 96
    97 98 99 A2 A3 A4 A5 A6 A7 A8 A9 C0 4F D0 A1 07
    """
)

_ASCII_TO_EBCDIC_1047 = _table(
    """
    00 01 02 03 37 2D 2E 2F 16 05 15 0B 0C 0D 0E 0F
    10 11 12 13 3C 3D 32 26 18 19 3F 27 1C 1D 1E 1F
    40 5A 7F 7B 5B 6C 50 7D 4D 5D 5C 4E 6B 60 4B 61
    F0 F1 F2 F3 F4 F5 F6 F7 F8 F9 7A 5E 4C 7E 6E 6F
    7C C1 C2 C3 C4 C5 C6 C7 C8 C9 D1 D2 D3 D4 D5 D6
    D7 D8 D9 E2 E3 E4 E5 E6 E7 E8 E9 AD E0 BD 5F 6D
    79 81 82 83 84 85 86 87 88 89 91 92 93 94 95 96
    97 98 99 A2 A3 A4 A5 A6 A7 A8 A9 C0 4F D0 A1 07
    20 20 20 20 20 20 20 20 20 20 20 20 5F 20 20 20
    """
)

_EBCDIC_037_TO_ASCII = _table(
    """
    00 01 02 03 1A 09 1A 7F 1A 1A 1A 0B 0C 0D 0E 0F
    10 11 12 13 1A 1A 08 1A 18 19 1A 1A 1C 1D 1E 1F
    1A 1A 1A 1A 1A 0A 17 1B 1A 1A 1A 1A 1A 05 06 07
    1A 1A 16 1A 1A 1A 1A 04 1A 1A 1A 1A 14 15 1A 1A
    20 1A 1A 1A 1A 1A 1A 1A 1A 1A 1A 2E 3C 28 2B 7C
    26 1A 1A 1A 1A 1A 1A 1A 1A 1A 21 24 2A 29 3B AC
    2D 2F 1A 1A 1A 1A 1A 1A 1A 1A 1A 2C 25 5F 3E 3F
    1A 1A 1A 1A 1A 1A 1A 1A 1A 60 3A 23 40 27 3D 22
    1A 61 62 63 64 65 66 67 68 69 1A 1A 1A 1A 1A 1A
    1A 6A 6B 6C 6D 6E 6F 70 71 72 1A 1A 1A 1A 1A 1A
    1A 7E 73 74 75 76 77 78 79 7A 1A 1A 1A 1A 1A 1A
    5E 1A 1A 1A 1A 1A 1A 1A 1A 1A 5B 5D 1A 1A 1A 1A
    7B 41 42 43 44 45 46 47 48 49 1A 1A 1A 1A 1A 1A
    7D 4A 4B 4C 4D 4E 4F 50 51 52 1A 1A 1A 1A 1A 1A
    5C 1A 53 54 55 56 57 58 59 5A 1A 1A 1A 1A 1A 1A
    30 31 32 33 34 35 36 37 38 39 1A 1A 1A 1A 1A FF
    """
)

_EBCDIC_1047_TO_ASCII = _table(
    """
    00 01 02 03 1A 09 1A 7F 1A 1A 1A 0B 0C 0D 0E 0F
    10 11 12 13 1A 0A 08 1A 18 19 1A 1A 1C 1D 1E 1F
    1A 1A 1A 1A 1A 0A 17 1B 1A 1A 1A 1A 1A 05 06 07
    1A 1A 16 1A 1A 1A 1A 04 1A 1A 1A 1A 14 15 1A 1A
    20 1A 1A 1A 1A 1A 1A 1A 1A 1A A2 2E 3C 28 2B 7C
    26 1A 1A 1A 1A 1A 1A 1A 1A 1A 21 24 2A 29 3B 5E
    2D 2F 1A 1A 1A 1A 1A 1A 1A 1A A6 2C 25 5F 3E 3F
    1A 1A 1A 1A 1A 1A 1A 1A 1A 60 3A 23 40 27 3D 22
    1A 61 62 63 64 65 66 67 68 69 1A 1A 1A 1A 1A 1A
    1A 6A 6B 6C 6D 6E 6F 70 71 72 1A 1A 1A 1A 1A 1A
    1A 7E 73 74 75 76 77 78 79 7A 1A 1A 1A 1A 1A 1A
    1A 1A 1A 1A 1A 1A 1A 1A 1A 1A 1A 1A 1A 1A 1A 1A
    7B 41 42 43 44 45 46 47 48 49 1A 1A 1A 1A 1A 1A
    7D 4A 4B 4C 4D 4E 4F 50 51 52 1A 1A 1A 1A 1A 1A
    5C 1A 53 54 55 56 57 58 59 5A 1A 1A 1A 1A 1A 1A
    30 31 32 33 34 35 36 37 38 39 1A 1A 1A 1A 1A FF
    """
)

_ENCODE = {
    Codeset.CP037: _ASCII_TO_EBCDIC_037,
    Codeset.CP1047: _ASCII_TO_EBCDIC_1047,
}

_DECODE = {
    Codeset.CP037: _EBCDIC_037_TO_ASCII,
    Codeset.CP1047: _EBCDIC_1047_TO_ASCII,
}


def encode_table(codeset: Codeset | str) -> bytes:
    """Return the 256-byte ASCII to EBCDIC table for ``codeset``."""
    return _ENCODE[Codeset(codeset)]


def decode_table(codeset: Codeset | str) -> bytes:
    """Return the 256-byte EBCDIC to ASCII table for ``codeset``."""
    return _DECODE[Codeset(codeset)]


def translate(data: bytes | bytearray | memoryview, table: bytes | None) -> bytes:
    """Map every byte of ``data`` through ``table``; ``None`` copies unchanged."""
    if table is None:
        return bytes(data)
    if len(table) != 256:
        raise ValueError("translation table must hold 256 entries")
    return bytes(data).translate(table)