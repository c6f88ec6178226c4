"""Variable Blocked (VB) record files with block and record descriptor words.

A file is a sequence of blocks. Each block starts with a 4-byte Block
Descriptor Word (big-endian 16-bit length including the BDW, then two zero
bytes) and holds records. Each record starts with a 4-byte Record Descriptor
Word laid out the same way, followed by its data.
"""

from __future__ import annotations

import os
import struct
from enum import Enum
from typing import BinaryIO, Iterator, Optional, Union

from fssvb.codepages import Codeset, decode_table, encode_table, translate

__all__ = [
    "VBError",
    "RecordTooLongError",
    "Mode",
    "VBFile",
    "open_vb",
    "open_write",
    "open_read",
    "DEFAULT_READ_BLOCK_SIZE",
]

DEFAULT_READ_BLOCK_SIZE = 32768

_DESCRIPTOR = struct.Struct(">HH")
_DESCRIPTOR_SIZE = _DESCRIPTOR.size
_MAX_BLOCK_SIZE = 0xFFFF - _DESCRIPTOR_SIZE

PathLike = Union[str, "os.PathLike[str]"]


class VBError(Exception):
    """A VB file could not be opened, read or written."""

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        self.code = code
        self.message = message
        super().__init__(f"ABEND {code}: {message}" if code else message)


class RecordTooLongError(VBError):
    """A record does not fit in the block or in the caller's limit."""


class Mode(Enum):
    READ = 1
    WRITE = 2


def _as_bytes(data: object) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if hasattr(data, "__bytes__"):
        return bytes(data)  # type: ignore[call-overload]
    raise TypeError(f"cannot write {type(data).__name__} as a record")


class VBFile:
    """An open VB file, either for reading or for writing records."""

    def __init__(
        self,
        path: PathLike,
        mode: Mode,
        block_size: int,
        codeset: Optional[Union[Codeset, str]] = None,
    ) -> None:
        mode = Mode(mode)
        if block_size < 0:
            raise ValueError("block size must not be negative")
        if mode is Mode.WRITE and block_size > _MAX_BLOCK_SIZE:
            raise ValueError(f"block size must not exceed {_MAX_BLOCK_SIZE}")
        self.path = os.fspath(path)
        self.mode = mode
        self.block_size = block_size
        self.codeset = None if codeset is None else Codeset(codeset)
        if self.codeset is None:
            self.table: Optional[bytes] = None
        elif mode is Mode.WRITE:
            self.table = encode_table(self.codeset)
        else:
            self.table = decode_table(self.codeset)
        self.eof = False
        self.error = False
        self._out = bytearray()
        self._block = b""
        self._pos = 0
        try:
            self._fp: Optional[BinaryIO] = open(
                self.path, "wb" if mode is Mode.WRITE else "rb"
            )
        except OSError as exc:
            raise VBError("Open Failed", "S013") from exc

    @property
    def closed(self) -> bool:
        return self._fp is None

    def _stream(self, mode: Mode) -> BinaryIO:
        if self._fp is None:
            raise VBError("file is closed")
        if self.mode is not mode:
            raise VBError(f"file is not open for {mode.name.lower()}ing")
        return self._fp

    # ---------- writing ----------

    def _flush(self) -> None:
        if not self._out:
            return
        fp = self._stream(Mode.WRITE)
        try:
            fp.write(_DESCRIPTOR.pack(len(self._out) + _DESCRIPTOR_SIZE, 0))
            fp.write(self._out)
        except OSError as exc:
            self.error = True
            raise VBError("block write failed") from exc
        self._out.clear()

    def put(self, data: object) -> None:
        """Append one record, starting a new block when it does not fit."""
        self._stream(Mode.WRITE)
        raw = _as_bytes(data)
        rdw_len = len(raw) + _DESCRIPTOR_SIZE
        if len(self._out) + rdw_len > self.block_size:
            self._flush()
        if rdw_len > self.block_size:
            raise RecordTooLongError("Record exceeds maximum block size", "S013")
        self._out += _DESCRIPTOR.pack(rdw_len, 0)
        self._out += translate(raw, self.table)

    # ---------- reading ----------

    def _fill_block(self) -> bool:
        fp = self._stream(Mode.READ)
        header = fp.read(_DESCRIPTOR_SIZE)
        if len(header) < _DESCRIPTOR_SIZE:
            self.eof = True
            return False
        block_len, _ = _DESCRIPTOR.unpack(header)
        payload_len = block_len - _DESCRIPTOR_SIZE
        if payload_len < 0 or payload_len > self.block_size:
            self.error = True
            raise VBError("Block Descriptor Word (BDW) corruption detected", "S0C4")
        payload = fp.read(payload_len)
        if len(payload) != payload_len:
            self.error = True
            raise VBError("block is shorter than its descriptor", "S0C4")
        self._block = payload
        self._pos = 0
        return True

    def _next_record(self) -> Optional[int]:
        """Make sure a record header is available; return its RDW length."""
        self._stream(Mode.READ)
        while self._pos + _DESCRIPTOR_SIZE > len(self._block):
            if not self._fill_block():
                return None
        rdw_len, _ = _DESCRIPTOR.unpack_from(self._block, self._pos)
        if rdw_len < _DESCRIPTOR_SIZE or self._pos + rdw_len > len(self._block):
            self.error = True
            raise VBError("Record Descriptor Word (RDW) corruption detected", "S0C4")
        return rdw_len

    def locate(self) -> Optional[memoryview]:
        """Return the next record's raw bytes without copying, or None at end."""
        rdw_len = self._next_record()
        if rdw_len is None:
            return None
        start = self._pos + _DESCRIPTOR_SIZE
        self._pos += rdw_len
        return memoryview(self._block)[start : start - _DESCRIPTOR_SIZE + rdw_len]

    def get(self, max_len: Optional[int] = None) -> Optional[bytes]:
        """Return the next record, translated, or None at end of file.

        A record longer than ``max_len`` is consumed and raises
        RecordTooLongError.
        """
        record = self.locate()
        if record is None:
            return None
        if max_len is not None and len(record) > max_len:
            raise RecordTooLongError(
                f"record of {len(record)} bytes exceeds limit of {max_len}"
            )
        return translate(record, self.table)

    def skip(self) -> Optional[int]:
        """Move past the next record; return its data length, or None at end."""
        rdw_len = self._next_record()
        if rdw_len is None:
            return None
        self._pos += rdw_len
        return rdw_len - _DESCRIPTOR_SIZE

    # ---------- lifecycle ----------

    def close(self) -> None:
        """Write any pending block and close the file; safe to call twice."""
        if self._fp is None:
            return
        try:
            if self.mode is Mode.WRITE:
                self._flush()
        finally:
            self._fp.close()
            self._fp = None
            self._block = b""
            self._out.clear()

    def __iter__(self) -> Iterator[bytes]:
        while (record := self.get()) is not None:
            yield record

    def __enter__(self) -> VBFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else self.mode.name.lower()
        return f"<VBFile {self.path!r} {state} block_size={self.block_size}>"


def open_vb(path: PathLike, mode: str, block_size: int) -> VBFile:
    """Open by mode string: 'w...' writes, anything else reads.

    ``codeset=037`` or ``codeset=1047`` in the mode string selects translation.
    """
    file_mode = Mode.WRITE if mode.startswith("w") else Mode.READ
    codeset: Optional[Codeset] = None
    if "codeset=037" in mode:
        codeset = Codeset.CP037
    elif "codeset=1047" in mode:
        codeset = Codeset.CP1047
    return VBFile(path, file_mode, block_size, codeset)


def _parse_translate(translate_name: Optional[Union[Codeset, str]]) -> Optional[Codeset]:
    if not translate_name:
        return None
    try:
        return Codeset(translate_name)
    except ValueError:
        raise VBError(
            "Incorrect Translate Table, must be 037 or 1047", "S013"
        ) from None


def open_write(
    path: PathLike,
    block_size: int,
    translate: Optional[Union[Codeset, str]] = "",
) -> VBFile:
    """Create a VB file for writing, translating ASCII to EBCDIC if asked."""
    return VBFile(path, Mode.WRITE, block_size, _parse_translate(translate))


def open_read(
    path: PathLike,
    translate: Optional[Union[Codeset, str]] = "",
) -> VBFile:
    """Open a VB file for reading, translating EBCDIC to ASCII if asked."""
    return VBFile(
        path, Mode.READ, DEFAULT_READ_BLOCK_SIZE, _parse_translate(translate)
    )