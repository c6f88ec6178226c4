"""Show the header of a VB file and, optionally, record statistics."""

from __future__ import annotations

import os
import struct
import sys
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Union

from fssvb.vbfile import VBError, open_read

__all__ = [
    "VB_FILE_MAGIC",
    "VB_FILE_VERSION",
    "VB_LEN16",
    "VB_LEN32",
    "FileHeader",
    "RecordStats",
    "read_header",
    "scan_records",
    "main",
]

VB_FILE_MAGIC = 0x31464256  # "VBF1"
VB_FILE_VERSION = 1
VB_LEN16 = 2
VB_LEN32 = 4

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class FileHeader:
    """The fixed header at the start of a VB file."""

    magic: int
    version: int
    header_size: int
    block_size: int
    lenfmt: int
    flags: int
    reserved1: int
    reserved2: int

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<IHHIHHII")

    @classmethod
    def unpack(cls, data: bytes) -> FileHeader:
        """Decode a header from the first bytes of ``data``."""
        if len(data) < cls.LAYOUT.size:
            raise VBError("short read")
        return cls(*cls.LAYOUT.unpack_from(data))

    @property
    def is_valid(self) -> bool:
        return self.magic == VB_FILE_MAGIC

    @property
    def format_name(self) -> str:
        return "VB4" if self.lenfmt == VB_LEN32 else "VB"

    @property
    def blocking(self) -> str:
        return "VBB" if self.block_size else "VB"


@dataclass
class RecordStats:
    """Record count and lengths found by a scan."""

    count: int = 0
    total: int = 0
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    @property
    def average(self) -> Optional[float]:
        return self.total / self.count if self.count else None

    def add(self, length: int) -> None:
        self.count += 1
        self.total += length
        self.minimum = length if self.minimum is None else min(self.minimum, length)
        self.maximum = length if self.maximum is None else max(self.maximum, length)


def read_header(path: PathLike) -> FileHeader:
    """Read and validate the header of ``path``."""
    with open(path, "rb") as fp:
        header = FileHeader.unpack(fp.read(FileHeader.LAYOUT.size))
    if not header.is_valid:
        raise VBError("not a VB file")
    return header


def scan_records(path: PathLike) -> RecordStats:
    """Read every record of ``path`` and collect length statistics."""
    stats = RecordStats()
    with open_read(path) as vb:
        while (record := vb.get(vb.block_size)) is not None:
            stats.add(len(record))
    return stats


_USAGE = "usage: {prog} [-s] file.vb\n  -s  scan records for statistics\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    prog = "vbinfo"
    if not args:
        sys.stderr.write(_USAGE.format(prog=prog))
        return 1
    scan = False
    for option in args[:-1]:
        if option == "-s":
            scan = True
        else:
            sys.stderr.write(_USAGE.format(prog=prog))
            return 1
    path = args[-1]

    try:
        header = read_header(path)
    except (OSError, VBError) as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1

    print(f"File:        {path}")
    print(f"Format:      {header.format_name}")
    print(f"Blocking:    {header.blocking}")
    print(f"Block size:  {header.block_size}")
    print(f"Header size: {header.header_size} bytes")
    print(f"Version:     {header.version}\n")

    if not scan:
        return 0

    try:
        stats = scan_records(path)
    except (OSError, VBError) as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1

    print(f"Records:     {stats.count}")
    if stats.count:
        print(f"Min length:  {stats.minimum}")
        print(f"Max length:  {stats.maximum}")
        print(f"Avg length:  {stats.average:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())