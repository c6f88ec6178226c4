"""Copy a text file into a VB file, one record per line."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from fssvb.codepages import Codeset
from fssvb.vbfile import VBError, open_write

__all__ = ["BLOCK_SIZE", "CopyStats", "copy_text", "main"]

BLOCK_SIZE = 32760 - 4

_CODESET_ARGS = {"37": Codeset.CP037, "1047": Codeset.CP1047}


@dataclass
class CopyStats:
    """Totals from one copy: lines, bytes read and elapsed seconds."""

    records: int = 0
    bytes: int = 0
    elapsed: float = 0.0

    @property
    def megabytes(self) -> float:
        return self.bytes / (1024 * 1024)

    @property
    def throughput(self) -> Optional[float]:
        """Records per second, or None if no time was measured."""
        return self.records / self.elapsed if self.elapsed > 0 else None


def copy_text(
    in_path: Union[str, "os.PathLike[str]"],
    out_path: Union[str, "os.PathLike[str]"],
    codeset: Optional[Union[Codeset, str]] = None,
) -> CopyStats:
    """Write each line of ``in_path``, without its line ending, as a record.

    Given a ``codeset``, the records are stored in that EBCDIC code page.
    """
    stats = CopyStats()
    with open_write(out_path, BLOCK_SIZE, codeset or "") as vb, open(
        in_path, "rb"
    ) as src:
        start = time.perf_counter()
        for line in src:
            stats.records += 1
            stats.bytes += len(line)
            vb.put(line.rstrip(b"\r\n"))
        stats.elapsed = time.perf_counter() - start
    return stats


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    prog = "vbcopy"
    if len(args) < 2:
        print(f"Usage: {prog} <input.txt> <output.vb> [37|1047]")
        return 1

    codeset = _CODESET_ARGS.get(args[2]) if len(args) == 3 else None
    try:
        stats = copy_text(args[0], args[1], codeset)
    except (OSError, VBError) as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1

    print("\n--- Results ---")
    print(f"Total Records: {stats.records}")
    print(f"Total Data:    {stats.megabytes:.2f} MB")
    print(f"Elapsed Time:  {stats.elapsed:.4f} seconds")
    print(f"Final Count: {stats.records}")
    if stats.throughput is not None:
        print(f"Throughput:    {stats.throughput:.2f} records/sec")
    return 0


if __name__ == "__main__":
    sys.exit(main())