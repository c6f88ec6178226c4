"""Create and process the test files that compare VB records with text lines."""

from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Optional, Sequence, Union

from fssvb.boundedstr import BoundedString
from fssvb.vbfile import open_read, open_write

__all__ = [
    "BLOCK_SIZE",
    "LINE_TEXT",
    "create_test_files",
    "update_vb",
    "update_text",
    "main",
]

BLOCK_SIZE = 32768
LINE_TEXT = "Data_Record_Payload_Item_Number_"
MAX_REC = 512

_SEARCH = b"_Item_"
_REPLACE = b"_DATA_"
_OFFSET = 19
_PREFIX = b"PROC:"

PathLike = Union[str, "os.PathLike[str]"]


def create_test_files(
    vb_path: PathLike, text_path: PathLike, count: int = 5_000_000
) -> int:
    """Write ``count`` numbered records to a VB file and a newline text file."""
    with open_write(vb_path, BLOCK_SIZE) as vb, open(text_path, "wb") as txt:
        for number in range(count):
            record = f"{LINE_TEXT}{number}".encode("ascii")
            vb.put(record)
            txt.write(record + b"\n")
    return count


def _patch(record: bytes) -> tuple[bytes, bool]:
    if record[_OFFSET : _OFFSET + len(_SEARCH)] == _SEARCH:
        return record[:_OFFSET] + _REPLACE + record[_OFFSET + len(_SEARCH) :], True
    return record, False


def update_vb(in_path: PathLike, out_path: PathLike) -> int:
    """Patch "_Item_" at offset 19 to "_DATA_", prefix "PROC:", write records.

    Returns the number of records that were patched.
    """
    matches = 0
    rec_buf = BoundedString(MAX_REC)
    work_area = BoundedString(600)
    with open_read(in_path) as src, open_write(out_path, BLOCK_SIZE) as dst:
        while (record := src.get(rec_buf.capacity)) is not None:
            rec_buf.assign(record)
            end = _OFFSET + len(_SEARCH)
            if rec_buf.value[_OFFSET:end] == _SEARCH:
                matches += 1
                rec_buf.data[_OFFSET:end] = _REPLACE
            work_area.assign(_PREFIX).append(rec_buf)
            dst.put(work_area)
    return matches


def update_text(in_path: PathLike, out_path: PathLike) -> int:
    """Do the same work as update_vb on newline-delimited text files."""
    matches = 0
    with open(in_path, "rb") as src, open(out_path, "wb") as dst:
        for line in src:
            if line.endswith(b"\n"):
                line = line[:-1]
            line, patched = _patch(line)
            matches += patched
            dst.write(_PREFIX + line + b"\n")
    return matches


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="race", description="VB record files against text lines."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="generate the test files")
    create.add_argument("--count", type=int, default=5_000_000)
    create.add_argument("--vb", default="race_test.vbf")
    create.add_argument("--text", default="race_test.txt")

    upd_vb = commands.add_parser("update-vb", help="process the VB file")
    upd_vb.add_argument("input", nargs="?", default="race_test.vbf")
    upd_vb.add_argument("output", nargs="?", default="race_test_fss_out.vbf")

    upd_text = commands.add_parser("update-text", help="process the text file")
    upd_text.add_argument("input", nargs="?", default="race_test.txt")
    upd_text.add_argument("output", nargs="?", default="race_test_std_out.txt")

    args = parser.parse_args(argv)

    try:
        if args.command == "create":
            count = create_test_files(args.vb, args.text, args.count)
            print(f"Generated {count:,} records in both .vbf and .txt formats.")
            return 0
        start = time.perf_counter()
        if args.command == "update-vb":
            matches = update_vb(args.input, args.output)
            label = "Challenger"
        else:
            matches = update_text(args.input, args.output)
            label = "Standard text"
        elapsed = time.perf_counter() - start
    except OSError as exc:
        print(f"race: {exc}", file=sys.stderr)
        return 1
    print(f"Total Matches Found: {matches}")
    print(f"{label} Time: {elapsed:f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())