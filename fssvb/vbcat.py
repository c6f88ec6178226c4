"""Dump the records of a VB file to standard output."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO, Optional, Sequence, Union

from fssvb.vbfile import VBError, open_read

__all__ = ["MAX_RECORD", "dump_records", "main"]

MAX_RECORD = 65536

_USAGE = (
    "usage: {prog} [-n|-0|-r] file.vb\n"
    "  -n  newline delimiter (default)\n"
    "  -0  NUL delimiter\n"
    "  -r  raw (no delimiter)\n"
)


def dump_records(
    path: Union[str, "os.PathLike[str]"],
    out: BinaryIO,
    delimiter: Optional[bytes] = b"\n",
) -> int:
    """Write every record of ``path`` to ``out``, each followed by ``delimiter``.

    A ``delimiter`` of None writes the records back to back. Returns the
    number of records written.
    """
    count = 0
    with open_read(path) as vb:
        while (record := vb.get(MAX_RECORD)) is not None:
            out.write(record)
            if delimiter is not None:
                out.write(delimiter)
            count += 1
    return count


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    prog = "vbcat"
    if not args:
        sys.stderr.write(_USAGE.format(prog=prog))
        return 1

    delimiter = b"\n"
    raw = False
    for option in args[:-1]:
        if option == "-n":
            delimiter = b"\n"
        elif option == "-0":
            delimiter = b"\0"
        elif option == "-r":
            raw = True
        else:
            sys.stderr.write(_USAGE.format(prog=prog))
            return 1

    out = sys.stdout.buffer
    try:
        dump_records(args[-1], out, None if raw else delimiter)
    except (OSError, VBError) as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1
    finally:
        out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())