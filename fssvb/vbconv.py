"""Convert between delimited text files and VB record files."""

from __future__ import annotations

import os
import sys
from functools import partial
from typing import Optional, Sequence, Union

from fssvb.vbfile import DEFAULT_READ_BLOCK_SIZE, VBError, open_read, open_write

__all__ = ["BUF_SIZE", "text_to_vb", "vb_to_text", "main"]

BUF_SIZE = 65536

PathLike = Union[str, "os.PathLike[str]"]

_USAGE = (
    "usage:\n"
    "  {prog} -t2v [-n|-0] [-b block] [-4] in.txt out.vb\n"
    "  {prog} -v2t [-n|-0] in.vb out.txt\n"
)


def text_to_vb(
    in_path: PathLike,
    out_path: PathLike,
    delimiter: bytes = b"\n",
    block_size: int = DEFAULT_READ_BLOCK_SIZE,
) -> int:
    """Split ``in_path`` at ``delimiter`` and write each piece as a record.

    Empty pieces between delimiters become empty records; a trailing piece
    after the last delimiter is written only if it is not empty. A block
    size of 0 selects the default. Returns the number of records written.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    count = 0
    with open(in_path, "rb") as src, open_write(
        out_path, block_size or DEFAULT_READ_BLOCK_SIZE
    ) as out:
        pending = b""
        for chunk in iter(partial(src.read, BUF_SIZE), b""):
            pieces = (pending + chunk).split(delimiter)
            pending = pieces.pop()
            for piece in pieces:
                out.put(piece)
                count += 1
        if pending:
            out.put(pending)
            count += 1
    return count


def vb_to_text(
    in_path: PathLike,
    out_path: PathLike,
    delimiter: bytes = b"\n",
) -> int:
    """Write every record of ``in_path`` followed by ``delimiter``; return the count."""
    count = 0
    with open_read(in_path) as vb, open(out_path, "wb") as dst:
        while (record := vb.get(vb.block_size)) is not None:
            dst.write(record)
            dst.write(delimiter)
            count += 1
    return count


class _UsageError(Exception):
    pass


def _parse(args: list[str]) -> tuple[str, bytes, int, str, str]:
    if len(args) < 3 or args[0] not in ("-t2v", "-v2t"):
        raise _UsageError
    delimiter = b"\n"
    block_size = 0
    options = iter(args[1:-2])
    for option in options:
        if option == "-n":
            delimiter = b"\n"
        elif option == "-0":
            delimiter = b"\0"
        elif option == "-4":
            raise VBError("32-bit record lengths (-4) are not supported")
        elif option == "-b":
            value = next(options, None)
            if value is None:
                raise _UsageError
            try:
                block_size = int(value)
            except ValueError:
                raise _UsageError from None
        else:
            raise _UsageError
    return args[0], delimiter, block_size, args[-2], args[-1]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    prog = "vbconv"
    try:
        mode, delimiter, block_size, in_path, out_path = _parse(args)
        if mode == "-t2v":
            text_to_vb(in_path, out_path, delimiter, block_size)
        else:
            vb_to_text(in_path, out_path, delimiter)
    except _UsageError:
        sys.stderr.write(_USAGE.format(prog=prog))
        return 1
    except (OSError, ValueError, VBError) as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())