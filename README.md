# fssvb

Read and write **variable blocked (VB)** record files. Every record is
prefixed with a 4-byte Record Descriptor Word (RDW): a big-endian 16-bit
length that includes the RDW, then two zero bytes. Records are grouped into
blocks, and each block is prefixed with a Block Descriptor Word (BDW) laid
out the same way. Nothing is scanned for line feeds or terminators, so
binary data passes through unchanged.

Records can be translated on the fly between ASCII and the EBCDIC code pages
037 and 1047.

The package also has `BoundedString`, a byte string with a fixed capacity
that tracks its own length and never grows past its limit.

## Installing

```
pip install .
```

No dependencies beyond the standard library. To run the tests:

```
pip install .[test]
pytest
```

## Writing and reading records (`fssvb.vbfile`)

```python
from fssvb.vbfile import open_write, open_read

with open_write("test.vb", 4096, "") as out:
    out.put(b"Hello")
    out.put(b"Variable")
    out.put(b"Blocked IO")

with open_read("test.vb", "") as vb:
    for record in vb:
        print(record)
```

`put` accepts bytes, a `str` (encoded as Latin-1) or anything with
`__bytes__`, such as a `BoundedString`. It buffers the record in the current
block and writes the block out when the next record no longer fits; `close`
(or leaving the `with` block) writes the last block. A record larger than the
block size raises `RecordTooLongError`. The block size for writing may not
exceed 65531. `open_read` always reads with a block size of 32768
(`DEFAULT_READ_BLOCK_SIZE`).

On a file opened for reading:

- `get(max_len=None)` returns the next record, translated, or `None` at end
  of file; a record longer than `max_len` is consumed and raises
  `RecordTooLongError`;
- `locate()` returns the next record as a `memoryview` into the block
  buffer, without copying and without translation;
- `skip()` moves past the next record and returns its length;
- iterating the file yields every remaining record.

Corrupt block or record descriptor words, a closed file, or a read on a file
opened for writing (and the reverse) raise `VBError`; its `code` attribute
holds a short code such as `"S0C4"` or `"S013"` where one applies.

Pass `"037"` or `"1047"` (or a `Codeset`) as the translate argument to
convert records from ASCII to that EBCDIC code page when writing, and back
when reading. An empty value means no translation; any other value raises
`VBError`. `open_vb(path, mode, block_size)` opens a file with a mode string:
one starting with `w` writes, anything else reads, and `codeset=037` or
`codeset=1047` in the string selects translation, e.g. `"w,codeset=037"`.
`VBFile(path, Mode.WRITE, block_size, codeset)` can also be used directly.

## Code pages (`fssvb.codepages`)

```python
from fssvb.codepages import Codeset, encode_table, decode_table, translate

ebcdic = translate(b"HELLO", encode_table(Codeset.CP037))
ascii_again = translate(ebcdic, decode_table(Codeset.CP037))
```

`encode_table` and `decode_table` return 256-byte tables and also accept the
strings `"037"` and `"1047"`. `translate(data, None)` returns the data
unchanged.

## Bounded strings (`fssvb.boundedstr`)

```python
from fssvb.boundedstr import BoundedString

name = BoundedString(256, b"John")
name += b" "
name += BoundedString(256, b"Smith")
print(bytes(name), len(name))       # b'John Smith' 10
```

Values may be bytes, Latin-1 `str` or another `BoundedString`. Assigning
(`assign`) or appending (`append`, `+=`) more than the capacity keeps what
fits and drops the rest. `compare` returns -1, 0 or 1, ordering byte by byte
and then by length; `==` uses it. `view(start, length)` gives a `memoryview`
substring clamped to the current contents. `data` is a writable view of the
whole buffer; `set_length` sets the current length and ignores lengths
beyond the capacity. `clear` empties the string. `capacity` and `value` give
the capacity and the current contents.

## Command-line tools

Dump the records of a VB file to standard output, each followed by a newline
(`-n`, the default) or a NUL byte (`-0`), or with no separator at all (`-r`):

```
vbcat -n file.vb
```

Convert a delimited text file to VB, and back. `-b` sets the block size
(0 or absent means 32768); `-n` and `-0` choose the delimiter:

```
vbconv -t2v -n -b 4096 in.txt out.vb
vbconv -v2t -n in.vb out.txt
```

Copy a text file into a VB file line by line, stripping line endings,
optionally translating to EBCDIC 037 or 1047, and report record count,
data volume, elapsed time and throughput:

```
vbcopy in.txt out.vb 1047
```

Show the header of a file that starts with a `VBF1` header, and with `-s`
scan its records for count, minimum, maximum and average length:

```
vbinfo -s file.vb
```

Run the record-processing race: create a VB file and a text file holding the
same numbered records, then rewrite each record in both formats (replacing
`_Item_` at offset 19 with `_DATA_` and prefixing `PROC:`) and time the runs:

```
vbrace create --count 100000
vbrace update-vb
vbrace update-text
```

`update-vb` and `update-text` take optional input and output paths; the
defaults are `race_test.vbf` / `race_test_fss_out.vbf` and `race_test.txt` /
`race_test_std_out.txt`.

## What this package does not do

- Record lengths are 16-bit only; `vbconv -4` (32-bit lengths) is rejected.
- Files written by `fssvb.vbfile` carry no `VBF1` file header, so `vbinfo`
  reports them as "not a VB file". `fssvb.vbinfo` can read such a header
  (`FileHeader`, `read_header`) but nothing in the package writes one.