import io

import pytest

from fssvb.vbcat import dump_records, main
from fssvb.vbfile import open_write

RECORDS = [b"Hello", b"Variable", b"Blocked IO"]


@pytest.fixture
def vb_path(tmp_path):
    path = tmp_path / "test.vb"
    with open_write(path, 4096) as out:
        for record in RECORDS:
            out.put(record)
    return path


def test_dump_with_newlines(vb_path):
    buf = io.BytesIO()
    count = dump_records(vb_path, buf)
    assert count == len(RECORDS)
    assert buf.getvalue() == b"".join(r + b"\n" for r in RECORDS)


def test_dump_with_nul_delimiter(vb_path):
    buf = io.BytesIO()
    dump_records(vb_path, buf, b"\0")
    assert buf.getvalue().split(b"\0")[:-1] == RECORDS


def test_dump_raw(vb_path):
    buf = io.BytesIO()
    dump_records(vb_path, buf, None)
    assert buf.getvalue() == b"".join(RECORDS)


def test_dump_empty_records(tmp_path):
    path = tmp_path / "empty.vb"
    with open_write(path, 4096) as out:
        out.put(b"")
        out.put(b"x")
    buf = io.BytesIO()
    assert dump_records(path, buf) == 2
    assert buf.getvalue() == b"\nx\n"


def test_main_raw(vb_path, capsysbinary):
    assert main(["-r", str(vb_path)]) == 0
    assert capsysbinary.readouterr().out == b"".join(RECORDS)


def test_main_default_newline(vb_path, capsysbinary):
    assert main([str(vb_path)]) == 0
    assert capsysbinary.readouterr().out.splitlines() == RECORDS


def test_main_raw_wins_over_later_delimiter(vb_path, capsysbinary):
    assert main(["-r", "-0", str(vb_path)]) == 0
    assert capsysbinary.readouterr().out == b"".join(RECORDS)


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_bad_option(vb_path, capsys):
    assert main(["-x", str(vb_path)]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.vb")]) == 1
    assert "Open Failed" in capsys.readouterr().err