import pytest

from fssvb.codepages import encode_table, translate
from fssvb.vbcopy import CopyStats, copy_text, main
from fssvb.vbfile import open_read

TEXT = b"Hello\r\nVariable\nBlocked IO\n"
RECORDS = [b"Hello", b"Variable", b"Blocked IO"]


@pytest.fixture
def text_path(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(TEXT)
    return path


def read_records(path, translate_name=""):
    with open_read(path, translate_name) as vb:
        return list(vb)


def test_copy_strips_line_endings(text_path, tmp_path):
    out = tmp_path / "out.vb"
    stats = copy_text(text_path, out)
    assert read_records(out) == RECORDS
    assert stats.records == len(RECORDS)
    assert stats.bytes == len(TEXT)


def test_copy_without_final_newline(tmp_path):
    src = tmp_path / "in.txt"
    src.write_bytes(b"a\nlast")
    out = tmp_path / "out.vb"
    copy_text(src, out)
    assert read_records(out) == [b"a", b"last"]


def test_copy_translates_to_ebcdic(text_path, tmp_path):
    out = tmp_path / "out.vb"
    copy_text(text_path, out, "037")
    raw = read_records(out)
    assert raw == [translate(r, encode_table("037")) for r in RECORDS]
    assert read_records(out, "037") == RECORDS


def test_copy_pins_ebcdic_letter(tmp_path):
    src = tmp_path / "in.txt"
    src.write_bytes(b"A\n")
    out = tmp_path / "out.vb"
    copy_text(src, out, "1047")
    assert read_records(out) == [b"\xc1"]


def test_stats_throughput():
    assert CopyStats(records=10, bytes=0, elapsed=0.0).throughput is None
    assert CopyStats(records=10, bytes=0, elapsed=2.0).throughput == 5.0


def test_main_reports_results(text_path, tmp_path, capsys):
    out = tmp_path / "out.vb"
    assert main([str(text_path), str(out)]) == 0
    assert "Total Records: 3" in capsys.readouterr().out
    assert read_records(out) == RECORDS


def test_main_codeset_argument(text_path, tmp_path):
    out = tmp_path / "out.vb"
    assert main([str(text_path), str(out), "37"]) == 0
    assert read_records(out, "037") == RECORDS
    assert read_records(out) != RECORDS


def test_main_unknown_codeset_copies_plainly(text_path, tmp_path):
    out = tmp_path / "out.vb"
    assert main([str(text_path), str(out), "500"]) == 0
    assert read_records(out) == RECORDS


def test_main_usage(capsys):
    assert main(["only-one"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), str(tmp_path / "o.vb")]) == 1
    assert "vbcopy" in capsys.readouterr().err