import pytest

from fssvb.race import LINE_TEXT, create_test_files, main, update_text, update_vb
from fssvb.vbfile import RecordTooLongError, open_read, open_write


def read_records(path):
    with open_read(path) as vb:
        return list(vb)


@pytest.fixture
def race_files(tmp_path):
    vb = tmp_path / "race.vbf"
    txt = tmp_path / "race.txt"
    create_test_files(vb, txt, 5)
    return vb, txt


def test_create_writes_matching_files(race_files):
    vb, txt = race_files
    expected = [f"{LINE_TEXT}{n}".encode() for n in range(5)]
    assert read_records(vb) == expected
    assert txt.read_bytes().splitlines() == expected


def test_create_first_record(race_files):
    vb, _ = race_files
    assert read_records(vb)[0] == b"Data_Record_Payload_Item_Number_0"


def test_update_vb_patches_and_prefixes(race_files, tmp_path):
    vb, _ = race_files
    out = tmp_path / "out.vbf"
    assert update_vb(vb, out) == 5
    records = read_records(out)
    assert len(records) == 5
    assert all(r.startswith(b"PROC:Data_Record_Payload_DATA_Number_") for r in records)


def test_update_text_patches_and_prefixes(race_files, tmp_path):
    _, txt = race_files
    out = tmp_path / "out.txt"
    assert update_text(txt, out) == 5
    lines = out.read_bytes().splitlines()
    assert lines[0] == b"PROC:Data_Record_Payload_DATA_Number_0"


def test_vb_and_text_results_agree(race_files, tmp_path):
    vb, txt = race_files
    out_vb = tmp_path / "out.vbf"
    out_txt = tmp_path / "out.txt"
    update_vb(vb, out_vb)
    update_text(txt, out_txt)
    assert read_records(out_vb) == out_txt.read_bytes().splitlines()


def test_non_matching_records_are_only_prefixed(tmp_path):
    src = tmp_path / "in.vbf"
    with open_write(src, 1024) as vb:
        vb.put(b"short")
        vb.put(b"Data_Record_Payload_Other_1")
    out = tmp_path / "out.vbf"
    assert update_vb(src, out) == 0
    assert read_records(out) == [b"PROC:short", b"PROC:Data_Record_Payload_Other_1"]


def test_update_vb_rejects_long_record(tmp_path):
    src = tmp_path / "in.vbf"
    with open_write(src, 4096) as vb:
        vb.put(b"x" * 600)
    with pytest.raises(RecordTooLongError):
        update_vb(src, tmp_path / "out.vbf")


def test_main_create_and_update(tmp_path, capsys):
    vb = tmp_path / "r.vbf"
    txt = tmp_path / "r.txt"
    assert main(["create", "--count", "3", "--vb", str(vb), "--text", str(txt)]) == 0
    assert len(read_records(vb)) == 3
    out = tmp_path / "o.vbf"
    assert main(["update-vb", str(vb), str(out)]) == 0
    assert "Total Matches Found: 3" in capsys.readouterr().out


def test_main_update_text_missing_input(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main(["update-text", str(missing), str(tmp_path / "o.txt")]) == 1
    assert "race" in capsys.readouterr().err