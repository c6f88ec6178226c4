import pytest

from fssvb.codepages import (
    PLI_NOT_SYMBOL,
    Codeset,
    decode_table,
    encode_table,
    translate,
)

SAFE_TEXT = (
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789 .,()+&"
)


@pytest.mark.parametrize("codeset", list(Codeset))
def test_tables_have_256_entries(codeset):
    assert len(encode_table(codeset)) == 256
    assert len(decode_table(codeset)) == 256


@pytest.mark.parametrize("codeset", list(Codeset))
def test_round_trip_alphanumerics(codeset):
    encoded = translate(SAFE_TEXT, encode_table(codeset))
    assert encoded != SAFE_TEXT
    assert translate(encoded, decode_table(codeset)) == SAFE_TEXT


def test_codeset_accepts_string_names():
    assert encode_table("037") is encode_table(Codeset.CP037)
    assert decode_table("1047") is decode_table(Codeset.CP1047)


def test_unknown_codeset_rejected():
    with pytest.raises(ValueError):
        encode_table("999")


def test_pinned_source_values():
    assert encode_table(Codeset.CP037)[ord("A")] == 0xC1
    assert encode_table(Codeset.CP1047)[0x8C] == PLI_NOT_SYMBOL
    assert decode_table(Codeset.CP037)[0xFF] == 0xFF


def test_037_upper_half_is_zero_filled():
    assert encode_table(Codeset.CP037)[0x80:] == bytes(128)


def test_tables_differ_for_brackets():
    assert encode_table("037")[ord("[")] != encode_table("1047")[ord("[")]


def test_translate_without_table_copies():
    data = bytearray(b"raw\x00bytes")
    result = translate(data, None)
    assert result == bytes(data)


def test_translate_rejects_short_table():
    with pytest.raises(ValueError):
        translate(b"abc", bytes(10))


def test_translate_preserves_length():
    data = bytes(range(256))
    assert len(translate(data, decode_table(Codeset.CP1047))) == 256