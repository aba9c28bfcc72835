import pytest

from vitapkg.textutil import is_korean_char, is_latin_char, utf16_to_utf8, utf8_to_utf16


def test_ascii_to_utf16():
    assert utf8_to_utf16("Search", 100) == [ord(c) for c in "Search"]


@pytest.mark.parametrize("text", ["Ünïcödé", "日本語のゲーム", "Привет", "한국어 mixed 123"])
def test_bmp_round_trip(text):
    units = utf8_to_utf16(text, 256)
    assert units == [ord(c) for c in text]
    assert utf16_to_utf8(units, 1024) == text


def test_bytes_input_accepted():
    assert utf8_to_utf16("é".encode(), 10) == [ord("é")]


def test_available_limits_units():
    assert utf8_to_utf16("abcdef", 3) == [ord("a"), ord("b"), ord("c")]
    assert utf8_to_utf16("abc", 0) == []


def test_stops_at_nul():
    assert utf8_to_utf16("ab\0cd", 10) == [ord("a"), ord("b")]


def test_truncated_sequence_stops():
    assert utf8_to_utf16(b"a\xc3", 10) == [ord("a")]


def test_invalid_continuation_stops():
    assert utf8_to_utf16(b"a\xc3A", 10) == [ord("a")]


def test_utf16_size_limit_in_bytes():
    units = [ord(c) for c in "aé"]
    assert utf16_to_utf8(units, 2) == "a"
    assert utf16_to_utf8(units, 3) == "aé"


def test_utf16_stops_at_zero_unit():
    assert utf16_to_utf8([ord("x"), 0, ord("y")], 10) == "x"


def test_utf16_rejects_high_surrogate_first():
    assert utf16_to_utf8([ord("a"), 0xD83D, 0xDE00, ord("b")], 20) == "a"


def test_utf16_empty():
    assert utf16_to_utf8([], 10) == ""


@pytest.mark.parametrize("code", [0x3130, 0x318F, 0xAC00, 0xD7AF, 0xFFE6])
def test_korean_ranges(code):
    assert is_korean_char(code) is True


@pytest.mark.parametrize("code", [0x41, 0x312F, 0x3190, 0xABFF, 0xD7B0, 0xFFE5])
def test_not_korean(code):
    assert is_korean_char(code) is False


@pytest.mark.parametrize("code", [0x00, 0x41, 0xFF, 0x0400, 0x04FF])
def test_latin_ranges(code):
    assert is_latin_char(code) is True


@pytest.mark.parametrize("code", [0x0100, 0x03FF, 0x0500, 0xAC00])
def test_not_latin(code):
    assert is_latin_char(code) is False


def test_char_checks_use_low_sixteen_bits():
    assert is_latin_char(0x10041) is True
    assert is_korean_char(0x1AC00) is True