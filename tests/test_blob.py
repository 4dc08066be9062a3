"""Tests for the manufacturer data scanner."""
from __future__ import annotations

from battery_tap.blob import decode_battery_id, extract_strings


def test_two_prefixed_strings():
    data = bytes([3]) + b"ABC" + bytes([2]) + b"XY"
    assert extract_strings(data) == ["ABC", "XY"]
    assert decode_battery_id(data) == "ABC-XY"


def test_truncated_prefix_is_skipped_one_byte():
    # 5 exceeds the remaining bytes; 'A' and 'B' are not length bytes.
    assert extract_strings(bytes([5]) + b"AB") == []
    assert decode_battery_id(bytes([5]) + b"AB") is None


def test_truncated_prefix_then_valid_chunk():
    # 9 cannot fit, so the scan resumes at the next byte which is a valid prefix.
    data = bytes([9, 2]) + b"OK"
    assert extract_strings(data) == ["OK"]


def test_large_and_zero_bytes_are_skipped():
    data = bytes([0, 0x20, 0xFF, 2]) + b"HI"
    assert extract_strings(data) == ["HI"]


def test_last_byte_is_never_a_prefix():
    assert extract_strings(bytes([1])) == []
    assert extract_strings(b"Z" + bytes([1])) == []


def test_prefix_exactly_fills_remaining_bytes():
    assert extract_strings(bytes([4]) + b"ABCD") == ["ABCD"]


def test_blank_chunk_is_consumed_but_dropped():
    data = bytes([3]) + b"   " + bytes([2]) + b"XY"
    assert extract_strings(data) == ["XY"]


def test_non_ascii_chunk_is_consumed_but_dropped():
    # The 0x02 inside the dropped chunk must not be rescanned as a prefix.
    data = bytes([3, 0x80, 0x02, 0x41]) + bytes([2]) + b"XY"
    assert extract_strings(data) == ["XY"]


def test_chunk_keeps_surrounding_whitespace():
    assert decode_battery_id(bytes([4]) + b" A1 ") == " A1 "


def test_empty_blob():
    assert extract_strings(b"") == []
    assert decode_battery_id(b"") is None


def test_information_separator_chunk_is_kept():
    data = bytes([1, 0x1F, 2]) + b"XY"
    assert extract_strings(data) == ["\x1f", "XY"]
    assert decode_battery_id(data) == "\x1f-XY"


def test_ascii_whitespace_chunk_is_dropped():
    data = bytes([4]) + b"\t\r\n\x0b" + bytes([2]) + b"XY"
    assert extract_strings(data) == ["XY"]
