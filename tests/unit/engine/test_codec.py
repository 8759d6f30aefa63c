"""Unit tests for utf8kit.engine.codec."""

import pytest

from utf8kit.engine import (
    code_point,
    decode,
    encode,
    from_unicode_style,
    to_unicode_style,
)


@pytest.mark.parametrize(
    "chunk, expected",
    [
        (b"\x00", 0),
        (b"A", 65),
        (b"\xc3\xa9", 0xE9),
        (b"\xe2\x82\xac", 8364),
        (b"\xf0\x9f\x98\x80", 0x1F600),
        (b"\xf7\xbf\xbf\xbf", 0x1FFFFF),
        (b"\xc0\xaf", 0x2F),  # overlong decodes by arithmetic alone
    ],
)
def test_decode(chunk, expected):
    """Decoding follows the bit layout for each length."""
    assert decode(chunk) == expected


@pytest.mark.parametrize("chunk", [b"", b"\xf0\x9f\x98\x80\x80"])
def test_decode_not_decodable(chunk):
    """Lengths outside 1..4 are reported as None, distinct from NUL."""
    assert decode(chunk) is None


def test_decode_nul_is_zero():
    """NUL decodes to 0, which is a real code point and not a failure."""
    assert decode(b"\x00") == 0
    assert decode(b"\x00") is not None


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, b"\x00"),
        (0x7F, b"\x7f"),
        (0x80, b"\xc2\x80"),
        (0x7FF, b"\xdf\xbf"),
        (0x800, b"\xe0\xa0\x80"),
        (8364, b"\xe2\x82\xac"),
        (0xFFFF, b"\xef\xbf\xbf"),
        (0x10000, b"\xf0\x90\x80\x80"),
        (0x10FFFF, b"\xf4\x8f\xbf\xbf"),
        (0x1FFFFF, b"\xf7\xbf\xbf\xbf"),
    ],
)
def test_encode_boundaries(value, expected):
    """Each width boundary selects the minimal encoding."""
    assert encode(value) == expected


@pytest.mark.parametrize("value", [0x200000, 0x7FFFFFFF, -1])
def test_encode_unencodable(value):
    """Values needing more than 21 bits, or negative ones, encode to b""."""
    assert encode(value) == b""


@pytest.mark.parametrize(
    "value, expected",
    [
        ("U+20AC", b"\xe2\x82\xac"),
        ("u+20ac", b"\xe2\x82\xac"),
        ("U+0000", b"\x00"),
        ("U+1F600", b"\xf0\x9f\x98\x80"),
        ("20AC", b""),
        ("U+20", b""),
        ("U+ZZZZ", b""),
    ],
)
def test_encode_unicode_style(value, expected):
    """U+XXXX strings are accepted in place of integers."""
    assert encode(value) == expected


def test_euro_scenario():
    """E2 82 AC decodes to 8364, which encodes back to E2 82 AC."""
    euro = bytes([0xE2, 0x82, 0xAC])
    assert decode(euro) == 0x20AC
    assert encode(8364) == euro


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x80\xe2\x82\xacabc", 8364),
        (b"Hello", 72),
        ("é", 0xE9),
        (b"", None),
        (b"\x80\xff", None),
    ],
)
def test_code_point(data, expected):
    """code_point decodes the first well-formed character."""
    assert code_point(data) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "U+0000"),
        (0x41, "U+0041"),
        (0x20AC, "U+20AC"),
        (0x1F600, "U+1F600"),
        (0x1FFFFF, "U+1FFFFF"),
        (-5, ""),
    ],
)
def test_to_unicode_style(value, expected):
    """Code points are formatted as upper-case, zero-padded U+ notation."""
    assert to_unicode_style(value) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("U+0041", 0x41),
        ("u+1f600", 0x1F600),
        ("U+000000", 0),
        (" U+20AC ", 0x20AC),
        ("U+41", None),
        ("U+1234567", None),
        ("U+GGGG", None),
        ("0041", None),
        ("", None),
    ],
)
def test_from_unicode_style(text, expected):
    """Only U+ followed by 4 to 6 hex digits parses."""
    assert from_unicode_style(text) == expected
