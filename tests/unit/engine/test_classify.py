"""Unit tests for utf8kit.engine.classify."""

import pytest

from utf8kit.engine import ByteClass, classify


@pytest.mark.parametrize(
    "byte, expected",
    [
        (0x00, ByteClass.ASCII),
        (0x41, ByteClass.ASCII),
        (0x7F, ByteClass.ASCII),
        (0x80, ByteClass.CONTINUATION),
        (0xBF, ByteClass.CONTINUATION),
        (0xC0, ByteClass.LEAD2),
        (0xDF, ByteClass.LEAD2),
        (0xE0, ByteClass.LEAD3),
        (0xEF, ByteClass.LEAD3),
        (0xF0, ByteClass.LEAD4),
        (0xF7, ByteClass.LEAD4),
        (0xF8, ByteClass.INVALID),
        (0xFF, ByteClass.INVALID),
    ],
)
def test_classify_by_high_bits(byte, expected):
    """Each byte is classified by its high bits."""
    assert classify(byte) is expected


@pytest.mark.parametrize(
    "byte_class, length",
    [
        (ByteClass.ASCII, 1),
        (ByteClass.LEAD2, 2),
        (ByteClass.LEAD3, 3),
        (ByteClass.LEAD4, 4),
        (ByteClass.CONTINUATION, 0),
        (ByteClass.INVALID, 0),
    ],
)
def test_sequence_length(byte_class, length):
    """Lead classes carry the length of the character they introduce."""
    assert byte_class.sequence_length == length
    assert byte_class.is_lead is (length > 0)


def test_every_byte_has_a_class():
    """All 256 byte values classify without error."""
    counts = {cls: 0 for cls in ByteClass}
    for byte in range(256):
        counts[classify(byte)] += 1
    assert counts == {
        ByteClass.ASCII: 128,
        ByteClass.CONTINUATION: 64,
        ByteClass.LEAD2: 32,
        ByteClass.LEAD3: 16,
        ByteClass.LEAD4: 8,
        ByteClass.INVALID: 8,
    }


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_classify_rejects_non_bytes(value):
    """Values outside 0..255 are a caller error."""
    with pytest.raises(ValueError, match="Not a byte value"):
        classify(value)
