"""Codec: convert between encoded characters and code points.

`decode` and `encode` are plain bit arithmetic over the classic UTF-8 layout
and support the full 21-bit range (up to U+1FFFFF). Neither raises on bad
input: `decode` returns None for a chunk it cannot decode and `encode` returns
``b""`` for a value that has no encoding.

The textual ``U+XXXX`` notation is handled by `to_unicode_style` and
`from_unicode_style`, and is accepted by `encode` in place of an integer.
"""

import re

from .splitter import iter_chars
from .types import ByteInput, as_bytes

UNICODE_STYLE_PATTERN = re.compile(r"U\+([0-9a-f]{4,6})", re.IGNORECASE)

MAX_CODE_POINT = 0x1FFFFF


def decode(chunk: ByteInput) -> int | None:
    """Return the code point of a single encoded character.

    The chunk is expected to have been produced by the splitter; only its
    length selects the layout, the marker bits are masked off.

    Args:
        chunk: One encoded character (1-4 bytes).

    Returns:
        int | None: The code point, or None if ``chunk`` is empty or longer
        than 4 bytes.
    """
    b = as_bytes(chunk)
    match len(b):
        case 1:
            return b[0]
        case 2:
            return (b[0] & 0x1F) << 6 | (b[1] & 0x3F)
        case 3:
            return (b[0] & 0x0F) << 12 | (b[1] & 0x3F) << 6 | (b[2] & 0x3F)
        case 4:
            return (
                (b[0] & 0x07) << 18
                | (b[1] & 0x3F) << 12
                | (b[2] & 0x3F) << 6
                | (b[3] & 0x3F)
            )
        case _:
            return None


def code_point(data: ByteInput) -> int | None:
    """Return the code point of the first well-formed character in ``data``.

    Returns:
        int | None: The code point, or None if ``data`` holds no character.
    """
    first = next(iter_chars(data), None)
    return None if first is None else decode(first)


def encode(value: int | str) -> bytes:
    """Return the minimal encoding of a code point.

    Args:
        value: A non-negative integer or a ``U+XXXX`` string.

    Returns:
        bytes: 1-4 encoded bytes, or ``b""`` if the value is negative, needs
        more than 21 bits, or is a string that is not ``U+XXXX`` notation.
    """
    if isinstance(value, str):
        if (parsed := from_unicode_style(value)) is None:
            return b""
        value = parsed
    if not 0 <= value <= MAX_CODE_POINT:
        return b""

    bits = value.bit_length()
    if bits <= 7:
        return bytes((value,))
    if bits <= 11:
        return bytes((0xC0 | (value >> 6) & 0x1F, 0x80 | value & 0x3F))
    if bits <= 16:
        return bytes(
            (
                0xE0 | (value >> 12) & 0x0F,
                0x80 | (value >> 6) & 0x3F,
                0x80 | value & 0x3F,
            )
        )
    return bytes(
        (
            0xF0 | (value >> 18) & 0x07,
            0x80 | (value >> 12) & 0x3F,
            0x80 | (value >> 6) & 0x3F,
            0x80 | value & 0x3F,
        )
    )


def to_unicode_style(value: int) -> str:
    """Format a code point as ``U+XXXX``.

    Hex digits are upper case and padded to at least four digits.
    Negative values have no notation and yield ``""``.
    """
    if value < 0:
        return ""
    return f"U+{value:04X}"


def from_unicode_style(text: str) -> int | None:
    """Parse ``U+`` followed by 4-6 hex digits (case-insensitive).

    Returns:
        int | None: The code point, or None if ``text`` is not in that form.
    """
    if not (match := UNICODE_STYLE_PATTERN.fullmatch(text.strip())):
        return None
    return int(match.group(1), 16)
