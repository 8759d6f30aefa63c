"""Code-point listings, ranges and HTML numeric entities."""

from collections.abc import Iterable

from utf8kit.engine import (
    MAX_CODE_POINT,
    ByteInput,
    as_bytes,
    code_point,
    decode,
    encode,
    from_unicode_style,
    split,
    to_unicode_style,
)


def codepoints(
    data: ByteInput | Iterable[ByteInput], u_style: bool = False
) -> list[int] | list[str]:
    """List the code points of a byte sequence or of a list of characters.

    Args:
        data: A byte sequence, or an iterable of encoded characters (only the
            first character of each item counts; items without one are skipped).
        u_style: Return ``U+XXXX`` strings instead of integers.

    Returns:
        list[int] | list[str]: Code points in order.
    """
    if isinstance(data, (bytes, bytearray, memoryview, str)):
        points = [decode(char) for char in split(data)]
    else:
        points = [code_point(item) for item in data]
    values = [point for point in points if point is not None]
    if u_style:
        return [to_unicode_style(value) for value in values]
    return values


def from_codepoints(values: Iterable[int | str]) -> bytes:
    """Encode each code point and join the results.

    Values that cannot be encoded contribute nothing.
    """
    return b"".join(encode(value) for value in values)


def chr_to_unicode_style(char: ByteInput) -> str:
    """Return the ``U+XXXX`` notation of the first character of ``char``."""
    if (point := code_point(char)) is None:
        return ""
    return to_unicode_style(point)


def _endpoint(value: int | ByteInput) -> int | None:
    if isinstance(value, int):
        return value if value >= 0 else None
    raw = as_bytes(value)
    # bytes.isdigit only matches ASCII 0-9.
    if raw.isdigit():
        return int(raw)
    if isinstance(value, str) and (point := from_unicode_style(value)) is not None:
        return point
    chars = split(raw)
    return decode(chars[0]) if len(chars) == 1 else None


def char_range(start: int | ByteInput, end: int | ByteInput) -> list[bytes]:
    """Return every encoded character between two endpoints, inclusive.

    Each endpoint may be a code point, a string of ASCII digits (read as a
    decimal code point, so ``"7"`` is U+0007), a ``U+XXXX`` string or exactly
    one encoded character; malformed bytes around that character are ignored.
    Anything else, such as ``"AB"``, cannot be resolved. The range always
    ascends from the lower endpoint to the higher one and stops at the largest
    encodable code point.

    Returns:
        list[bytes]: The characters, or an empty list if an endpoint cannot be
        resolved to a code point.
    """
    first, last = _endpoint(start), _endpoint(end)
    if first is None or last is None:
        return []
    low, high = min(first, last), min(max(first, last), MAX_CODE_POINT)
    return [encode(point) for point in range(low, high + 1)]


def single_chr_html_encode(char: ByteInput) -> bytes:
    """Return the HTML numeric entity of the first character of ``char``."""
    if (point := code_point(char)) is None:
        return b""
    return b"&#%d;" % point


def html_encode(data: ByteInput) -> bytes:
    """Replace every character of ``data`` by its HTML numeric entity."""
    return b"".join(b"&#%d;" % decode(char) for char in split(data))
