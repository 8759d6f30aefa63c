"""Substring extraction, position search and chunking by character."""

from utf8kit.config import DEFAULT_CHUNK_END, DEFAULT_CHUNK_LENGTH
from utf8kit.engine import ByteInput, clean, encode, split


def _slice_bounds(count: int, start: int, length: int | None) -> tuple[int, int]:
    # Negative start counts from the end; negative length stops short of it.
    if start < 0:
        start = max(count + start, 0)
    start = min(start, count)
    if length is None:
        end = count
    elif length < 0:
        end = max(count + length, start)
    else:
        end = min(start + length, count)
    return start, end


def substr(data: ByteInput, start: int = 0, length: int | None = None) -> bytes:
    """Return up to ``length`` characters of ``data`` starting at ``start``.

    Offsets count characters, not bytes. A start beyond the end yields
    ``b""`` and a length beyond the remaining characters is clamped.

    Args:
        data: The source byte sequence.
        start: First character index; negative values count from the end.
        length: Number of characters to take. None takes the rest, a negative
            value stops that many characters before the end.

    Returns:
        bytes: The selected characters, re-joined.
    """
    chars = split(data)
    first, last = _slice_bounds(len(chars), start, length)
    return b"".join(chars[first:last])


def access(data: ByteInput, pos: int) -> bytes:
    """Return the character at index ``pos`` (``b""`` if there is none)."""
    return substr(data, pos, 1)


def chunk_split(
    data: ByteInput,
    length: int = DEFAULT_CHUNK_LENGTH,
    end: bytes = DEFAULT_CHUNK_END,
) -> bytes:
    """Join runs of ``length`` characters with ``end`` between them."""
    return end.join(split(data, length))


def strpos(
    haystack: ByteInput, needle: ByteInput | int, offset: int = 0
) -> int | None:
    """Find the character index of the first occurrence of ``needle``.

    Args:
        haystack: The byte sequence to search.
        needle: A byte sequence, or a non-negative code point.
        offset: Character index to start searching from (negative means 0).

    Returns:
        int | None: Character index of the match within ``haystack``, or None
        when there is no match or the needle holds no character.
    """
    needle_bytes = encode(needle) if isinstance(needle, int) else clean(needle)
    if not needle_bytes:
        return None

    offset = max(offset, 0)
    tail = b"".join(split(haystack)[offset:])
    # Both sides are well-formed, so a match always starts on a character.
    if (pos := tail.find(needle_bytes)) == -1:
        return None
    return offset + len(split(tail[:pos]))


def substr_count(
    haystack: ByteInput,
    needle: ByteInput,
    offset: int = 0,
    length: int | None = None,
) -> int:
    """Count non-overlapping occurrences of ``needle`` in a character range.

    The range is the one `substr` selects for ``offset`` and ``length``.
    An empty needle counts as 0 occurrences.
    """
    needle_bytes = clean(needle)
    if not needle_bytes:
        return 0
    return substr(haystack, offset, length).count(needle_bytes)
