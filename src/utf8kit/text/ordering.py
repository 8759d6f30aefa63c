"""Reordering and frequency operations over characters."""

import random
from collections import Counter
from collections.abc import Iterable

from utf8kit.engine import ByteInput, as_bytes, decode, encode, split


def reverse(data: ByteInput) -> bytes:
    """Return the characters of ``data`` in reverse order."""
    return b"".join(reversed(split(data)))


def shuffle(data: ByteInput) -> bytes:
    """Return the characters of ``data`` in a random order.

    Uses the `random` module; not suitable for anything security related.
    """
    chars = split(data)
    random.shuffle(chars)
    return b"".join(chars)


def sort(data: ByteInput, unique: bool = False, desc: bool = False) -> bytes:
    """Sort the characters of ``data`` by code point.

    Args:
        data: The byte sequence to sort.
        unique: Keep only the first occurrence of each character.
        desc: Sort in descending order.

    Returns:
        bytes: The sorted characters, re-encoded and joined.
    """
    points = [point for char in split(data) if (point := decode(char)) is not None]
    if unique:
        points = list(dict.fromkeys(points))
    points.sort(reverse=desc)
    return b"".join(encode(point) for point in points)


def count_chars(data: ByteInput) -> dict[bytes, int]:
    """Count occurrences of each character.

    Keys are ordered by code point. An overlong form is a key of its own and
    sorts right after the minimal encoding of the same code point.
    """
    counts = Counter(split(data))
    return {char: counts[char] for char in sorted(counts, key=lambda c: (decode(c), c))}


def _joined(data: ByteInput | Iterable[ByteInput]) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview, str)):
        return as_bytes(data)
    return b"".join(as_bytes(item) for item in data)


def max_char(data: ByteInput | Iterable[ByteInput]) -> bytes:
    """Return the character with the highest code point (``b""`` if none)."""
    chars = split(_joined(data))
    return max(chars, key=decode, default=b"")


def min_char(data: ByteInput | Iterable[ByteInput]) -> bytes:
    """Return the character with the lowest code point (``b""`` if none)."""
    chars = split(_joined(data))
    return min(chars, key=decode, default=b"")
