"""Random strings of letters and digits from the Basic Multilingual Plane.

The character table (every code point from U+0030 to U+FFFF that is a number
or an upper- or lower-case letter) is built on first use, cached for the life
of the process and never modified afterwards.
"""

import functools
import logging
import random

import regex

from utf8kit.config import get_hash_length_default
from utf8kit.engine import encode
from utf8kit.errors import InvalidLengthError

logger = logging.getLogger(__name__)

HASH_CHAR_PATTERN = regex.compile(r"[\p{N}\p{Lu}\p{Ll}]")
TABLE_FIRST = 0x30
TABLE_LAST = 0xFFFF


@functools.cache
def hash_table() -> tuple[bytes, ...]:
    """Return the encoded characters random hashes are drawn from."""
    table = tuple(
        encode(point)
        for point in range(TABLE_FIRST, TABLE_LAST + 1)
        if HASH_CHAR_PATTERN.fullmatch(chr(point))
    )
    logger.debug("Built random hash table with %d characters", len(table))
    return table


def random_hash(length: int | None = None) -> bytes:
    """Return ``length`` random characters drawn from `hash_table`.

    Args:
        length: Number of characters. None uses the `UTF8KIT_HASH_LENGTH`
            setting (8 by default).

    Raises:
        InvalidLengthError: If ``length`` is negative.
    """
    if length is None:
        length = get_hash_length_default()
    if length < 0:
        raise InvalidLengthError("length", length, 0)
    return b"".join(random.choices(hash_table(), k=length))
