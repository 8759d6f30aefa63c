"""Configuration utilities for UTF8KIT.

This module centralizes default values and the small helpers that read
optional overrides from the environment.
"""

import os

from utf8kit.errors import InvalidSettingError

DEFAULT_CHUNK_LENGTH = 76
DEFAULT_CHUNK_END = b"\r\n"
DEFAULT_HASH_LENGTH = 8
SLUG_FALLBACK_LENGTH = 32

TRANSLITERATE_ENV = "UTF8KIT_TRANSLITERATE"  # pragma: no mutate
HASH_LENGTH_ENV = "UTF8KIT_HASH_LENGTH"  # pragma: no mutate

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def get_transliterate_default() -> bool:
    """Get the default transliteration setting for slugs.

    Returns:
        The boolean value of `UTF8KIT_TRANSLITERATE`, or False when unset.

    Raises:
        InvalidSettingError: If the variable holds an unrecognized value.
    """
    if not (raw := os.environ.get(TRANSLITERATE_ENV, "").strip()):
        return False
    value = raw.lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidSettingError(TRANSLITERATE_ENV, raw)


def get_hash_length_default() -> int:
    """Get the default random hash length.

    Returns:
        The value of `UTF8KIT_HASH_LENGTH`, or `DEFAULT_HASH_LENGTH` when unset.

    Raises:
        InvalidSettingError: If the variable is not a non-negative integer
            written in ASCII digits.
    """
    if not (raw := os.environ.get(HASH_LENGTH_ENV, "").strip()):
        return DEFAULT_HASH_LENGTH
    if not (raw.isascii() and raw.isdecimal()):
        raise InvalidSettingError(HASH_LENGTH_ENV, raw)
    return int(raw)
