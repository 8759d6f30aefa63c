"""Validator: whole-sequence well-formedness check.

Unlike the splitter, the validator has no notion of partial success. A single
malformed byte anywhere makes the whole sequence invalid.
"""

from .capability import native_codec_support
from .scan import match_at
from .types import ByteInput, as_bytes


def _well_formed(raw: bytes) -> bool:
    pos, end = 0, len(raw)
    while pos < end:
        if not (width := match_at(raw, pos)):
            return False
        pos += width
    return True


def is_utf8(data: ByteInput) -> bool:
    """Return True if ``data`` decomposes entirely into encoded characters.

    Overlong forms, surrogate code points and 4-byte forms above U+10FFFF are
    accepted; only the byte layout is checked.

    Args:
        data: The byte sequence to validate.

    Returns:
        bool: True if every byte belongs to a well-formed character.
    """
    raw = as_bytes(data)
    if native_codec_support():
        try:
            raw.decode("utf-8")
        except UnicodeDecodeError:
            pass  # stricter than the engine; let the automaton decide
        else:
            return True
    return _well_formed(raw)


def is_ascii(data: ByteInput) -> bool:
    """Return True if no byte of ``data`` has its high bit set."""
    return as_bytes(data).isascii()
