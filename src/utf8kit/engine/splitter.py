"""Splitter: decompose a byte sequence into encoded characters.

Malformed input is treated as noise. A lead byte whose run is truncated or
interrupted is dropped on its own and scanning resumes at the next byte; stray
continuation bytes and bytes that can never start a character are dropped as
well. Only well-formed runs are ever emitted, so splitting the joined output
of a previous split yields the same sequence again.
"""

import logging
from collections.abc import Iterator

from utf8kit.errors import InvalidLengthError

from .capability import native_codec_support
from .scan import match_at
from .types import ByteInput, as_bytes

logger = logging.getLogger(__name__)


def _scan(raw: bytes) -> Iterator[bytes]:
    pos, end = 0, len(raw)
    while pos < end:
        if width := match_at(raw, pos):
            yield raw[pos : pos + width]
            pos += width
        else:
            pos += 1


def iter_chars(data: ByteInput) -> Iterator[bytes]:
    """Yield the encoded characters of ``data`` in byte order.

    Args:
        data: Any byte sequence; it need not be well-formed.

    Yields:
        bytes: One encoded character (1-4 bytes) at a time.
    """
    raw = as_bytes(data)
    if native_codec_support():
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            pass
        else:
            for char in text:
                yield char.encode("utf-8")
            return
    yield from _scan(raw)


def split(data: ByteInput, size: int = 1) -> list[bytes]:
    """Split ``data`` into its character sequence.

    Args:
        data: Any byte sequence; malformed runs are dropped.
        size: Number of consecutive characters joined into each element.

    Returns:
        list[bytes]: The characters (or runs of up to ``size`` characters) in
        byte order.

    Raises:
        InvalidLengthError: If ``size`` is less than 1.
    """
    if size < 1:
        raise InvalidLengthError("size", size, 1)

    raw = as_bytes(data)
    chars = list(iter_chars(raw))

    if logger.isEnabledFor(logging.DEBUG):
        dropped = len(raw) - sum(len(char) for char in chars)
        if dropped:
            logger.debug("Dropped %d malformed byte(s) out of %d", dropped, len(raw))

    if size == 1:
        return chars
    return [b"".join(chars[i : i + size]) for i in range(0, len(chars), size)]


def clean(data: ByteInput) -> bytes:
    """Return ``data`` with every malformed byte removed."""
    return b"".join(iter_chars(data))
