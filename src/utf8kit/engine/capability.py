"""Process-wide capability cache.

The engine can hand well-formed input to the interpreter's built-in UTF-8
codec instead of walking it byte by byte. The built-in codec is stricter than
the engine (it rejects overlong forms, surrogates and code points above
U+10FFFF), so it is only ever used as a fast path: whatever it accepts, the
engine accepts with exactly the same character boundaries, and whatever it
rejects is re-examined by the byte automaton.

`native_codec_support` is computed once per process and frozen. Concurrent
first calls may compute it more than once; the result is deterministic so
this is harmless. Tests may reset it with ``native_codec_support.cache_clear()``.
"""

import functools
import logging

logger = logging.getLogger(__name__)

# (encoded bytes, decodes strictly?)
_SAMPLES: tuple[tuple[bytes, bool], ...] = (
    (b"Hello", True),
    (b"\xc3\xa9", True),
    (b"\xe2\x82\xac", True),
    (b"\xf0\x9f\x98\x80", True),
    (b"\xc3\x28", False),
    (b"\x80", False),
    (b"\xff", False),
)


def _agrees(encoded: bytes, expect_ok: bool) -> bool:
    try:
        text = encoded.decode("utf-8")
    except UnicodeDecodeError:
        return not expect_ok
    return expect_ok and b"".join(ch.encode("utf-8") for ch in text) == encoded


@functools.cache
def native_codec_support() -> bool:
    """Return True if the built-in strict UTF-8 codec may be used as a fast path."""
    supported = all(_agrees(encoded, ok) for encoded, ok in _SAMPLES)
    logger.debug("Native UTF-8 codec fast path: %s", "ON" if supported else "OFF")
    return supported
