"""UTF-8 byte-stream engine.

Validation, decomposition into encoded characters, and conversion between an
encoded character and its code point. Everything in ``utf8kit.text`` is built
on the functions exported here.

Dependency rule: do not import from `utf8kit.text` or `utf8kit.entrypoints`.
"""

from .classify import ByteClass, classify
from .codec import (
    MAX_CODE_POINT,
    code_point,
    decode,
    encode,
    from_unicode_style,
    to_unicode_style,
)
from .splitter import clean, iter_chars, split
from .types import ByteInput, as_bytes
from .validator import is_ascii, is_utf8

__all__ = [
    "MAX_CODE_POINT",
    "ByteClass",
    "ByteInput",
    "as_bytes",
    "classify",
    "clean",
    "code_point",
    "decode",
    "encode",
    "from_unicode_style",
    "is_ascii",
    "is_utf8",
    "iter_chars",
    "split",
    "to_unicode_style",
]
