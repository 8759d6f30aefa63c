"""URL slug generation.

A slug keeps letters and decimal digits of any script plus ``-`` and ``_``;
every other run of characters becomes a single hyphen. With transliteration
enabled, characters are first folded to ASCII where a compatibility
decomposition exists (``é`` -> ``e``); what cannot be folded is dropped.

When nothing meaningful survives (the input was all punctuation, all
malformed bytes, or transliteration removed everything) a random hex token is
returned instead, so the result is never empty.
"""

import logging
import secrets
import unicodedata

import regex

from utf8kit.config import SLUG_FALLBACK_LENGTH, get_transliterate_default
from utf8kit.engine import ByteInput, clean

from .slicing import substr

logger = logging.getLogger(__name__)

SEPARATOR_PATTERN = regex.compile(r"[^\p{L}\p{Nd}_-]+")


def to_ascii(text: str) -> str:
    """Fold ``text`` to ASCII, dropping what has no ASCII decomposition."""
    decomposed = unicodedata.normalize("NFKD", text)
    return decomposed.encode("ascii", "ignore").decode("ascii")


def _fallback_token(length: int) -> bytes:
    return secrets.token_hex((length + 1) // 2)[:length].encode("ascii")


def url_slug(
    data: ByteInput,
    max_length: int | None = None,
    transliterate: bool | None = None,
) -> bytes:
    """Build a URL slug from ``data``.

    Args:
        data: Source text; malformed bytes are dropped first.
        max_length: Maximum number of characters to keep. None or a value
            below 1 means no limit.
        transliterate: Fold to ASCII before building the slug. None uses the
            `UTF8KIT_TRANSLITERATE` setting.

    Returns:
        bytes: A non-empty slug that neither starts nor ends with ``-``/``_``.
    """
    if transliterate is None:
        transliterate = get_transliterate_default()

    # Bytes the strict codec refuses come back as lone surrogates, which are
    # not letters and are therefore replaced below.
    text = clean(data).decode("utf-8", "surrogateescape").lower()
    if transliterate:
        text = to_ascii(text)
    slug = SEPARATOR_PATTERN.sub("-", text).encode("utf-8")

    limited = max_length is not None and max_length > 0
    if limited:
        slug = substr(slug, 0, max_length)
    slug = slug.strip(b"-_")

    if not slug:
        length = max_length if limited else SLUG_FALLBACK_LENGTH
        logger.debug("Slug is empty, using a %d character fallback token", length)
        slug = _fallback_token(length)
    return slug


def word_count(data: ByteInput) -> int:
    """Return the number of hyphen-separated segments in the slug of ``data``."""
    return len(url_slug(data).split(b"-"))
