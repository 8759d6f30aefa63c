"""Byte-order mark detection and insertion."""

from pathlib import Path

from utf8kit.engine import ByteInput, as_bytes

BOM = b"\xef\xbb\xbf"


def is_bom(chunk: ByteInput) -> bool:
    """Return True if ``chunk`` is exactly the UTF-8 byte-order mark."""
    return as_bytes(chunk) == BOM


def string_has_bom(data: ByteInput) -> bool:
    """Return True if ``data`` starts with the byte-order mark."""
    return is_bom(as_bytes(data)[: len(BOM)])


def file_has_bom(path: str | Path) -> bool:
    """Return True if the file at ``path`` starts with the byte-order mark.

    Only the first three bytes are read.

    Raises:
        OSError: If the file cannot be opened.
    """
    with Path(path).open("rb") as handle:
        return is_bom(handle.read(len(BOM)))


def add_bom(data: ByteInput) -> bytes:
    """Prefix ``data`` with the byte-order mark unless it already has one."""
    raw = as_bytes(data)
    return raw if string_has_bom(raw) else BOM + raw
