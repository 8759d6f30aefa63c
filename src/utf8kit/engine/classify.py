"""Byte classification shared by the validator and the splitter.

Every byte falls into exactly one class according to its high bits:

| Pattern    | Class          | Sequence length |
|------------|----------------|-----------------|
| `0xxxxxxx` | `ASCII`        | 1               |
| `10xxxxxx` | `CONTINUATION` | 0               |
| `110xxxxx` | `LEAD2`        | 2               |
| `1110xxxx` | `LEAD3`        | 3               |
| `11110xxx` | `LEAD4`        | 4               |
| `11111xxx` | `INVALID`      | 0               |
"""

from enum import Enum


class ByteClass(Enum):
    """Role of a single byte within a UTF-8 stream."""

    ASCII = 1
    LEAD2 = 2
    LEAD3 = 3
    LEAD4 = 4
    CONTINUATION = "continuation"
    INVALID = "invalid"

    @property
    def sequence_length(self) -> int:
        """Number of bytes in a character introduced by this byte (0 if none)."""
        return self.value if isinstance(self.value, int) else 0

    @property
    def is_lead(self) -> bool:
        """True if a character may start at a byte of this class."""
        return self.sequence_length > 0


def _classify_bits(byte: int) -> ByteClass:
    if byte & 0x80 == 0x00:
        return ByteClass.ASCII
    if byte & 0xC0 == 0x80:
        return ByteClass.CONTINUATION
    if byte & 0xE0 == 0xC0:
        return ByteClass.LEAD2
    if byte & 0xF0 == 0xE0:
        return ByteClass.LEAD3
    if byte & 0xF8 == 0xF0:
        return ByteClass.LEAD4
    return ByteClass.INVALID


_TABLE: tuple[ByteClass, ...] = tuple(_classify_bits(b) for b in range(256))


def classify(byte: int) -> ByteClass:
    """Classify a byte by its high bits.

    Args:
        byte: An integer in ``0..255``.

    Returns:
        ByteClass: The class of the byte.

    Raises:
        ValueError: If ``byte`` is outside ``0..255``.
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"Not a byte value: {byte}")
    return _TABLE[byte]
