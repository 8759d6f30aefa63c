"""Length and width measurements."""

from utf8kit.engine import ByteInput, split


def length(data: ByteInput) -> int:
    """Return the number of well-formed characters in ``data``."""
    return len(split(data))


def fits_inside(data: ByteInput, box_size: int) -> bool:
    """Return True if ``data`` has at most ``box_size`` characters."""
    return length(data) <= box_size


def chr_size_list(data: ByteInput) -> list[int]:
    """Return the byte width of each character of ``data``."""
    return [len(char) for char in split(data)]


def max_chr_width(data: ByteInput) -> int:
    """Return the byte width of the widest character (0 for empty input)."""
    return max(chr_size_list(data), default=0)
