"""Per-character transforms."""

from collections.abc import Callable
from typing import TypeVar

from utf8kit.engine import ByteInput, split

T = TypeVar("T")


def chr_map(data: ByteInput, transform: Callable[[bytes], T]) -> list[T]:
    """Apply ``transform`` to every character of ``data``.

    Args:
        data: The byte sequence to walk.
        transform: Called once per encoded character, in order.

    Returns:
        list[T]: The transformed values.
    """
    return [transform(char) for char in split(data)]
