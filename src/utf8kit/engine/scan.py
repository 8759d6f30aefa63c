"""The byte automaton shared by the validator and the splitter.

Starting in ExpectLead, a lead byte of length N moves the automaton through
ExpectCont1..ExpectCont(N-1); each continuation byte advances it and the last
one returns it to ExpectLead with one complete character consumed. What
happens on a disallowed transition is up to the caller: the validator stops,
the splitter drops the lead byte and resumes at the next one.
"""

from .classify import ByteClass, classify


def match_at(data: bytes, pos: int) -> int:
    """Return the length of the well-formed character starting at ``pos``.

    Args:
        data: The byte sequence being scanned.
        pos: Index of the byte expected to be a lead byte.

    Returns:
        int: 1-4 if a complete character starts at ``pos``; 0 if the byte at
        ``pos`` cannot start one, or its run is truncated or interrupted.
    """
    width = classify(data[pos]).sequence_length
    if not width or pos + width > len(data):
        return 0
    for offset in range(1, width):
        if classify(data[pos + offset]) is not ByteClass.CONTINUATION:
            return 0
    return width
