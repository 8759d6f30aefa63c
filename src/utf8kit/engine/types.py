"""Input types accepted by the engine."""

type ByteInput = bytes | bytearray | memoryview | str


def as_bytes(data: ByteInput) -> bytes:
    """Return ``data`` as an immutable ``bytes`` object.

    Text is encoded as UTF-8 with the ``surrogateescape`` handler, so a string
    produced by ``surrogateescape`` decoding maps back to its original bytes,
    malformed ones included. A string holding any other lone surrogate (as
    found in JSON with unpaired ``\\ud800`` escapes) is encoded with
    ``surrogatepass`` instead, which turns each surrogate into its 3-byte
    form; the engine treats those as characters.

    Args:
        data: A byte sequence or a string.

    Returns:
        bytes: The byte representation of ``data``.
    """
    if isinstance(data, str):
        try:
            return data.encode("utf-8", "surrogateescape")
        except UnicodeEncodeError:
            return data.encode("utf-8", "surrogatepass")
    return bytes(data)
