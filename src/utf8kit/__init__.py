"""UTF8KIT

A UTF-8 text-handling toolkit. It validates and decomposes byte sequences
into encoded characters, converts between encoded characters and code points,
and builds multi-byte-safe string operations on top of that engine.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
