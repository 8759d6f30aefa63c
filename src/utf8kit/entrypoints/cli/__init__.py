"""The ``utf8kit`` command-line interface."""
