"""Error definitions for UTF8KIT.

Malformed input is never an error in this package: it is dropped, or reported
through a boolean or empty result. The exceptions below are raised only for
caller mistakes such as nonsensical sizes or unusable settings.
"""


class Utf8KitError(Exception):
    """Base class for UTF8KIT errors."""


class InvalidLengthError(Utf8KitError, ValueError):
    """Raised when a size or length argument is out of its allowed range."""

    def __init__(self, name: str, value: int, minimum: int) -> None:
        super().__init__(f"{name} must be >= {minimum}, got {value}.")
        self.name = name
        self.value = value
        self.minimum = minimum


class InvalidSettingError(Utf8KitError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, variable: str, value: str) -> None:
        super().__init__(f"Invalid value for {variable}: {value!r}.")
        self.variable = variable
        self.value = value
