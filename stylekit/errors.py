"""Errors raised while parsing and extracting property values."""

__all__ = ["InvalidPropertyValue"]


class InvalidPropertyValue(ValueError):
    """A property value could not be parsed or converted to the requested type.

    The message carries the re-rendered offending text; there are no sub-kinds.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
