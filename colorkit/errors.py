"""Exceptions raised by colorkit."""


class ColorkitError(Exception):
    """Base class for every error raised by this package."""


class RangeError(ColorkitError, ValueError):
    """A numeric argument lies outside the domain of its type."""


class FormatError(ColorkitError, ValueError):
    """A string does not match any recognized color or angle syntax."""


class NameNotFoundError(ColorkitError, LookupError):
    """A bare identifier is not a known color name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No color found for the name given: {name!r}")
        self.name = name
