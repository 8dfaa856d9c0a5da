"""Application-layer exceptions for converter error handling.

These exceptions are what callers of a StringConverter or the converter
registry see. Errors raised by third-party parsers are chained as the
cause rather than surfaced directly.
"""


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidFormatError(ApplicationError, ValueError):
    """Raised when a string cannot be converted to the requested value.

    Also a ValueError, so callers that treat conversion failures as bad
    values keep working.
    """

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message=message, code="INVALID_FORMAT")
        self.source = source


class ConverterNotFoundError(ApplicationError):
    """Raised when no StringConverter is registered for a type."""

    def __init__(self, target_type: type) -> None:
        super().__init__(
            message=f"No string converter registered for type '{target_type.__qualname__}'",
            code="CONVERTER_NOT_FOUND"
        )
        self.target_type = target_type
