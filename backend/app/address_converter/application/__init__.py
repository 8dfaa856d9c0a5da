# Application layer - converter ports and exceptions

from app.address_converter.application.exceptions import (
    ApplicationError,
    ConverterNotFoundError,
    InvalidFormatError,
)
from app.address_converter.application.interfaces import StringConverter

__all__ = [
    "ApplicationError",
    "ConverterNotFoundError",
    "InvalidFormatError",
    "StringConverter",
]
