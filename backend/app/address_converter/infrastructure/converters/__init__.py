# String converters and the registry that looks them up by type

from .email_address_converter import EmailAddressStringConverter
from .string_converter_registry import (
    StringConverterRegistry,
    create_default_registry,
    get_registry,
)

__all__ = [
    "EmailAddressStringConverter",
    "StringConverterRegistry",
    "create_default_registry",
    "get_registry",
]
