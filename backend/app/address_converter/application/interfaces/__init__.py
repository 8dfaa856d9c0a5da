# Ports for string conversion (StringConverter)

from .string_converter import StringConverter

__all__ = [
    "StringConverter",
]
