# Domain layer - value objects only, no framework dependencies

from app.address_converter.domain.value_objects import (
    EmailAddress,
    EmailAddressParseOptions,
)

__all__ = [
    "EmailAddress",
    "EmailAddressParseOptions",
]
