"""Domain value objects for the address converter.

- EmailAddress: Parsed, normalized email addresses
- EmailAddressParseOptions: Validator switches for parsing
"""

from app.address_converter.domain.value_objects.email_address import (
    EmailAddress,
    EmailAddressParseOptions,
)

__all__ = ["EmailAddress", "EmailAddressParseOptions"]
