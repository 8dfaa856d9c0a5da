"""EmailAddress value object for parsed email addresses.

Parsing, including the ``Display Name <local@domain>`` form, is delegated to
``email-validator``. Display names are rendered with the quoting and RFC 2047
encoding rules of the standard library ``email`` package.
"""

import re
from dataclasses import dataclass
from email.charset import Charset
from email.errors import HeaderParseError
from email.header import decode_header, make_header
from email.utils import quote
from typing import Optional, Self

from email_validator import validate_email

# RFC 5322 specials that force a display name into a quoted-string,
# the same set email.utils.formataddr uses
_SPECIALS_PATTERN = re.compile(r'[][\\()<>@,:;".]')


@dataclass(frozen=True)
class EmailAddressParseOptions:
    """Options forwarded to the address validator.

    Attributes:
        allow_smtputf8: Accept internationalized (non-ASCII) local parts.
        allow_quoted_local: Accept quoted-string local parts.
        globally_deliverable: Require a domain that could exist on the internet.
        allow_display_name: Accept the ``Name <local@domain>`` form.
    """

    allow_smtputf8: bool = True
    allow_quoted_local: bool = False
    globally_deliverable: bool = True
    allow_display_name: bool = True


@dataclass(frozen=True)
class EmailAddress:
    """Immutable value object representing a parsed email address.

    Attributes:
        local_part: The part before the ``@`` sign.
        domain: The normalized domain after the ``@`` sign.
        display_name: Optional human-readable name (``Jane Doe <jane@...>``).
    """

    local_part: str
    domain: str
    display_name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate that both address halves are present."""
        if not self.local_part or not self.domain:
            raise ValueError(
                f"Email address requires a local part and a domain: "
                f"{self.local_part!r}@{self.domain!r}"
            )

    @property
    def address(self) -> str:
        """The bare ``local@domain`` form without display name."""
        return f"{self.local_part}@{self.domain}"

    @classmethod
    def from_string(
        cls, value: str, options: Optional[EmailAddressParseOptions] = None
    ) -> Self:
        """Parse an email address from its string representation.

        Accepts a bare addr-spec (``jane@example.com``) or a name-addr
        (``Jane Doe <jane@example.com>``). RFC 2047 encoded display names
        are decoded.

        Args:
            value: The address text; surrounding whitespace is ignored.
            options: Validator options; library defaults when omitted.

        Returns:
            A new EmailAddress with a normalized domain.

        Raises:
            EmailNotValidError: If the validator rejects the address.
        """
        options = options or EmailAddressParseOptions()

        result = validate_email(
            value.strip(),
            allow_display_name=options.allow_display_name,
            allow_smtputf8=options.allow_smtputf8,
            allow_quoted_local=options.allow_quoted_local,
            globally_deliverable=options.globally_deliverable,
            check_deliverability=False,
        )

        return cls(
            local_part=result.local_part,
            domain=result.domain,
            display_name=_decode_display_name(result.display_name or ""),
        )

    def __str__(self) -> str:
        """Render the canonical string form of the address."""
        if not self.display_name:
            return self.address

        # formataddr refuses non-ASCII addr-specs, which SMTPUTF8 addresses are
        name = self.display_name
        if not name.isascii():
            name = Charset("utf-8").header_encode(name)
        elif _SPECIALS_PATTERN.search(name):
            name = f'"{quote(name)}"'
        return f"{name} <{self.address}>"


def _decode_display_name(raw: str) -> Optional[str]:
    """Decode RFC 2047 encoded words in a display name."""
    name = raw.strip()
    if not name:
        return None
    try:
        decoded = str(make_header(decode_header(name)))
    except (HeaderParseError, LookupError, UnicodeDecodeError):
        # Malformed encoded words are kept as written
        return name
    return decoded.strip() or None


__all__ = ["EmailAddress", "EmailAddressParseOptions"]
