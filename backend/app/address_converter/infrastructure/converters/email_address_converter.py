"""StringConverter implementation for email addresses.

Parsing and rendering are delegated to the EmailAddress value object, which
in turn relies on ``email-validator``. Every failure reaches the caller as an
InvalidFormatError carrying the original input.
"""

from typing import ClassVar, Optional

from app.address_converter.application.exceptions import InvalidFormatError
from app.address_converter.application.interfaces.string_converter import (
    StringConverter,
)
from app.address_converter.domain.value_objects.email_address import (
    EmailAddress,
    EmailAddressParseOptions,
)
from app.core.config import Settings, get_settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def parse_options_from_settings(
    settings: Optional[Settings] = None,
) -> EmailAddressParseOptions:
    """Build validator options from application settings.

    Args:
        settings: Settings to read; the cached settings when omitted.

    Returns:
        EmailAddressParseOptions mirroring the ``email_*`` settings.
    """
    settings = settings or get_settings()
    return EmailAddressParseOptions(
        allow_smtputf8=settings.email_allow_smtputf8,
        allow_quoted_local=settings.email_allow_quoted_local,
        globally_deliverable=settings.email_globally_deliverable,
        allow_display_name=settings.email_allow_display_name,
    )


class EmailAddressStringConverter(StringConverter[EmailAddress]):
    """Converts between email address strings and EmailAddress values.

    ``to_string`` uses ``str(EmailAddress)``, the canonical rendering.
    ``from_string`` rejects blank input itself and hands everything else to
    ``EmailAddress.from_string``.

    The shared instance is available as ``INSTANCE`` and through
    ``provider()``, which is what the converter registry discovers.

    Attributes:
        _options: Fixed validator options, or None to follow the settings.
    """

    MSG_INVALID_EMAIL_ADDRESS: ClassVar[str] = "'{source}' is not a valid email address"

    INSTANCE: ClassVar["EmailAddressStringConverter"]

    def __init__(self, options: Optional[EmailAddressParseOptions] = None) -> None:
        """Initialize the converter.

        Args:
            options: Validator options; when omitted they are read from the
                settings on every parse.
        """
        self._options = options

    @property
    def target_type(self) -> type[EmailAddress]:
        """Return the EmailAddress type."""
        return EmailAddress

    def from_string(self, source: Optional[str]) -> Optional[EmailAddress]:
        """Parse an email address.

        Args:
            source: The address text, or None.

        Returns:
            The parsed EmailAddress, or None if ``source`` is None.

        Raises:
            InvalidFormatError: If ``source`` is blank or not a valid address.
        """
        if source is None:
            return None

        source_string = str(source)
        if not source_string.strip():
            raise InvalidFormatError(
                source_string,
                self.MSG_INVALID_EMAIL_ADDRESS.format(source=source_string),
            )

        options = self._options or parse_options_from_settings()
        try:
            return EmailAddress.from_string(source_string, options)
        except ValueError as e:
            logger.debug(f"Rejected email address {source_string!r}: {e}")
            raise InvalidFormatError(
                source_string,
                self.MSG_INVALID_EMAIL_ADDRESS.format(source=source_string),
            ) from e

    @classmethod
    def provider(cls) -> "EmailAddressStringConverter":
        """Return the shared instance of this converter.

        Used as the entry-point target when the converter registry discovers
        installed converters.
        """
        return cls.INSTANCE


EmailAddressStringConverter.INSTANCE = EmailAddressStringConverter()
