"""String converter registry keyed by target type.

The registry maps value types to the StringConverter that produces them.
Converters are registered explicitly or discovered from installed
distributions through an entry-point group.
"""

from functools import lru_cache
from importlib.metadata import entry_points
from typing import Any, Optional, TypeVar

from app.address_converter.application.exceptions import ConverterNotFoundError
from app.address_converter.application.interfaces.string_converter import (
    StringConverter,
)
from app.core.config import get_settings
from app.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class StringConverterRegistry:
    """Registry that looks up string converters by target type.

    Attributes:
        _converters: Registered converters keyed by their target type.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._converters: dict[type, StringConverter[Any]] = {}

    def register(self, converter: StringConverter[Any]) -> None:
        """Register a converter under its target type.

        A converter already registered for the same type is replaced.

        Args:
            converter: StringConverter implementation to add to the registry.
        """
        target_type = converter.target_type
        previous = self._converters.get(target_type)
        self._converters[target_type] = converter

        if previous is not None and previous is not converter:
            logger.info(
                f"Replaced string converter for {target_type.__qualname__}: "
                f"{type(previous).__name__} -> {type(converter).__name__}"
            )
        else:
            logger.info(f"Registered string converter for {target_type.__qualname__}")

    def unregister(self, target_type: type) -> bool:
        """Remove the converter for a type.

        Args:
            target_type: The type whose converter should be removed.

        Returns:
            True if a converter was removed, False otherwise.
        """
        if self._converters.pop(target_type, None) is None:
            return False
        logger.info(f"Unregistered string converter for {target_type.__qualname__}")
        return True

    def get(self, target_type: type[T]) -> Optional[StringConverter[T]]:
        """Find the converter for a type.

        An exact match wins; otherwise the converter of the nearest base
        class in the method resolution order is returned.

        Args:
            target_type: The type to convert to.

        Returns:
            The matching StringConverter, or None if there is none.
        """
        for candidate in target_type.__mro__:
            converter = self._converters.get(candidate)
            if converter is not None:
                return converter
        return None

    def require(self, target_type: type[T]) -> StringConverter[T]:
        """Find the converter for a type or fail.

        Args:
            target_type: The type to convert to.

        Returns:
            The matching StringConverter.

        Raises:
            ConverterNotFoundError: If no converter handles the type.
        """
        converter = self.get(target_type)
        if converter is None:
            raise ConverterNotFoundError(target_type)
        return converter

    @property
    def registered_types(self) -> list[type]:
        """Get all types that have a registered converter."""
        return list(self._converters)

    def load_entry_points(self, group: Optional[str] = None) -> int:
        """Register the converters published by installed distributions.

        Each entry point must resolve to a zero-argument provider returning
        a StringConverter instance. Providers that fail to load are logged
        and skipped.

        Args:
            group: Entry-point group to scan; the configured group when omitted.

        Returns:
            Number of converters registered.
        """
        group = group or get_settings().converter_entry_point_group
        loaded = 0

        for entry_point in entry_points(group=group):
            try:
                provider = entry_point.load()
                converter = provider()
            except Exception as e:
                logger.error(f"Error loading string converter {entry_point.name}: {e}")
                continue

            if not isinstance(converter, StringConverter):
                logger.error(
                    f"Entry point {entry_point.name} did not provide a StringConverter: "
                    f"{type(converter).__name__}"
                )
                continue

            self.register(converter)
            loaded += 1

        logger.debug(f"Loaded {loaded} string converter(s) from {group}")
        return loaded


def create_default_registry(discover: bool = True) -> StringConverterRegistry:
    """Create a registry with the built-in string converters.

    Args:
        discover: Whether to also load converters from installed entry points.

    Returns:
        Configured StringConverterRegistry instance.
    """
    from app.address_converter.infrastructure.converters.email_address_converter import (
        EmailAddressStringConverter,
    )

    registry = StringConverterRegistry()
    registry.register(EmailAddressStringConverter.provider())

    if discover:
        registry.load_entry_points()

    return registry


@lru_cache
def get_registry() -> StringConverterRegistry:
    """Get the cached process-wide converter registry."""
    return create_default_registry()
