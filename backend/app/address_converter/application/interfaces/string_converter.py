"""String converter interface for turning text into typed values and back."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class StringConverter(ABC, Generic[T]):
    """Abstract base class for string converter implementations.

    A converter is stateless: it turns the string representation of a value
    into an instance of ``target_type`` and renders such an instance back to
    a string. ``None`` passes through both directions unchanged.
    """

    @property
    @abstractmethod
    def target_type(self) -> type[T]:
        """Return the type produced by this converter."""
        ...

    @abstractmethod
    def from_string(self, source: Optional[str]) -> Optional[T]:
        """Convert the given string into a value.

        Args:
            source: The string representation, or None.

        Returns:
            The converted value, or None if ``source`` is None.

        Raises:
            InvalidFormatError: If ``source`` cannot be converted.
        """
        ...

    def to_string(self, value: Optional[T]) -> Optional[str]:
        """Convert the given value into its string representation.

        Args:
            value: The value to render, or None.

        Returns:
            The string representation, or None if ``value`` is None.
        """
        if value is None:
            return None
        return str(value)
