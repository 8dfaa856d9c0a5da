"""Pytest configuration and fixtures.

This file sets up the Python path so tests can import from the backend package.
"""

import sys
from pathlib import Path

import pytest

# Add backend directory to Python path for imports
backend_path = Path(__file__).parent / "backend"
sys.path.insert(0, str(backend_path))


@pytest.fixture(autouse=True)
def clear_cached_settings():
    """Drop cached settings and registry so environment overrides apply per test."""
    from app.address_converter.infrastructure.converters.string_converter_registry import (
        get_registry,
    )
    from app.core.config import get_settings

    get_settings.cache_clear()
    get_registry.cache_clear()
    yield
    get_settings.cache_clear()
    get_registry.cache_clear()
