"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Email address parsing (deliverability is never checked over DNS)
    email_allow_smtputf8: bool = Field(default=True)
    email_allow_quoted_local: bool = Field(default=False)
    email_globally_deliverable: bool = Field(default=True)
    email_allow_display_name: bool = Field(default=True)

    # Entry-point group scanned for StringConverter providers
    converter_entry_point_group: str = Field(
        default="address_converter.string_converters"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
