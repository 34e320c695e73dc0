"""
Configuration settings for the tyria client.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TyriaSettings(BaseSettings):
    """
    Configuration for the API client.

    Settings are loaded from environment variables with TYRIA_ prefix.
    Example: TYRIA_LANG=de, TYRIA_TOKEN=<api key>.
    """

    model_config = SettingsConfigDict(
        env_prefix="TYRIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default="https://api.guildwars2.com",
        description="API origin"
    )

    lang: str = Field(
        default="en",
        description="Locale sent as Accept-Language on every request"
    )

    token: Optional[str] = Field(
        default=None,
        description="API key used by authenticated endpoints"
    )

    timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds"
    )


# Programmatic override installed by configure_settings()
_settings: Optional[TyriaSettings] = None


@lru_cache
def get_settings() -> TyriaSettings:
    """
    Get the settings singleton.

    Uses lru_cache to ensure settings are only loaded once. Returns the
    instance installed by ``configure_settings`` if there is one.
    """
    if _settings is not None:
        return _settings
    return TyriaSettings()


def configure_settings(
    base_url: Optional[str] = None,
    lang: Optional[str] = None,
    token: Optional[str] = None,
    **kwargs,
) -> TyriaSettings:
    """
    Configure settings programmatically.

    This allows overriding environment variables for testing
    or when settings come from a different source.

    Args:
        base_url: API origin
        lang: Default locale
        token: API key
        **kwargs: Additional settings

    Returns:
        Configured TyriaSettings instance
    """
    global _settings

    # Build settings dict, filtering None values
    settings_dict = {
        k: v for k, v in {
            "base_url": base_url,
            "lang": lang,
            "token": token,
            **kwargs,
        }.items() if v is not None
    }

    _settings = TyriaSettings(**settings_dict)
    get_settings.cache_clear()

    return _settings


def reset_settings() -> None:
    """Reset settings to default (reload from environment)."""
    global _settings
    _settings = None
    get_settings.cache_clear()
