"""Runtime settings for toggle loading."""

from typing import Optional

from pydantic_settings import BaseSettings


class ToggleSettings(BaseSettings):
    """Environment driven settings."""
    TOGGLES_FILE: str = ""
    TOGGLES_LOG_LEVEL: str = "INFO"
    TOGGLES_LOG_JSON: bool = False

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


_settings_cache: Optional[ToggleSettings] = None


def get_settings() -> ToggleSettings:
    """Get cached settings instance."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = ToggleSettings()
    return _settings_cache


def reset_settings() -> None:
    """Drop the cached settings so the environment is read again."""
    global _settings_cache
    _settings_cache = None


__all__ = ["ToggleSettings", "get_settings", "reset_settings"]
