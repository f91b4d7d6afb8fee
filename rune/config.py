"""Library configuration via environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from rune.checkers.models import DefaultRules


class Settings(BaseSettings):
    """Settings loaded from RUNE_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "warning"

    # Process-wide default rules (unset = not injected)
    DEFAULT_REQUIRED: Optional[bool] = None
    DEFAULT_DISALLOW_UNDEFINED: Optional[bool] = None
    DEFAULT_DISALLOW_NULL: Optional[bool] = None
    DEFAULT_DISALLOW_NOKEY: Optional[bool] = None
    DEFAULT_DISALLOW_UNDEFINED_KEYS: Optional[bool] = None

    model_config = SettingsConfigDict(
        env_prefix="RUNE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def default_rules(self) -> DefaultRules:
        """Default rules configured through the environment."""
        return DefaultRules.model_validate({
            "existence": {
                "required": self.DEFAULT_REQUIRED,
                "disallow_undefined": self.DEFAULT_DISALLOW_UNDEFINED,
                "disallow_null": self.DEFAULT_DISALLOW_NULL,
                "disallow_nokey": self.DEFAULT_DISALLOW_NOKEY,
            },
            "object": {
                "disallow_undefined_keys": self.DEFAULT_DISALLOW_UNDEFINED_KEYS,
            },
        })


@lru_cache
def get_settings() -> Settings:
    return Settings()
