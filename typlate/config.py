"""Library configuration using pydantic-settings.

Every setting can be overridden with a ``TYPLATE_`` prefixed environment
variable or a ``.env`` file in the working directory.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        env_prefix='TYPLATE_',
        case_sensitive=False,
        extra='ignore',
    )

    log_level: str = Field(
        default='WARNING',
        description='Level of the "typlate" logger: DEBUG, INFO, WARNING, ERROR.',
    )
    trace_events: bool = Field(
        default=False,
        description='Emit structured events when templates are parsed or rejected.',
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""
    get_settings.cache_clear()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured level to the ``typlate`` logger.

    Handlers are left to the application.

    Returns:
        The ``typlate`` logger.
    """
    settings = settings or get_settings()
    logger = logging.getLogger('typlate')
    logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))
    return logger
