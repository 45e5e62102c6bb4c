"""
Configuration management for Convective.

Loads engine defaults from environment variables (prefix CONVECTIVE_)
or a .env file. Uses pydantic for validation.

Priority order:
1. Environment variables
2. .env file
3. Built-in defaults (see constants.py)
"""

import logging
from functools import lru_cache

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from convective.core.constants import DEFAULT_BPS, DEFAULT_DEPTH
from convective.core.exceptions import ConfigurationError
from convective.core.types import MarketConfig, OrderbookConfig


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    """
    Engine settings loaded from the environment.

    CONVECTIVE_DEFAULT_DEPTH, CONVECTIVE_DEFAULT_BPS and
    CONVECTIVE_LOG_LEVEL override the built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONVECTIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_depth: int = Field(
        default=DEFAULT_DEPTH,
        gt=0,
        description="Book levels per side used by depth-aware features",
    )
    default_bps: float = Field(
        default=DEFAULT_BPS,
        ge=0.0,
        description="Fractional price tolerance for band features",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Ensure log level is uppercase."""
        return v.upper()

    def orderbook_config(self) -> OrderbookConfig:
        """Order-book feature configuration built from these settings."""
        return OrderbookConfig(depth=self.default_depth, bps=self.default_bps)

    def market_config(self) -> MarketConfig:
        """Market feature configuration built from these settings."""
        return MarketConfig(depth=self.default_depth, bps=self.default_bps)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached engine settings.

    Raises:
        ConfigurationError: If an environment override fails validation
    """
    try:
        return Settings()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid Convective settings: {e}") from e


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for applications embedding the engine.

    Args:
        level: Logging level name (defaults to Settings.log_level)
    """
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
