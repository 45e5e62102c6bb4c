"""Core module containing types, configuration, and shared utilities."""

from convective.core.types import (
    FeatureCategory,
    FeaturesOutput,
    MarketConfig,
    OrderbookConfig,
)
from convective.core.config import Settings, configure_logging, get_settings
from convective.core.exceptions import (
    ComputationError,
    ConfigurationError,
    ConvectiveError,
    EmptyOrderbookError,
    FeatureError,
    FeatureNotFoundError,
    InsufficientDepthError,
    InvalidConfigError,
    NoLiquidationsError,
    NoTradesError,
    ValidationError,
    ZeroVolumeError,
)

__all__ = [
    # Types
    "FeatureCategory",
    "FeaturesOutput",
    "MarketConfig",
    "OrderbookConfig",
    # Config
    "Settings",
    "configure_logging",
    "get_settings",
    # Exceptions
    "ComputationError",
    "ConfigurationError",
    "ConvectiveError",
    "EmptyOrderbookError",
    "FeatureError",
    "FeatureNotFoundError",
    "InsufficientDepthError",
    "InvalidConfigError",
    "NoLiquidationsError",
    "NoTradesError",
    "ValidationError",
    "ZeroVolumeError",
]
