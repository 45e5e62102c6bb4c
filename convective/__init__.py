"""
Convective - Market-microstructure feature engine

Derives numeric features from order books, trades, liquidations,
funding rates and open interest, for consumption by model training.

- FeatureSelector: strict, name-selected order-book features
- compute_all_features: lenient, fixed 15-column multi-source matrix
"""

__version__ = "0.1.0"
__author__ = "Convective Team"

from convective.core.constants import ALL_FEATURE_NAMES
from convective.core.types import FeatureCategory, FeaturesOutput, MarketConfig, OrderbookConfig
from convective.features import (
    FeatureSelector,
    compute_all_features,
    compute_features,
    compute_features_with_config,
    compute_single_orderbook,
)
from convective.market import (
    FundingRate,
    Liquidation,
    MarketSnapshot,
    OpenInterest,
    Orderbook,
    OrderbookLevel,
    Trade,
)

__all__ = [
    "ALL_FEATURE_NAMES",
    "FeatureCategory",
    "FeaturesOutput",
    "MarketConfig",
    "OrderbookConfig",
    "FeatureSelector",
    "compute_all_features",
    "compute_features",
    "compute_features_with_config",
    "compute_single_orderbook",
    "FundingRate",
    "Liquidation",
    "MarketSnapshot",
    "OpenInterest",
    "Orderbook",
    "OrderbookLevel",
    "Trade",
]
