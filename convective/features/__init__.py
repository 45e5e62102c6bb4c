"""
Feature engineering module for Convective.

Computes scalar market-microstructure features from order books, trades,
liquidations, funding rates and open interest.
"""

from convective.features.aggregator import MarketFeatureAggregator, compute_all_features
from convective.features.base import Feature, MarketFeature, OrderbookFeature
from convective.features.composite import PriceImpactFeature, TradeFlowToxicityFeature
from convective.features.compute import (
    compute_features,
    compute_features_with_config,
    compute_single_orderbook,
)
from convective.features.funding import FundingRateFeature, OIChangeFeature
from convective.features.liquidations import (
    LiquidationImbalanceFeature,
    LiquidationPressureFeature,
)
from convective.features.orderbook import (
    ImbalanceFeature,
    MicropriceFeature,
    MidpriceFeature,
    SpreadFeature,
    TAVFeature,
    VWAPFeature,
    WeightedMidpriceFeature,
)
from convective.features.registry import (
    FeatureRegistries,
    FeatureRegistry,
    build_default_registries,
    get_default_registries,
)
from convective.features.selector import FeatureSelector
from convective.features.trades import TradeDirectionImbalanceFeature, TradeIntensityFeature

__all__ = [
    # Contract
    "Feature",
    "MarketFeature",
    "OrderbookFeature",
    # Order book
    "ImbalanceFeature",
    "MicropriceFeature",
    "MidpriceFeature",
    "SpreadFeature",
    "TAVFeature",
    "VWAPFeature",
    "WeightedMidpriceFeature",
    # Trades / liquidations
    "TradeDirectionImbalanceFeature",
    "TradeIntensityFeature",
    "LiquidationImbalanceFeature",
    "LiquidationPressureFeature",
    # Funding / OI / composite
    "FundingRateFeature",
    "OIChangeFeature",
    "PriceImpactFeature",
    "TradeFlowToxicityFeature",
    # Selection and registries
    "FeatureSelector",
    "FeatureRegistries",
    "FeatureRegistry",
    "build_default_registries",
    "get_default_registries",
    # Computation
    "MarketFeatureAggregator",
    "compute_all_features",
    "compute_features",
    "compute_features_with_config",
    "compute_single_orderbook",
]
