"""
Multi-source feature aggregator.

Computes the canonical 15-column feature vector for each MarketSnapshot,
combining order book, trades, liquidations, funding rate and open
interest.

Error policy is LENIENT: a missing source or a failing feature yields
0.0 for the affected columns. The aggregator never raises for a
well-formed snapshot sequence. Column positions are a fixed contract
(see ALL_FEATURE_NAMES).
"""

import logging
from collections.abc import Sequence
from typing import Any

import pandas as pd

from convective.core.config import get_settings
from convective.core.constants import ALL_FEATURE_NAMES, ORDERBOOK_FEATURE_NAMES
from convective.core.exceptions import FeatureError
from convective.core.types import MarketConfig, OrderbookConfig
from convective.features.base import Feature
from convective.features.composite import PriceImpactFeature, TradeFlowToxicityFeature
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
from convective.features.trades import TradeDirectionImbalanceFeature, TradeIntensityFeature
from convective.market.types import MarketSnapshot


logger = logging.getLogger(__name__)


class MarketFeatureAggregator:
    """
    Aggregates features from all data sources into fixed-order rows.

    Coordinates feature computation from:
    - Order book (columns 0-6)
    - Trades (7-8)
    - Liquidations (9-10)
    - Funding rate (11)
    - Open interest change (12), carrying the previous value across snapshots
    - Composite order book + trades (13-14)
    """

    def __init__(self) -> None:
        """Initialize feature instances."""
        self.orderbook_features: tuple[Feature, ...] = (
            SpreadFeature(),
            MidpriceFeature(),
            WeightedMidpriceFeature(),
            MicropriceFeature(),
            VWAPFeature(),
            TAVFeature(),
            ImbalanceFeature(),
        )
        self.trade_intensity = TradeIntensityFeature()
        self.trade_direction_imbalance = TradeDirectionImbalanceFeature()
        self.liquidation_pressure = LiquidationPressureFeature()
        self.liquidation_imbalance = LiquidationImbalanceFeature()
        self.funding_rate = FundingRateFeature()
        self.oi_change = OIChangeFeature()
        self.price_impact = PriceImpactFeature()
        self.trade_flow_toxicity = TradeFlowToxicityFeature()

        names = tuple(f.name for f in self.orderbook_features)
        assert names == ORDERBOOK_FEATURE_NAMES, "Orderbook columns out of canonical order"

    @staticmethod
    def _safe_compute(feature: Feature, data: Any, config: Any) -> float:
        """Compute a feature, degrading any FeatureError to 0.0."""
        try:
            return feature.compute(data, config)
        except FeatureError as e:
            logger.debug(f"{feature.name} degraded to 0.0: {e}")
            return 0.0

    def compute_row(
        self,
        snapshot: MarketSnapshot,
        config: MarketConfig,
        previous_open_interest: float | None = None,
    ) -> tuple[list[float], float | None]:
        """
        Compute the 15 canonical features for one snapshot.

        Args:
            snapshot: Synchronized market data for one period
            config: Market configuration
            previous_open_interest: OI carried from earlier snapshots
                (None until open interest has been seen)

        Returns:
            (row, carried open interest for the next snapshot)
        """
        row: list[float] = []

        # Orderbook features (0-6)
        if snapshot.orderbook is not None:
            ob_config = OrderbookConfig.from_market(config)
            row.extend(
                self._safe_compute(feature, snapshot.orderbook, ob_config)
                for feature in self.orderbook_features
            )
        else:
            row.extend([0.0] * len(self.orderbook_features))

        # Trade features (7-8)
        row.append(self._safe_compute(self.trade_intensity, snapshot.trades, config))
        row.append(self._safe_compute(self.trade_direction_imbalance, snapshot.trades, config))

        # Liquidation features (9-10)
        row.append(self._safe_compute(self.liquidation_pressure, snapshot.liquidations, config))
        row.append(self._safe_compute(self.liquidation_imbalance, snapshot.liquidations, config))

        # Funding rate (11)
        if snapshot.funding_rate is not None:
            row.append(self._safe_compute(self.funding_rate, snapshot.funding_rate, config))
        else:
            row.append(0.0)

        # OI change (12). First observation becomes its own baseline.
        if snapshot.open_interest is not None:
            current = snapshot.open_interest.open_interest
            previous = current if previous_open_interest is None else previous_open_interest
            row.append(self._safe_compute(self.oi_change, (previous, current), config))
            previous_open_interest = current
        else:
            row.append(0.0)

        # Composite features (13-14)
        row.append(self._safe_compute(self.price_impact, snapshot, config))
        row.append(self._safe_compute(self.trade_flow_toxicity, snapshot, config))

        return row, previous_open_interest

    def compute_all(
        self,
        snapshots: Sequence[MarketSnapshot],
        config: MarketConfig | None = None,
    ) -> list[list[float]]:
        """
        Compute the feature matrix for a sequence of snapshots.

        Snapshots must belong to one stream and be in time order: the
        open interest baseline is carried from row to row.

        Args:
            snapshots: Ordered market snapshots
            config: Market configuration (defaults to Settings.market_config())

        Returns:
            len(snapshots) rows of 15 values in ALL_FEATURE_NAMES order
        """
        config = config or get_settings().market_config()
        previous_oi: float | None = None
        matrix: list[list[float]] = []

        for snapshot in snapshots:
            row, previous_oi = self.compute_row(snapshot, config, previous_oi)
            matrix.append(row)

        logger.debug(f"Computed {len(matrix)} feature rows from {len(snapshots)} snapshots")
        return matrix

    def compute_all_frame(
        self,
        snapshots: Sequence[MarketSnapshot],
        config: MarketConfig | None = None,
    ) -> pd.DataFrame:
        """Same as compute_all() as a DataFrame with the canonical column names."""
        return pd.DataFrame(
            self.compute_all(snapshots, config),
            columns=list(ALL_FEATURE_NAMES),
            dtype="float64",
        )

    def get_feature_summary(self, row: Sequence[float]) -> dict[str, dict[str, float]]:
        """
        Group one canonical row by data source.

        Args:
            row: 15 values in ALL_FEATURE_NAMES order

        Returns:
            Dictionary of source -> {feature: value}
        """
        values = dict(zip(ALL_FEATURE_NAMES, row))
        return {
            "orderbook": {name: values[name] for name in ORDERBOOK_FEATURE_NAMES},
            "trades": {
                "trade_intensity": values["trade_intensity"],
                "trade_direction_imbalance": values["trade_direction_imbalance"],
            },
            "liquidations": {
                "liquidation_pressure": values["liquidation_pressure"],
                "liquidation_imbalance": values["liquidation_imbalance"],
            },
            "derivatives": {
                "funding_rate": values["funding_rate"],
                "oi_change": values["oi_change"],
            },
            "composite": {
                "price_impact": values["price_impact"],
                "trade_flow_toxicity": values["trade_flow_toxicity"],
            },
        }


_DEFAULT_AGGREGATOR = MarketFeatureAggregator()


def compute_all_features(
    snapshots: Sequence[MarketSnapshot],
    config: MarketConfig | None = None,
) -> list[list[float]]:
    """
    Compute all 15 canonical features for a sequence of snapshots.

    Never raises for well-formed snapshots; missing sources and feature
    failures produce 0.0.
    """
    return _DEFAULT_AGGREGATOR.compute_all(snapshots, config)
