"""
Liquidation feature extraction.

Liquidations are forced position closures triggered by insufficient
margin. These features measure the magnitude and directional skew of
liquidation activity within a synchronization period.
"""

import logging
from collections.abc import Sequence

from convective.core.numeric import truncate_to_decimal
from convective.core.types import FeatureCategory, MarketConfig
from convective.features.base import MarketFeature
from convective.features.trades import signed_imbalance
from convective.market.types import Liquidation


logger = logging.getLogger(__name__)


class LiquidationPressureFeature(MarketFeature):
    """
    Total liquidated notional (price * amount) in the period.

    High pressure signals cascading forced exits.
    """

    name = "liquidation_pressure"
    description = "Total liquidation notional (price * amount) in the period"
    category = FeatureCategory.FLOW

    def compute(self, liquidations: Sequence[Liquidation], config: MarketConfig) -> float:
        if not liquidations:
            return 0.0
        notional = sum(liq.price * liq.amount for liq in liquidations)
        return truncate_to_decimal(notional)


class LiquidationImbalanceFeature(MarketFeature):
    """
    Directional skew of liquidations: (buy - sell) / total.

    Positive = mostly shorts forced out ("Buy" side),
    negative = mostly longs forced out ("Sell" side).
    """

    name = "liquidation_imbalance"
    description = "Liquidation direction imbalance: (buy - sell) / total"
    category = FeatureCategory.IMBALANCE

    def compute(self, liquidations: Sequence[Liquidation], config: MarketConfig) -> float:
        return signed_imbalance(liquidations)
