"""
Funding rate and open interest features.

Derivatives-positioning metrics. Neither value is truncated.
"""

import logging

from convective.core.constants import FUNDING_RATE_BPS_MULTIPLIER, OI_CHANGE_PCT_MULTIPLIER
from convective.core.exceptions import ComputationError
from convective.core.types import FeatureCategory, MarketConfig
from convective.features.base import MarketFeature
from convective.market.types import FundingRate


logger = logging.getLogger(__name__)


class FundingRateFeature(MarketFeature):
    """
    Signed funding rate in basis points.

    Positive = longs pay shorts, negative = shorts pay longs.
    """

    name = "funding_rate"
    description = "Signed funding rate in basis points (x10000)"
    category = FeatureCategory.FLOW

    def compute(self, funding: FundingRate, config: MarketConfig) -> float:
        return funding.funding_rate * FUNDING_RATE_BPS_MULTIPLIER


class OIChangeFeature(MarketFeature):
    """
    Percentage change in open interest.

    Input is the pair (previous, current).
    Positive = new positions entering, negative = positions closing.
    """

    name = "oi_change"
    description = "Percentage change in open interest: (curr - prev) / prev * 100"
    category = FeatureCategory.VOLUME

    def compute(self, oi_pair: tuple[float, float], config: MarketConfig) -> float:
        prev, curr = oi_pair

        if prev == 0.0:
            if curr == 0.0:
                return 0.0
            raise ComputationError(
                "previous OI is zero, cannot compute percentage change",
                feature=self.name,
            )

        return (curr - prev) / prev * OI_CHANGE_PCT_MULTIPLIER
