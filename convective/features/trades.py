"""
Trade-flow feature extraction.

Features computed over all trades of one synchronization period.
An empty period yields 0.0 (neutral) rather than an error.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Protocol

from convective.core.constants import BUY_SIDE, SELL_SIDE
from convective.core.numeric import truncate_to_decimal
from convective.core.types import FeatureCategory, MarketConfig
from convective.features.base import MarketFeature
from convective.market.types import Trade


logger = logging.getLogger(__name__)


class SidedFlow(Protocol):
    """Anything with an amount and a side label (trades, liquidations)."""

    amount: float
    side: str


def side_volumes(flows: Iterable[SidedFlow]) -> tuple[float, float]:
    """
    Accumulate buy and sell volume.

    Side labels are matched case-sensitively against "Buy" and "Sell".
    Any other label is counted toward neither side, so it also drops out
    of the total used as a denominator by the imbalance features.

    Returns:
        (buy_volume, sell_volume)
    """
    buy_vol = 0.0
    sell_vol = 0.0
    for flow in flows:
        if flow.side == BUY_SIDE:
            buy_vol += flow.amount
        elif flow.side == SELL_SIDE:
            sell_vol += flow.amount
    return buy_vol, sell_vol


def signed_imbalance(flows: Sequence[SidedFlow]) -> float:
    """(buy - sell) / (buy + sell), or 0.0 when there is no classified volume."""
    if not flows:
        return 0.0

    buy_vol, sell_vol = side_volumes(flows)
    total = buy_vol + sell_vol
    if total == 0.0:
        return 0.0

    return truncate_to_decimal((buy_vol - sell_vol) / total)


class TradeIntensityFeature(MarketFeature):
    """Total traded amount in the period. Signals urgency and participation."""

    name = "trade_intensity"
    description = "Total trade volume (sum of amounts) in the period"
    category = FeatureCategory.FLOW

    def compute(self, trades: Sequence[Trade], config: MarketConfig) -> float:
        if not trades:
            return 0.0
        total = sum(t.amount for t in trades)
        return truncate_to_decimal(total)


class TradeDirectionImbalanceFeature(MarketFeature):
    """
    Net aggressor direction.

    (buy_volume - sell_volume) / total_volume, range [-1, 1].
    Positive = net buying pressure, negative = net selling.
    """

    name = "trade_direction_imbalance"
    description = "Signed net aggressor imbalance: (buy_vol - sell_vol) / total_vol"
    category = FeatureCategory.FLOW

    def compute(self, trades: Sequence[Trade], config: MarketConfig) -> float:
        return signed_imbalance(trades)
