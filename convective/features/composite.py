"""
Composite features combining order book and trade flow.

These capture the interaction between resting liquidity and aggressive
order flow, and take a whole MarketSnapshot as input.
"""

import logging

from convective.core.exceptions import EmptyOrderbookError
from convective.core.numeric import truncate_to_decimal
from convective.core.types import FeatureCategory, MarketConfig
from convective.features.base import MarketFeature
from convective.features.trades import side_volumes
from convective.market.types import MarketSnapshot


logger = logging.getLogger(__name__)


class PriceImpactFeature(MarketFeature):
    """
    Mean trade price deviation from the midprice.

    mean(trade_price - midprice) over the period's trades.
    Positive = flow executing above mid (buying pressure).
    """

    name = "price_impact"
    description = "Mean trade price deviation from midprice"
    category = FeatureCategory.LIQUIDITY

    def compute(self, snapshot: MarketSnapshot, config: MarketConfig) -> float:
        ob = snapshot.orderbook
        if ob is None or not ob.bids or not ob.asks:
            raise EmptyOrderbookError()

        trades = snapshot.trades
        if not trades:
            return 0.0

        mid = (ob.bids[0].price + ob.asks[0].price) / 2.0
        total_impact = sum(t.price - mid for t in trades)

        return truncate_to_decimal(total_impact / len(trades))


class TradeFlowToxicityFeature(MarketFeature):
    """
    VPIN-inspired flow toxicity.

    |buy_volume - sell_volume| / total_volume, range [0, 1].
    Near 1 = one side dominates (informed flow), near 0 = balanced flow.
    """

    name = "trade_flow_toxicity"
    description = "VPIN-inspired toxicity: |buy_vol - sell_vol| / total_vol"
    category = FeatureCategory.FLOW

    def compute(self, snapshot: MarketSnapshot, config: MarketConfig) -> float:
        if not snapshot.trades:
            return 0.0

        buy_vol, sell_vol = side_volumes(snapshot.trades)
        total = buy_vol + sell_vol
        if total == 0.0:
            return 0.0

        return truncate_to_decimal(abs(buy_vol - sell_vol) / total)
