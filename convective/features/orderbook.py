"""
Order-book feature extraction.

Features computed from a single order book snapshot:
- Spread and price estimators (midprice, weighted midprice, microprice)
- Depth metrics (VWAP over the best levels, total available volume)
- Touch imbalance

All values are truncated to 8 decimal places.
"""

import logging

from convective.core.exceptions import (
    EmptyOrderbookError,
    InsufficientDepthError,
    ZeroVolumeError,
)
from convective.core.numeric import truncate_to_decimal
from convective.core.types import FeatureCategory, OrderbookConfig
from convective.features.base import OrderbookFeature
from convective.market.types import Orderbook, OrderbookLevel


logger = logging.getLogger(__name__)


def _touch(ob: Orderbook) -> tuple[OrderbookLevel, OrderbookLevel]:
    """Return (best bid, best ask) or raise if either side is empty."""
    if not ob.bids or not ob.asks:
        raise EmptyOrderbookError()
    return ob.bids[0], ob.asks[0]


class SpreadFeature(OrderbookFeature):
    """Bid-ask spread at the touch."""

    name = "spread"
    description = "Bid-ask spread (ask_price - bid_price)"
    category = FeatureCategory.SPREAD

    def compute(self, ob: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _touch(ob)
        return truncate_to_decimal(ask.price - bid.price)


class MidpriceFeature(OrderbookFeature):
    """Arithmetic mean of the best bid and ask."""

    name = "midprice"
    description = "Mid price: (best_bid + best_ask) / 2"
    category = FeatureCategory.PRICE

    def compute(self, ob: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _touch(ob)
        return truncate_to_decimal((ask.price + bid.price) / 2.0)


class WeightedMidpriceFeature(OrderbookFeature):
    """
    Volume-weighted mid price at the best levels.

    Each side's price is weighted by its own size:
    (bid_p * bid_v + ask_p * ask_v) / (bid_v + ask_v)
    """

    name = "w_midprice"
    description = "Volume-weighted mid price at best levels"
    category = FeatureCategory.PRICE

    def compute(self, ob: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _touch(ob)

        total_volume = ask.volume + bid.volume
        if total_volume == 0.0:
            raise ZeroVolumeError()

        w_midprice = (bid.price * bid.volume + ask.price * ask.volume) / total_volume
        return truncate_to_decimal(w_midprice)


class MicropriceFeature(OrderbookFeature):
    """
    Size-imbalance-weighted fair value.

    Each side's price is weighted by the OPPOSITE side's size:
    bid_p * (ask_v / total) + ask_p * (bid_v / total)

    The estimate leans toward the thinner side, which is more likely
    to be consumed next.
    """

    name = "microprice"
    description = "Microprice: size-imbalance-weighted fair value"
    category = FeatureCategory.PRICE

    def compute(self, ob: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _touch(ob)

        total_size = bid.volume + ask.volume
        if total_size == 0.0:
            raise ZeroVolumeError()

        microprice = (
            bid.price * (ask.volume / total_size)
            + ask.price * (bid.volume / total_size)
        )
        return truncate_to_decimal(microprice)


class VWAPFeature(OrderbookFeature):
    """Volume-weighted average price over the best `depth` levels of both sides."""

    name = "vwap"
    description = "Volume-Weighted Average Price up to specified depth"
    category = FeatureCategory.VOLUME

    def compute(self, ob: Orderbook, config: OrderbookConfig) -> float:
        _touch(ob)

        depth = config.depth
        if depth > len(ob.bids) or depth > len(ob.asks):
            raise InsufficientDepthError(
                requested=depth,
                available=min(len(ob.bids), len(ob.asks)),
            )

        levels = ob.bids[:depth] + ob.asks[:depth]
        sum_pv = 0.0
        sum_v = 0.0
        for level in levels:
            sum_pv += level.price * level.volume
            sum_v += level.volume

        if sum_v > 0.0:
            return truncate_to_decimal(sum_pv / sum_v)
        raise ZeroVolumeError()


class TAVFeature(OrderbookFeature):
    """
    Total available volume near the touch.

    Sums bid volume priced at or above best_bid * (1 - bps) and ask
    volume priced at or below best_ask * (1 + bps).
    """

    name = "tav"
    description = "Total Available Volume within X bps of the touch"
    category = FeatureCategory.VOLUME

    def compute(self, ob: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _touch(ob)

        lower_bid = bid.price * (1.0 - config.bps)
        upper_ask = ask.price * (1.0 + config.bps)

        bid_volume = sum(level.volume for level in ob.bids if level.price >= lower_bid)
        ask_volume = sum(level.volume for level in ob.asks if level.price <= upper_ask)

        return truncate_to_decimal(bid_volume + ask_volume)


class ImbalanceFeature(OrderbookFeature):
    """Ask share of the touch volume. Range [0, 1]."""

    name = "imb"
    description = "Order imbalance: ask_volume / (ask_volume + bid_volume)"
    category = FeatureCategory.IMBALANCE

    def compute(self, ob: Orderbook, config: OrderbookConfig) -> float:
        bid, ask = _touch(ob)

        total_volume = ask.volume + bid.volume
        if total_volume == 0.0:
            raise ZeroVolumeError()

        return truncate_to_decimal(ask.volume / total_volume)
