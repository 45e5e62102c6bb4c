"""Market data value types consumed by the feature engine."""

from convective.market.types import (
    FundingRate,
    Liquidation,
    MarketSnapshot,
    OpenInterest,
    Orderbook,
    OrderbookLevel,
    Trade,
)

__all__ = [
    "FundingRate",
    "Liquidation",
    "MarketSnapshot",
    "OpenInterest",
    "Orderbook",
    "OrderbookLevel",
    "Trade",
]
