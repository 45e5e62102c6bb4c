"""
Pytest configuration and fixtures.
"""

import pytest

from convective.core.config import get_settings
from convective.core.types import MarketConfig, OrderbookConfig
from convective.market.types import (
    FundingRate,
    Liquidation,
    MarketSnapshot,
    OpenInterest,
    Orderbook,
    Trade,
)


@pytest.fixture
def sample_orderbook() -> Orderbook:
    """Two-level book: bids 100/99, asks 101/102."""
    return Orderbook.from_levels(
        bids=[(100.0, 2.0), (99.0, 1.0)],
        asks=[(101.0, 1.0), (102.0, 3.0)],
    )


@pytest.fixture
def deep_orderbook() -> Orderbook:
    """Five-level book with a 0.1 tick."""
    return Orderbook.from_levels(
        bids=[(100.0, 1.0), (99.9, 2.0), (99.8, 3.0), (99.7, 4.0), (99.6, 5.0)],
        asks=[(100.1, 1.0), (100.2, 2.0), (100.3, 3.0), (100.4, 4.0), (100.5, 5.0)],
        symbol="BTCUSDT",
        timestamp=1_700_000_000_000,
    )


@pytest.fixture
def empty_bids_orderbook() -> Orderbook:
    """Book with asks only."""
    return Orderbook.from_levels(bids=[], asks=[(101.0, 1.0)])


@pytest.fixture
def zero_volume_orderbook() -> Orderbook:
    """Book whose touch levels carry no size."""
    return Orderbook.from_levels(
        bids=[(100.0, 0.0)],
        asks=[(101.0, 0.0)],
    )


@pytest.fixture
def sample_trades() -> tuple[Trade, ...]:
    """One buy of 2 at 101, one sell of 1 at 99."""
    return (
        Trade(price=101.0, amount=2.0, side="Buy"),
        Trade(price=99.0, amount=1.0, side="Sell"),
    )


@pytest.fixture
def sample_liquidations() -> tuple[Liquidation, ...]:
    """Short liquidation of 3 at 100, long liquidation of 1 at 98."""
    return (
        Liquidation(price=100.0, amount=3.0, side="Buy"),
        Liquidation(price=98.0, amount=1.0, side="Sell"),
    )


@pytest.fixture
def full_snapshot(
    sample_orderbook: Orderbook,
    sample_trades: tuple[Trade, ...],
    sample_liquidations: tuple[Liquidation, ...],
) -> MarketSnapshot:
    """Snapshot with every source present."""
    return MarketSnapshot(
        orderbook=sample_orderbook,
        trades=sample_trades,
        liquidations=sample_liquidations,
        funding_rate=FundingRate(funding_rate=0.0001),
        open_interest=OpenInterest(open_interest=1000.0),
    )


@pytest.fixture
def empty_snapshot() -> MarketSnapshot:
    """Snapshot with no source present."""
    return MarketSnapshot()


@pytest.fixture
def orderbook_config() -> OrderbookConfig:
    """Config matching the two-level sample book."""
    return OrderbookConfig(depth=2, bps=0.001)


@pytest.fixture
def market_config() -> MarketConfig:
    """Config matching the two-level sample book."""
    return MarketConfig(depth=2, bps=0.001)


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings around a test that sets CONVECTIVE_ variables."""
    get_settings.cache_clear()
    yield monkeypatch
    monkeypatch.undo()
    get_settings.cache_clear()
