"""
Market data value types.

In-memory representations of the five data sources and of the
synchronized snapshot that bundles them. Values are immutable once
constructed; sequences are stored as tuples.

Parsing and ingestion happen upstream. These types only check the
structural invariants the features rely on.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from convective.core.exceptions import ValidationError


def _require_non_negative(value: float, field_name: str) -> None:
    if value < 0:
        raise ValidationError(
            f"{field_name} must be non-negative",
            field=field_name,
            value=value,
        )


@dataclass(frozen=True)
class OrderbookLevel:
    """One resting price/size pair."""

    price: float
    volume: float

    def __post_init__(self) -> None:
        _require_non_negative(self.volume, "volume")

    @property
    def notional(self) -> float:
        """Price times volume."""
        return self.price * self.volume


@dataclass(frozen=True)
class Orderbook:
    """
    A venue's resting liquidity at one point in time.

    bids are ordered best-first (descending price), asks best-first
    (ascending price). Index 0 of each side is the touch. Either side
    may be empty. Ordering is taken as supplied and never re-sorted.
    """

    bids: tuple[OrderbookLevel, ...] = ()
    asks: tuple[OrderbookLevel, ...] = ()
    symbol: str | None = None
    timestamp: int | None = None  # milliseconds since epoch

    def __post_init__(self) -> None:
        # Accept any iterable but store tuples so the book stays immutable
        object.__setattr__(self, "bids", tuple(self.bids))
        object.__setattr__(self, "asks", tuple(self.asks))

    @classmethod
    def from_levels(
        cls,
        bids: Iterable[tuple[float, float]],
        asks: Iterable[tuple[float, float]],
        symbol: str | None = None,
        timestamp: int | None = None,
    ) -> "Orderbook":
        """
        Build an order book from (price, volume) pairs.

        Args:
            bids: Bid levels, best first
            asks: Ask levels, best first
            symbol: Optional instrument symbol
            timestamp: Optional snapshot time in milliseconds

        Returns:
            Orderbook with validated levels
        """
        return cls(
            bids=tuple(OrderbookLevel(price=p, volume=v) for p, v in bids),
            asks=tuple(OrderbookLevel(price=p, volume=v) for p, v in asks),
            symbol=symbol,
            timestamp=timestamp,
        )

    @property
    def is_empty(self) -> bool:
        """True when either side has no levels."""
        return not self.bids or not self.asks

    @property
    def best_bid(self) -> OrderbookLevel | None:
        return self.bids[0] if self.bids else None

    @property
    def best_ask(self) -> OrderbookLevel | None:
        return self.asks[0] if self.asks else None


@dataclass(frozen=True)
class Trade:
    """One executed transaction. side is free-form text ("Buy"/"Sell")."""

    price: float
    amount: float
    side: str
    timestamp: int | None = None

    def __post_init__(self) -> None:
        _require_non_negative(self.amount, "amount")


@dataclass(frozen=True)
class Liquidation:
    """One forced position closure."""

    price: float
    amount: float
    side: str
    timestamp: int | None = None

    def __post_init__(self) -> None:
        _require_non_negative(self.amount, "amount")

    @property
    def notional(self) -> float:
        """Price times amount."""
        return self.price * self.amount


@dataclass(frozen=True)
class FundingRate:
    """Periodic long/short payment rate. Positive means longs pay shorts."""

    funding_rate: float
    timestamp: int | None = None


@dataclass(frozen=True)
class OpenInterest:
    """Outstanding open interest."""

    open_interest: float
    timestamp: int | None = None


@dataclass(frozen=True)
class MarketSnapshot:
    """
    All data observed during one synchronization period.

    Every source is independently optional: sources arrive asynchronously
    and a period may have seen none of a given source.
    """

    orderbook: Orderbook | None = None
    trades: tuple[Trade, ...] = field(default_factory=tuple)
    liquidations: tuple[Liquidation, ...] = field(default_factory=tuple)
    funding_rate: FundingRate | None = None
    open_interest: OpenInterest | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "trades", tuple(self.trades))
        object.__setattr__(self, "liquidations", tuple(self.liquidations))
