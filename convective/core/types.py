"""
Core type definitions for Convective.

Defines feature categories, feature configurations and output formats.
"""

import numbers
from dataclasses import dataclass
from enum import Enum

from convective.core.constants import DEFAULT_BPS, DEFAULT_DEPTH
from convective.core.exceptions import InvalidConfigError


class FeatureCategory(str, Enum):
    """Semantic grouping of features. Closed set."""

    SPREAD = "Spread"
    PRICE = "Price"
    VOLUME = "Volume"
    LIQUIDITY = "Liquidity"
    IMBALANCE = "Imbalance"
    VOLATILITY = "Volatility"
    FLOW = "Flow"
    TIMING = "Timing"


class FeaturesOutput(str, Enum):
    """Shape of the matrix returned by the order-book compute functions."""

    VALUES = "values"    # list of rows, each a list of floats
    MAPPING = "mapping"  # list of rows, each a {name: value} dict
    FRAME = "frame"      # pandas DataFrame, one column per feature


def _validate_depth_and_bps(depth: int, bps: float) -> int:
    """
    Shared invariant check for the two configuration families.

    Returns:
        depth as a plain int (numpy integers are accepted)
    """
    if isinstance(depth, bool) or not isinstance(depth, numbers.Integral):
        raise InvalidConfigError(f"depth must be an integer, got {depth!r}", field="depth")
    if depth <= 0:
        raise InvalidConfigError(f"depth must be positive, got {depth}", field="depth")
    if bps < 0:
        raise InvalidConfigError(f"bps must be non-negative, got {bps}", field="bps")
    return int(depth)


@dataclass(frozen=True)
class OrderbookConfig:
    """
    Parameters shared by order-book features.

    depth: number of best levels per side used by depth-aware features (vwap)
    bps: fractional price tolerance around the touch (tav); 0.001 = 10 bps
    """

    depth: int = DEFAULT_DEPTH
    bps: float = DEFAULT_BPS

    def __post_init__(self) -> None:
        object.__setattr__(self, "depth", _validate_depth_and_bps(self.depth, self.bps))

    @classmethod
    def from_market(cls, config: "MarketConfig") -> "OrderbookConfig":
        """Derive the order-book parameters from a market configuration."""
        return cls(depth=config.depth, bps=config.bps)


@dataclass(frozen=True)
class MarketConfig:
    """
    Parameters shared by multi-source and composite features.

    Same shape as OrderbookConfig but a separate type: the two feature
    families are configured independently.
    """

    depth: int = DEFAULT_DEPTH
    bps: float = DEFAULT_BPS

    def __post_init__(self) -> None:
        object.__setattr__(self, "depth", _validate_depth_and_bps(self.depth, self.bps))
