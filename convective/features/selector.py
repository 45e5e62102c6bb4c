"""
Feature selector.

Resolves an ordered list of order-book feature names into feature
instances and evaluates them against one order book at a time.

Error policy is STRICT: the first feature error aborts the call and
no partial row is returned.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence

from convective.core.config import get_settings
from convective.core.exceptions import FeatureNotFoundError
from convective.core.types import OrderbookConfig
from convective.features.base import OrderbookFeature
from convective.features.orderbook import (
    ImbalanceFeature,
    MicropriceFeature,
    MidpriceFeature,
    SpreadFeature,
    TAVFeature,
    VWAPFeature,
    WeightedMidpriceFeature,
)
from convective.market.types import Orderbook


logger = logging.getLogger(__name__)


ORDERBOOK_FEATURES: dict[str, type[OrderbookFeature]] = {
    feature_class.name: feature_class
    for feature_class in (
        SpreadFeature,
        MidpriceFeature,
        WeightedMidpriceFeature,
        VWAPFeature,
        ImbalanceFeature,
        TAVFeature,
        MicropriceFeature,
    )
}


def resolve_feature(name: str) -> OrderbookFeature:
    """
    Instantiate an order-book feature by name.

    Raises:
        FeatureNotFoundError: If the name is not a known order-book feature
    """
    feature_class = ORDERBOOK_FEATURES.get(name)
    if feature_class is None:
        raise FeatureNotFoundError(name)
    return feature_class()


class FeatureSelector:
    """
    Ordered selection of order-book features.

    Output positions of compute_values() match the selection order.
    """

    def __init__(self, feature_names: Iterable[str]) -> None:
        """
        Resolve feature names.

        Args:
            feature_names: Ordered feature names

        Raises:
            FeatureNotFoundError: On the first unknown name
        """
        features = [resolve_feature(name) for name in feature_names]
        self._features: tuple[OrderbookFeature, ...] = tuple(features)
        logger.debug(f"Selected features: {self.feature_names}")

    @classmethod
    def from_features(cls, features: Iterable[OrderbookFeature]) -> "FeatureSelector":
        """Build a selector from ready-made feature instances, skipping name lookup."""
        selector = cls.__new__(cls)
        selector._features = tuple(features)
        return selector

    @property
    def features(self) -> tuple[OrderbookFeature, ...]:
        return self._features

    @property
    def feature_names(self) -> list[str]:
        """Selected feature names in output order."""
        return [feature.name for feature in self._features]

    def compute_values(self, ob: Orderbook, config: OrderbookConfig) -> list[float]:
        """
        Compute every selected feature on one order book.

        Args:
            ob: Order book snapshot
            config: Shared order-book configuration

        Returns:
            Feature values in selection order

        Raises:
            FeatureError: The first error raised by any feature
        """
        return [feature.compute(ob, config) for feature in self._features]

    def compute_values_with_defaults(self, ob: Orderbook) -> list[float]:
        """Compute with the configuration from environment settings."""
        return self.compute_values(ob, get_settings().orderbook_config())

    def compute_many(
        self,
        orderbooks: Sequence[Orderbook],
        config: OrderbookConfig,
    ) -> list[list[float]]:
        """Compute one row per order book, strict on the first error."""
        return [self.compute_values(ob, config) for ob in orderbooks]

    @property
    def is_empty(self) -> bool:
        return not self._features

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self) -> Iterator[OrderbookFeature]:
        return iter(self._features)

    def __repr__(self) -> str:
        return f"FeatureSelector({self.feature_names!r})"
