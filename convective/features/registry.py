"""
Feature registry.

Name <-> category lookup tables used for discovery and validation.
Four independent registries exist, one per data-source domain:
order book, trades, liquidations and market (funding, OI, composites).

A registry is written once while it is being built and only read
afterwards. Writers take a lock and publish fresh immutable mappings,
so readers never need the lock.
"""

import logging
import threading
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from convective.core.types import FeatureCategory
from convective.features.composite import PriceImpactFeature, TradeFlowToxicityFeature
from convective.features.funding import FundingRateFeature, OIChangeFeature
from convective.features.liquidations import (
    LiquidationImbalanceFeature,
    LiquidationPressureFeature,
)
from convective.features.orderbook import (
    ImbalanceFeature,
    MicropriceFeature,
    MidpriceFeature,
    SpreadFeature,
    TAVFeature,
    VWAPFeature,
    WeightedMidpriceFeature,
)
from convective.features.trades import TradeDirectionImbalanceFeature, TradeIntensityFeature


logger = logging.getLogger(__name__)


class FeatureRegistry:
    """Name -> category mapping and its inverse for one data-source domain."""

    def __init__(self, domain: str = "default") -> None:
        self.domain = domain
        self._lock = threading.Lock()
        self._names: MappingProxyType[str, FeatureCategory] = MappingProxyType({})
        self._categories: MappingProxyType[FeatureCategory, tuple[str, ...]] = (
            MappingProxyType({})
        )

    def register_feature(self, name: str, category: FeatureCategory) -> None:
        """
        Register a feature under a category.

        Re-registering a name moves it to the new category.
        """
        with self._lock:
            names = dict(self._names)
            categories = dict(self._categories)

            previous = names.get(name)
            if previous is not None:
                categories[previous] = tuple(n for n in categories[previous] if n != name)

            names[name] = category
            categories[category] = categories.get(category, ()) + (name,)

            self._names = MappingProxyType(names)
            self._categories = MappingProxyType(categories)

        logger.debug(f"Registered {name} ({category.value}) in {self.domain} registry")

    def list_features(self) -> list[str]:
        """All registered feature names, in registration order."""
        return list(self._names)

    def list_by_category(self, category: FeatureCategory) -> list[str]:
        """Feature names registered under a category (empty if none)."""
        return list(self._categories.get(category, ()))

    def feature_exists(self, name: str) -> bool:
        return name in self._names

    def get_category(self, name: str) -> FeatureCategory | None:
        return self._names.get(name)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        return f"FeatureRegistry(domain={self.domain!r}, features={len(self)})"


@dataclass(frozen=True)
class FeatureRegistries:
    """The four per-domain registries."""

    orderbook: FeatureRegistry
    trades: FeatureRegistry
    liquidations: FeatureRegistry
    market: FeatureRegistry

    def all(self) -> tuple[FeatureRegistry, ...]:
        return (self.orderbook, self.trades, self.liquidations, self.market)

    def find(self, name: str) -> tuple[str, FeatureCategory] | None:
        """
        Locate a feature across all domains.

        Returns:
            (domain, category) or None if no registry knows the name
        """
        for registry in self.all():
            category = registry.get_category(name)
            if category is not None:
                return registry.domain, category
        return None


def _build_registry(domain: str, features: list) -> FeatureRegistry:
    registry = FeatureRegistry(domain)
    for feature_class in features:
        registry.register_feature(feature_class.name, feature_class.category)
    return registry


def build_default_registries() -> FeatureRegistries:
    """
    Build a fresh set of registries holding every built-in feature.

    Each call returns independent instances.
    """
    return FeatureRegistries(
        orderbook=_build_registry(
            "orderbook",
            [
                SpreadFeature,
                MidpriceFeature,
                WeightedMidpriceFeature,
                MicropriceFeature,
                VWAPFeature,
                ImbalanceFeature,
                TAVFeature,
            ],
        ),
        trades=_build_registry(
            "trades",
            [TradeIntensityFeature, TradeDirectionImbalanceFeature],
        ),
        liquidations=_build_registry(
            "liquidations",
            [LiquidationPressureFeature, LiquidationImbalanceFeature],
        ),
        market=_build_registry(
            "market",
            [
                FundingRateFeature,
                OIChangeFeature,
                PriceImpactFeature,
                TradeFlowToxicityFeature,
            ],
        ),
    )


@lru_cache(maxsize=1)
def get_default_registries() -> FeatureRegistries:
    """Process-wide registries, built on first access."""
    return build_default_registries()
