"""
Tests for the feature registries.
"""

import threading

import pytest

from convective.core.constants import ALL_FEATURE_NAMES
from convective.core.types import FeatureCategory
from convective.features.registry import (
    FeatureRegistry,
    build_default_registries,
    get_default_registries,
)


@pytest.fixture
def registries():
    """Fresh, isolated registries."""
    return build_default_registries()


class TestFeatureRegistry:
    """Tests for a single registry."""

    def test_register_and_lookup(self):
        """Registered names are discoverable by name and category."""
        registry = FeatureRegistry("test")
        registry.register_feature("alpha", FeatureCategory.FLOW)
        registry.register_feature("beta", FeatureCategory.FLOW)
        registry.register_feature("gamma", FeatureCategory.TIMING)

        assert registry.feature_exists("alpha")
        assert registry.get_category("gamma") == FeatureCategory.TIMING
        assert registry.list_by_category(FeatureCategory.FLOW) == ["alpha", "beta"]
        assert sorted(registry.list_features()) == ["alpha", "beta", "gamma"]
        assert len(registry) == 3
        assert "beta" in registry

    def test_unknown_lookups(self):
        """Missing names and categories return empty results."""
        registry = FeatureRegistry("test")

        assert not registry.feature_exists("missing")
        assert registry.get_category("missing") is None
        assert registry.list_by_category(FeatureCategory.VOLATILITY) == []

    def test_reregistration_moves_category(self):
        """Registering a name again updates both mappings."""
        registry = FeatureRegistry("test")
        registry.register_feature("alpha", FeatureCategory.FLOW)
        registry.register_feature("alpha", FeatureCategory.VOLUME)

        assert registry.get_category("alpha") == FeatureCategory.VOLUME
        assert registry.list_by_category(FeatureCategory.FLOW) == []
        assert registry.list_by_category(FeatureCategory.VOLUME) == ["alpha"]
        assert len(registry) == 1

    def test_returned_lists_are_copies(self):
        """Mutating a returned list does not change the registry."""
        registry = FeatureRegistry("test")
        registry.register_feature("alpha", FeatureCategory.FLOW)

        registry.list_by_category(FeatureCategory.FLOW).append("intruder")
        registry.list_features().append("intruder")

        assert registry.list_by_category(FeatureCategory.FLOW) == ["alpha"]
        assert not registry.feature_exists("intruder")

    def test_concurrent_registration(self):
        """Concurrent writers do not lose entries."""
        registry = FeatureRegistry("test")

        def register(start: int) -> None:
            for i in range(start, start + 50):
                registry.register_feature(f"f{i}", FeatureCategory.FLOW)

        threads = [threading.Thread(target=register, args=(n * 50,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(registry) == 200
        assert len(registry.list_by_category(FeatureCategory.FLOW)) == 200


class TestDefaultRegistries:
    """Tests for the built-in registries."""

    def test_orderbook_registry(self, registries):
        """Order-book registry holds the seven book features."""
        assert sorted(registries.orderbook.list_features()) == sorted(
            ["spread", "midprice", "w_midprice", "microprice", "vwap", "imb", "tav"]
        )
        assert registries.orderbook.list_by_category(FeatureCategory.PRICE) == [
            "midprice",
            "w_midprice",
            "microprice",
        ]
        assert registries.orderbook.get_category("spread") == FeatureCategory.SPREAD

    def test_trade_and_liquidation_registries(self, registries):
        """Trade and liquidation registries hold two features each."""
        assert registries.trades.list_features() == [
            "trade_intensity",
            "trade_direction_imbalance",
        ]
        assert registries.liquidations.get_category("liquidation_imbalance") == (
            FeatureCategory.IMBALANCE
        )

    def test_market_registry(self, registries):
        """Market registry holds funding, OI and composites."""
        assert registries.market.get_category("funding_rate") == FeatureCategory.FLOW
        assert registries.market.get_category("oi_change") == FeatureCategory.VOLUME
        assert registries.market.get_category("price_impact") == FeatureCategory.LIQUIDITY
        assert registries.market.feature_exists("trade_flow_toxicity")

    def test_registries_are_independent(self, registries):
        """Domains do not share entries."""
        assert not registries.orderbook.feature_exists("trade_intensity")
        assert not registries.market.feature_exists("spread")

    def test_every_canonical_feature_registered_once(self, registries):
        """Each canonical column appears in exactly one domain."""
        for name in ALL_FEATURE_NAMES:
            owners = [r.domain for r in registries.all() if r.feature_exists(name)]
            assert len(owners) == 1, name

    def test_find(self, registries):
        """find() locates a name across domains."""
        assert registries.find("vwap") == ("orderbook", FeatureCategory.VOLUME)
        assert registries.find("liquidation_pressure") == ("liquidations", FeatureCategory.FLOW)
        assert registries.find("unknown") is None

    def test_build_returns_isolated_instances(self):
        """Separate builds do not affect each other."""
        first = build_default_registries()
        second = build_default_registries()

        first.trades.register_feature("extra", FeatureCategory.TIMING)

        assert not second.trades.feature_exists("extra")

    def test_default_registries_cached(self):
        """Process registries are built once."""
        assert get_default_registries() is get_default_registries()
