"""
Feature capability contract.

Every metric is a stateless object exposing a stable name, a description,
a category, a default configuration and a pure compute() method.
Identical input and configuration always produce identical output, so a
single instance may be shared freely across threads.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from convective.core.types import FeatureCategory, MarketConfig, OrderbookConfig


class Feature(ABC):
    """
    Base class for all features.

    Subclasses set the class attributes and implement compute().
    compute() raises a FeatureError subclass when the value cannot be
    produced from the given input.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    category: ClassVar[FeatureCategory]
    config_class: ClassVar[type]

    @abstractmethod
    def compute(self, data: Any, config: Any) -> float:
        """Compute the feature value."""

    def default_config(self) -> Any:
        """Default configuration for this feature."""
        return self.config_class()

    def dependencies(self) -> list[str]:
        """
        Names of other features this one depends on.

        Declared only; nothing resolves them yet.
        """
        return []

    def describe(self) -> dict[str, Any]:
        """Summary used by discovery tooling."""
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "dependencies": self.dependencies(),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class OrderbookFeature(Feature):
    """Feature computed from a single order book."""

    config_class = OrderbookConfig


class MarketFeature(Feature):
    """Feature computed from trades, liquidations, funding, OI or a snapshot."""

    config_class = MarketConfig
