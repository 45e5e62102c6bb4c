"""
Order-book feature computation entry points.

Thin wrappers around FeatureSelector. All of them follow the selector's
strict error policy: an unknown name or the first feature error aborts
the whole batch.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from typing import Any

import pandas as pd

from convective.core.exceptions import InvalidConfigError
from convective.core.types import FeaturesOutput, OrderbookConfig
from convective.features.selector import FeatureSelector
from convective.market.types import Orderbook


logger = logging.getLogger(__name__)


def format_matrix(
    matrix: list[list[float]],
    feature_names: Sequence[str],
    output_format: FeaturesOutput = FeaturesOutput.VALUES,
) -> Any:
    """
    Convert a feature matrix into the requested output shape.

    Args:
        matrix: Rows of feature values
        feature_names: Column names, in row order
        output_format: Desired shape

    Returns:
        list of lists, list of dicts, or a pandas DataFrame

    Raises:
        InvalidConfigError: If MAPPING is requested with duplicate names
    """
    output_format = FeaturesOutput(output_format)
    if output_format is FeaturesOutput.VALUES:
        return matrix
    if output_format is FeaturesOutput.MAPPING:
        duplicates = sorted(n for n, count in Counter(feature_names).items() if count > 1)
        if duplicates:
            raise InvalidConfigError(
                f"mapping output needs unique feature names, got duplicates {duplicates}",
                field="output_format",
            )
        return [dict(zip(feature_names, row)) for row in matrix]
    return pd.DataFrame(matrix, columns=list(feature_names), dtype="float64")


def compute_features_with_config(
    orderbooks: Sequence[Orderbook],
    feature_names: Sequence[str],
    config: OrderbookConfig,
    output_format: FeaturesOutput = FeaturesOutput.VALUES,
) -> Any:
    """
    Compute the named features for every order book.

    Args:
        orderbooks: Order book snapshots
        feature_names: Ordered order-book feature names
        config: Order-book configuration
        output_format: Shape of the returned matrix

    Returns:
        One row per order book, columns in feature_names order

    Raises:
        FeatureNotFoundError: If any name is unknown
        FeatureError: The first feature failure on any order book
    """
    selector = FeatureSelector(feature_names)
    logger.debug(
        f"Computing {len(selector)} features over {len(orderbooks)} orderbooks"
    )
    matrix = selector.compute_many(orderbooks, config)
    return format_matrix(matrix, selector.feature_names, output_format)


def compute_features(
    orderbooks: Sequence[Orderbook],
    feature_names: Sequence[str],
    depth: int,
    bps: float,
    output_format: FeaturesOutput = FeaturesOutput.VALUES,
) -> Any:
    """
    Compute the named features for every order book.

    Same as compute_features_with_config() with the configuration given
    as depth and bps.
    """
    config = OrderbookConfig(depth=depth, bps=bps)
    return compute_features_with_config(orderbooks, feature_names, config, output_format)


def compute_single_orderbook(
    ob: Orderbook,
    feature_names: Sequence[str],
    config: OrderbookConfig,
) -> list[float]:
    """Compute the named features for one order book."""
    selector = FeatureSelector(feature_names)
    return selector.compute_values(ob, config)
