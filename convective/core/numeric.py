"""
Numeric helpers shared by feature implementations.
"""

import numpy as np

from convective.core.constants import FEATURE_DECIMALS


def truncate_to_decimal(value: float, decimal_places: int = FEATURE_DECIMALS) -> float:
    """
    Truncate a float toward zero at a fixed number of decimal places.

    Formula: trunc(value * 10^places) / 10^places

    Args:
        value: Value to truncate
        decimal_places: Number of decimal places to keep

    Returns:
        Truncated value as a Python float
    """
    multiplier = 10.0 ** decimal_places
    return float(np.trunc(value * multiplier) / multiplier)
