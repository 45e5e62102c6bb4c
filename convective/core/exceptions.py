"""
Custom exceptions for Convective.

All exceptions inherit from ConvectiveError for easy catching.
Feature computation failures inherit from FeatureError.
"""


class ConvectiveError(Exception):
    """Base exception for all Convective errors."""

    pass


class ConfigurationError(ConvectiveError):
    """Raised when settings are invalid or missing."""

    pass


class ValidationError(ConvectiveError):
    """Raised when market data violates a structural invariant."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.field = field
        self.value = value

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.field:
            parts.append(f"field={self.field}")
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        return " | ".join(parts)


class FeatureError(ConvectiveError):
    """Base exception for feature computation failures."""

    pass


class EmptyOrderbookError(FeatureError):
    """Raised when an order book is missing or has an empty side."""

    def __init__(self, message: str = "Empty orderbook"):
        super().__init__(message)


class NoTradesError(FeatureError):
    """Raised when a period contains no trades."""

    def __init__(self, message: str = "No trades in period"):
        super().__init__(message)


class NoLiquidationsError(FeatureError):
    """Raised when a period contains no liquidations."""

    def __init__(self, message: str = "No liquidations in period"):
        super().__init__(message)


class ZeroVolumeError(FeatureError):
    """Raised when a volume-weighted formula has a zero denominator."""

    def __init__(self, message: str = "Zero volume"):
        super().__init__(message)


class InsufficientDepthError(FeatureError):
    """Raised when the requested depth exceeds the available book levels."""

    def __init__(
        self,
        requested: int,
        available: int,
        message: str = "Insufficient depth",
    ):
        super().__init__(message)
        self.requested = requested
        self.available = available

    def __str__(self) -> str:
        return (
            f"{self.args[0]} | "
            f"requested={self.requested}, available={self.available}"
        )


class InvalidConfigError(FeatureError):
    """Raised when a feature configuration is invalid."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        parts = [f"Invalid configuration: {self.message}"]
        if self.field:
            parts.append(f"field={self.field}")
        return " | ".join(parts)


class ComputationError(FeatureError):
    """Raised when a feature value cannot be computed from its input."""

    def __init__(self, message: str, feature: str | None = None):
        super().__init__(message)
        self.message = message
        self.feature = feature

    def __str__(self) -> str:
        parts = [f"Computation error: {self.message}"]
        if self.feature:
            parts.append(f"feature={self.feature}")
        return " | ".join(parts)


class FeatureNotFoundError(FeatureError):
    """Raised when a requested feature name is not known."""

    def __init__(self, name: str):
        super().__init__(f"Feature not found: {name}")
        self.name = name
