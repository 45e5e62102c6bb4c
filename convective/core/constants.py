"""
Constants for Convective.

Central location for default values and the published feature column contract.
"""

# ============================================================
# NUMERIC PRECISION
# ============================================================

# Decimal places kept when truncating feature values
FEATURE_DECIMALS = 8

# ============================================================
# CONFIGURATION DEFAULTS
# ============================================================

# Number of book levels per side used by depth-aware features
DEFAULT_DEPTH = 5

# Fractional price tolerance for band features (0.001 = 10 bps)
DEFAULT_BPS = 0.001

# ============================================================
# SCALING
# ============================================================

# Funding rates are emitted in basis points
FUNDING_RATE_BPS_MULTIPLIER = 10_000.0

# Open interest change is emitted as a percentage
OI_CHANGE_PCT_MULTIPLIER = 100.0

# ============================================================
# SIDE LABELS
# ============================================================
# Matched case-sensitively. Any other label counts toward neither side.

BUY_SIDE = "Buy"
SELL_SIDE = "Sell"

# ============================================================
# FEATURE NAMES
# ============================================================

ORDERBOOK_FEATURE_NAMES = (
    "spread",
    "midprice",
    "w_midprice",
    "microprice",
    "vwap",
    "tav",
    "imb",
)

TRADE_FEATURE_NAMES = (
    "trade_intensity",
    "trade_direction_imbalance",
)

LIQUIDATION_FEATURE_NAMES = (
    "liquidation_pressure",
    "liquidation_imbalance",
)

MARKET_FEATURE_NAMES = (
    "funding_rate",
    "oi_change",
    "price_impact",
    "trade_flow_toxicity",
)

# Canonical column order of the multi-source feature matrix.
# Consumers index rows by position, so this order must never change.
ALL_FEATURE_NAMES = (
    ORDERBOOK_FEATURE_NAMES
    + TRADE_FEATURE_NAMES
    + LIQUIDATION_FEATURE_NAMES
    + MARKET_FEATURE_NAMES
)

assert len(ALL_FEATURE_NAMES) == 15, "Canonical feature vector must have 15 columns"

NUM_FEATURES = len(ALL_FEATURE_NAMES)
