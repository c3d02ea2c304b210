"""
Core math modules для Gold2BTC

Численные примитивы и линейная модель цен.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    floor_at_zero,
    is_valid_float,
)

# Price Model
from src.core.math.price_model import (
    BTC_GOLD_DIVISOR,
    GOLD_INTERCEPT,
    GOLD_PER_BTC_SLOPE,
    SILVER_INTERCEPT,
    SILVER_OFFSET,
    SILVER_PER_BTC_SLOPE,
    SILVER_PER_GOLD,
    btc_from_gold,
    convert,
    convert_input,
    from_btc,
    from_gold,
    from_silver,
)

__all__ = [
    # Numerical Safeguards
    "floor_at_zero",
    "is_valid_float",
    # Price Model — Constants
    "BTC_GOLD_DIVISOR",
    "GOLD_INTERCEPT",
    "GOLD_PER_BTC_SLOPE",
    "SILVER_INTERCEPT",
    "SILVER_OFFSET",
    "SILVER_PER_BTC_SLOPE",
    "SILVER_PER_GOLD",
    # Price Model — Functions
    "btc_from_gold",
    "convert",
    "convert_input",
    "from_btc",
    "from_gold",
    "from_silver",
]
