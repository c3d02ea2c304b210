"""
Domain models and value objects.

Contains AssetKind, asset display metadata, ConversionInput, ConversionResult.
"""

from src.core.domain.asset import (
    DISPLAY_ORDER,
    UNIT_PER_COIN,
    UNIT_PER_OUNCE,
    AssetInfo,
    AssetKind,
    asset_info,
    asset_label,
    asset_unit,
)
from src.core.domain.conversion import ConversionInput, ConversionResult

__all__ = [
    # Asset module
    "AssetKind",
    "AssetInfo",
    "UNIT_PER_OUNCE",
    "UNIT_PER_COIN",
    "DISPLAY_ORDER",
    "asset_info",
    "asset_label",
    "asset_unit",
    # Conversion models
    "ConversionInput",
    "ConversionResult",
]
