"""
ConversionInput / ConversionResult — Модели запроса и результата конверсии

Immutable Pydantic модели. Совместимы с JSON Schema
(contracts/schema/conversion_request.json, conversion_result.json).

ИНВАРИАНТЫ:
1. ConversionInput.value конечно и >= 0
2. Все поля ConversionResult >= 0 (гарантируется clamp-ом в модели цен)
"""

import math
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from src.core.domain.asset import AssetKind


# =============================================================================
# REQUEST
# =============================================================================


class ConversionInput(BaseModel):
    """
    Запрос на конверсию: (актив, цена).

    Вызывающая сторона отвечает за парсинг текста; модель лишь фиксирует
    инвариант неотрицательной конечной цены.
    """

    asset: AssetKind = Field(..., description="Актив, цена которого задана")
    value: float = Field(..., ge=0, description="Цена актива (USD/oz или USD)")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def value_must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"value must be finite, got {v}")
        return v


# =============================================================================
# RESULT
# =============================================================================


class ConversionResult(BaseModel):
    """
    Результат конверсии: цены всех трёх активов.

    Поля сериализуются под ключами gold / silver / btc.
    """

    gold_price: float = Field(..., ge=0, alias="gold", description="Золото, USD/oz")
    silver_price: float = Field(
        ..., ge=0, alias="silver", description="Серебро, USD/oz"
    )
    btc_price: float = Field(..., ge=0, alias="btc", description="Биткоин, USD")

    model_config = {"frozen": True, "populate_by_name": True}

    def price_of(self, asset: AssetKind) -> float:
        """
        Цена конкретного актива из результата.

        Args:
            asset: Актив

        Returns:
            Цена актива
        """
        asset = AssetKind(asset)
        if asset is AssetKind.GOLD:
            return self.gold_price
        if asset is AssetKind.SILVER:
            return self.silver_price
        if asset is AssetKind.BTC:
            return self.btc_price
        raise ValueError(f"Unknown asset: {asset!r}")

    def as_tuple(self) -> tuple[float, float, float]:
        """(gold, silver, btc)"""
        return self.gold_price, self.silver_price, self.btc_price

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в dict по контракту conversion_result."""
        return self.model_dump(by_alias=True)
