"""
Тесты для доменных моделей

Покрывает:
- AssetKind (закрытый набор, значения селектора)
- AssetInfo (label, unit, icon)
- ConversionInput (инвариант value >= 0, finite)
- ConversionResult (инвариант >= 0, сериализация, immutability)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    DISPLAY_ORDER,
    UNIT_PER_COIN,
    UNIT_PER_OUNCE,
    AssetKind,
    ConversionInput,
    ConversionResult,
    asset_info,
    asset_label,
    asset_unit,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def sample_result() -> ConversionResult:
    """Результат для BTC = 50000."""
    return ConversionResult(gold_price=1783.86, silver_price=22.39, btc_price=50_000.0)


# =============================================================================
# ASSET
# =============================================================================


class TestAssetKind:
    """Тесты для AssetKind"""

    def test_exactly_three_variants(self) -> None:
        """Набор закрыт: ровно три актива"""
        assert len(AssetKind) == 3
        assert {a.value for a in AssetKind} == {"gold", "silver", "btc"}

    def test_from_selector_value(self) -> None:
        assert AssetKind("btc") is AssetKind.BTC

    def test_unknown_selector(self) -> None:
        with pytest.raises(ValueError):
            AssetKind("platinum")


class TestAssetInfo:
    """Тесты для метаданных отображения"""

    def test_labels(self) -> None:
        assert asset_label(AssetKind.GOLD) == "Gold"
        assert asset_label(AssetKind.SILVER) == "Silver"
        assert asset_label(AssetKind.BTC) == "Bitcoin"

    def test_units(self) -> None:
        """Металлы — USD/oz, биткоин — USD"""
        assert asset_unit(AssetKind.GOLD) == UNIT_PER_OUNCE == "USD/oz"
        assert asset_unit(AssetKind.SILVER) == "USD/oz"
        assert asset_unit(AssetKind.BTC) == UNIT_PER_COIN == "USD"

    def test_ounce_denominated(self) -> None:
        assert asset_info(AssetKind.GOLD).is_ounce_denominated
        assert asset_info(AssetKind.SILVER).is_ounce_denominated
        assert not asset_info(AssetKind.BTC).is_ounce_denominated

    def test_icons(self) -> None:
        assert asset_info(AssetKind.GOLD).icon == "coins"
        assert asset_info(AssetKind.GOLD).color == "yellow"
        assert asset_info(AssetKind.SILVER).color == "gray"
        assert asset_info(AssetKind.BTC).icon == "trending-up"

    def test_every_asset_has_info(self) -> None:
        for asset in AssetKind:
            assert asset_info(asset).kind is asset

    def test_display_order(self) -> None:
        assert DISPLAY_ORDER == (AssetKind.BTC, AssetKind.GOLD, AssetKind.SILVER)


# =============================================================================
# CONVERSION INPUT
# =============================================================================


class TestConversionInput:
    """Тесты для ConversionInput"""

    def test_valid(self) -> None:
        request = ConversionInput(asset=AssetKind.GOLD, value=1784.21)
        assert request.asset is AssetKind.GOLD
        assert request.value == 1784.21

    def test_zero_allowed(self) -> None:
        assert ConversionInput(asset="btc", value=0).value == 0.0

    def test_selector_string_coerced(self) -> None:
        assert ConversionInput(asset="silver", value=1.0).asset is AssetKind.SILVER

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConversionInput(asset=AssetKind.BTC, value=-1.0)

    def test_infinite_rejected(self) -> None:
        with pytest.raises(ValidationError, match="finite"):
            ConversionInput(asset=AssetKind.BTC, value=float("inf"))

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConversionInput(asset=AssetKind.BTC, value=float("nan"))

    def test_unknown_asset_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConversionInput(asset="platinum", value=1.0)

    def test_frozen(self) -> None:
        request = ConversionInput(asset=AssetKind.GOLD, value=1.0)
        with pytest.raises(ValidationError):
            request.value = 2.0

    def test_json_dump(self) -> None:
        request = ConversionInput(asset=AssetKind.GOLD, value=1.5)
        assert request.model_dump(mode="json") == {"asset": "gold", "value": 1.5}


# =============================================================================
# CONVERSION RESULT
# =============================================================================


class TestConversionResult:
    """Тесты для ConversionResult"""

    def test_price_of(self, sample_result: ConversionResult) -> None:
        assert sample_result.price_of(AssetKind.GOLD) == 1783.86
        assert sample_result.price_of(AssetKind.SILVER) == 22.39
        assert sample_result.price_of(AssetKind.BTC) == 50_000.0
        assert sample_result.price_of("btc") == 50_000.0

    def test_as_tuple(self, sample_result: ConversionResult) -> None:
        assert sample_result.as_tuple() == (1783.86, 22.39, 50_000.0)

    def test_to_dict_keys(self, sample_result: ConversionResult) -> None:
        """Сериализация под ключами gold / silver / btc"""
        assert sample_result.to_dict() == {
            "gold": 1783.86,
            "silver": 22.39,
            "btc": 50_000.0,
        }

    def test_from_aliases(self) -> None:
        result = ConversionResult(gold=1.0, silver=2.0, btc=3.0)
        assert result.as_tuple() == (1.0, 2.0, 3.0)

    def test_roundtrip_json(self, sample_result: ConversionResult) -> None:
        """JSON сериализация/десериализация"""
        restored = ConversionResult.model_validate_json(
            sample_result.model_dump_json(by_alias=True)
        )
        assert restored == sample_result

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConversionResult(gold_price=-0.01, silver_price=0.0, btc_price=0.0)

    def test_frozen(self, sample_result: ConversionResult) -> None:
        with pytest.raises(ValidationError):
            sample_result.gold_price = 0.0
