"""
AssetKind — Закрытый набор активов конвертера

Три актива:
- GOLD   — золото, цена в USD за тройскую унцию
- SILVER — серебро, цена в USD за тройскую унцию
- BTC    — биткоин, цена в USD за 1 BTC

Набор закрыт: новые активы не добавляются динамически, вся диспетчеризация
по активу обязана быть исчерпывающей.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class AssetKind(str, Enum):
    """
    Актив, цена которого задаётся или вычисляется.

    Значения совпадают с селектором формы ввода.
    """

    GOLD = "gold"
    SILVER = "silver"
    BTC = "btc"


# =============================================================================
# ЕДИНИЦЫ
# =============================================================================

UNIT_PER_OUNCE: Final[str] = "USD/oz"
UNIT_PER_COIN: Final[str] = "USD"


# =============================================================================
# МЕТАДАННЫЕ ОТОБРАЖЕНИЯ
# =============================================================================


@dataclass(frozen=True)
class AssetInfo:
    """Метаданные актива для слоя отображения."""

    kind: AssetKind
    label: str
    unit: str

    # Иконка и её цвет
    icon: str
    color: str

    @property
    def is_ounce_denominated(self) -> bool:
        """Котируется ли актив за тройскую унцию."""
        return self.unit == UNIT_PER_OUNCE


_ASSET_INFO: Final[dict[AssetKind, AssetInfo]] = {
    AssetKind.GOLD: AssetInfo(
        kind=AssetKind.GOLD,
        label="Gold",
        unit=UNIT_PER_OUNCE,
        icon="coins",
        color="yellow",
    ),
    AssetKind.SILVER: AssetInfo(
        kind=AssetKind.SILVER,
        label="Silver",
        unit=UNIT_PER_OUNCE,
        icon="coins",
        color="gray",
    ),
    AssetKind.BTC: AssetInfo(
        kind=AssetKind.BTC,
        label="Bitcoin",
        unit=UNIT_PER_COIN,
        icon="trending-up",
        color="orange",
    ),
}

# Порядок карточек результата
DISPLAY_ORDER: Final[tuple[AssetKind, ...]] = (
    AssetKind.BTC,
    AssetKind.GOLD,
    AssetKind.SILVER,
)


def asset_info(asset: AssetKind) -> AssetInfo:
    """
    Метаданные отображения для актива.

    Args:
        asset: Актив

    Returns:
        AssetInfo (label, unit, icon, color)
    """
    return _ASSET_INFO[AssetKind(asset)]


def asset_label(asset: AssetKind) -> str:
    """Название актива для отображения: "Gold", "Silver", "Bitcoin"."""
    return asset_info(asset).label


def asset_unit(asset: AssetKind) -> str:
    """Единица котировки: "USD/oz" для металлов, "USD" для BTC."""
    return asset_info(asset).unit
