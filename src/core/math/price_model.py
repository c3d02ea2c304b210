"""
PriceModel — Линейная модель цен Gold / Silver / BTC

По цене одного актива вычисляются подразумеваемые цены двух других
через фиксированные линейные соотношения.

Обозначения: G = золото (USD/oz), S = серебро (USD/oz), B = биткоин (USD).

Вход BTC (value = B):
    G = -0.000007 * B + 1784.21
    S = -0.000015 * B + 23.14

Вход GOLD (value = G):
    B = (1784.21 - G) / 0.000007
    S = 0.0135 * G - 0.51

Вход SILVER (value = S):
    G = (S + 0.51) / 0.0135
    B = (1784.21 - G) / 0.000007

ВАЖНО: три ветки НЕ согласованы алгебраически (соотношение gold↔silver
при входе BTC отличается от соотношения при входе GOLD/SILVER). Это
независимые фиксированные политики, а не одна обратимая система.
Формулы воспроизводятся как есть.

Пост-обработка: каждый из трёх выходов (включая эхо входа) проходит
через floor_at_zero = max(0, x).

Функция чистая: нет состояния, нет I/O, никогда не бросает исключений
для конечного неотрицательного входа.
"""

from typing import Final

from src.core.domain.asset import AssetKind
from src.core.domain.conversion import ConversionInput, ConversionResult
from src.core.math.numerical_safeguards import floor_at_zero


# =============================================================================
# КОНСТАНТЫ МОДЕЛИ
# =============================================================================

# Ветка BTC → GOLD
GOLD_PER_BTC_SLOPE: Final[float] = -0.000007
GOLD_INTERCEPT: Final[float] = 1784.21

# Ветка BTC → SILVER
SILVER_PER_BTC_SLOPE: Final[float] = -0.000015
SILVER_INTERCEPT: Final[float] = 23.14

# Обратная ветка GOLD → BTC: B = (GOLD_INTERCEPT - G) / BTC_GOLD_DIVISOR
BTC_GOLD_DIVISOR: Final[float] = 0.000007

# Ветка GOLD ↔ SILVER: S = SILVER_PER_GOLD * G + SILVER_OFFSET
SILVER_PER_GOLD: Final[float] = 0.0135
SILVER_OFFSET: Final[float] = -0.51


# =============================================================================
# ВЕТКИ МОДЕЛИ (без clamp)
# =============================================================================


def from_btc(btc_price: float) -> tuple[float, float, float]:
    """
    Ветка входа BTC.

    Args:
        btc_price: Цена BTC (USD)

    Returns:
        (gold, silver, btc) без clamp
    """
    gold = GOLD_PER_BTC_SLOPE * btc_price + GOLD_INTERCEPT
    silver = SILVER_PER_BTC_SLOPE * btc_price + SILVER_INTERCEPT
    return gold, silver, btc_price


def btc_from_gold(gold_price: float) -> float:
    """B = (1784.21 - G) / 0.000007"""
    return (GOLD_INTERCEPT - gold_price) / BTC_GOLD_DIVISOR


def from_gold(gold_price: float) -> tuple[float, float, float]:
    """
    Ветка входа GOLD.

    Args:
        gold_price: Цена золота (USD/oz)

    Returns:
        (gold, silver, btc) без clamp
    """
    btc = btc_from_gold(gold_price)
    silver = SILVER_PER_GOLD * gold_price + SILVER_OFFSET
    return gold_price, silver, btc


def from_silver(silver_price: float) -> tuple[float, float, float]:
    """
    Ветка входа SILVER.

    BTC считается от gold этой ветки (до clamp). Для S >= 0 gold всегда
    положителен, так что результат совпадает с расчётом от clamped gold.

    Args:
        silver_price: Цена серебра (USD/oz)

    Returns:
        (gold, silver, btc) без clamp
    """
    gold = (silver_price - SILVER_OFFSET) / SILVER_PER_GOLD
    btc = btc_from_gold(gold)
    return gold, silver_price, btc


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def convert(asset: AssetKind, value: float) -> ConversionResult:
    """
    Конверсия цены одного актива в цены всех трёх.

    Args:
        asset: Актив, цена которого задана
        value: Цена актива (конечная, неотрицательная; валидирует вызывающий)

    Returns:
        ConversionResult, все поля >= 0

    Raises:
        ValueError: Если asset не является AssetKind
    """
    asset = AssetKind(asset)

    if asset is AssetKind.BTC:
        gold, silver, btc = from_btc(value)
    elif asset is AssetKind.GOLD:
        gold, silver, btc = from_gold(value)
    elif asset is AssetKind.SILVER:
        gold, silver, btc = from_silver(value)
    else:  # pragma: no cover
        raise ValueError(f"Unknown asset: {asset!r}")

    return ConversionResult(
        gold_price=floor_at_zero(gold),
        silver_price=floor_at_zero(silver),
        btc_price=floor_at_zero(btc),
    )


def convert_input(request: ConversionInput) -> ConversionResult:
    """
    Конверсия по валидированному запросу.

    Args:
        request: ConversionInput (asset, value >= 0)

    Returns:
        ConversionResult
    """
    return convert(request.asset, request.value)
