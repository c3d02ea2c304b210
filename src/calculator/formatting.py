"""Formatting — форматирование цен для отображения

Два фиксированных знака после запятой, разделитель тысяч.
Округление выполняется только здесь, ядро возвращает полные float.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.asset import DISPLAY_ORDER, AssetKind, asset_info
from src.core.domain.conversion import ConversionResult
from src.calculator.config import DisplayConfig

_DEFAULT_DISPLAY = DisplayConfig()


def format_price(value: float, config: Optional[DisplayConfig] = None) -> str:
    """Форматирование цены: 254887142.857 → "254,887,142.86".

    Args:
        value: цена
        config: конфигурация отображения (default: 2 знака, "," и ".")

    Returns:
        Отформатированная строка
    """
    config = config or _DEFAULT_DISPLAY
    text = f"{value:,.{config.decimals}f}"
    if config.thousands_separator == "," and config.decimal_separator == ".":
        return text
    # Подмена разделителей через временный маркер
    return (
        text.replace(",", "\x00")
        .replace(".", config.decimal_separator)
        .replace("\x00", config.thousands_separator)
    )


def format_with_unit(
    asset: AssetKind, value: float, config: Optional[DisplayConfig] = None
) -> str:
    """Цена с единицей актива: "1,784.21 USD/oz"."""
    return f"{format_price(value, config)} {asset_info(asset).unit}"


@dataclass(frozen=True)
class ResultRow:
    """Строка (карточка) результата."""

    asset: AssetKind
    label: str
    unit: str
    price: float
    formatted: str

    # Актив совпадает с введённым
    is_input: bool


def result_rows(
    result: ConversionResult,
    input_asset: AssetKind,
    config: Optional[DisplayConfig] = None,
) -> list[ResultRow]:
    """Строки результата в порядке карточек (BTC, Gold, Silver).

    Args:
        result: результат конверсии
        input_asset: актив, цена которого была введена
        config: конфигурация отображения

    Returns:
        Список ResultRow
    """
    config = config or _DEFAULT_DISPLAY
    rows = []
    for asset in DISPLAY_ORDER:
        info = asset_info(asset)
        price = result.price_of(asset)
        rows.append(
            ResultRow(
                asset=asset,
                label=info.label,
                unit=info.unit,
                price=price,
                formatted=f"{config.currency_symbol}{format_price(price, config)}",
                is_input=asset is AssetKind(input_asset),
            )
        )
    return rows


def render_result(
    result: ConversionResult,
    input_asset: AssetKind,
    config: Optional[DisplayConfig] = None,
) -> str:
    """Текстовая таблица результата для CLI.

    Пример:
        Bitcoin  $50,000.00  USD     INPUT
        Gold     $1,783.86   USD/oz
        Silver   $22.39      USD/oz
    """
    rows = result_rows(result, input_asset, config)
    label_width = max(len(r.label) for r in rows)
    price_width = max(len(r.formatted) for r in rows)
    unit_width = max(len(r.unit) for r in rows)

    lines = []
    for row in rows:
        line = (
            f"{row.label:<{label_width}}  "
            f"{row.formatted:<{price_width}}  "
            f"{row.unit:<{unit_width}}"
        )
        if row.is_input:
            line += "  INPUT"
        lines.append(line.rstrip())
    return "\n".join(lines)
