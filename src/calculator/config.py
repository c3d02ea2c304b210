"""Конфигурация калькулятора и форматирования вывода."""

from dataclasses import dataclass, field

from src.core.domain.asset import AssetKind


@dataclass(frozen=True)
class DisplayConfig:
    """Конфигурация форматирования цен.

    Фиксированное число знаков после запятой и разделитель тысяч.
    """

    decimals: int = 2
    thousands_separator: str = ","
    decimal_separator: str = "."

    # Префикс валюты в карточках результата
    currency_symbol: str = "$"


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация сессии калькулятора."""

    # Актив, выбранный по умолчанию в форме
    default_asset: AssetKind = AssetKind.BTC

    display: DisplayConfig = field(default_factory=DisplayConfig)
