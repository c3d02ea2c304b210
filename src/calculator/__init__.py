"""Calculator — слой формы над ядром конверсии.

- Разбор текста ввода и отказ на недопустимых значениях
- Форматирование цен (2 знака, разделитель тысяч)
- Сессия формы с пересчётом на каждое изменение ввода
- JSON граница с проверкой контрактов
- CLI
"""

from .config import CalculatorConfig, DisplayConfig
from .formatting import ResultRow, format_price, format_with_unit, render_result, result_rows
from .input_parsing import InvalidPriceInput, parse_price_input, require_price_input
from .payload import convert_payload, request_from_payload, result_to_payload
from .session import CalculatorSession

__all__ = [
    "CalculatorConfig",
    "DisplayConfig",
    "ResultRow",
    "format_price",
    "format_with_unit",
    "render_result",
    "result_rows",
    "InvalidPriceInput",
    "parse_price_input",
    "require_price_input",
    "convert_payload",
    "request_from_payload",
    "result_to_payload",
    "CalculatorSession",
]
