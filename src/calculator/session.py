"""CalculatorSession — состояние формы калькулятора

Хранит выбранный актив, текст поля ввода и текущий результат.
Каждое изменение ввода (текст или актив) вызывает чистую функцию convert
на валидированном значении.

Политика при недопустимом вводе:
- set_input / set_asset: результат сбрасывается в None (без устаревших значений)
- calculate: состояние не меняется, возвращается None
"""

import logging
from typing import Optional

from src.core.domain.asset import AssetKind
from src.core.domain.conversion import ConversionResult
from src.core.math.price_model import convert
from src.calculator.config import CalculatorConfig
from src.calculator.formatting import ResultRow, result_rows
from src.calculator.input_parsing import parse_price_input

logger = logging.getLogger(__name__)


class CalculatorSession:
    """Сессия калькулятора (один пользователь, одна форма).

    Stateless ядро + минимальное состояние формы. Не потокобезопасна;
    для параллельных пользователей создаётся отдельная сессия.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()
        self._asset: AssetKind = self.config.default_asset
        self._input_text: str = ""
        self._result: Optional[ConversionResult] = None

    # -------------------------------------------------------------------------
    # STATE
    # -------------------------------------------------------------------------

    @property
    def asset(self) -> AssetKind:
        return self._asset

    @property
    def input_text(self) -> str:
        return self._input_text

    @property
    def result(self) -> Optional[ConversionResult]:
        return self._result

    # -------------------------------------------------------------------------
    # EVENTS
    # -------------------------------------------------------------------------

    def set_asset(self, asset: AssetKind) -> Optional[ConversionResult]:
        """Смена актива; пересчёт по текущему тексту ввода.

        Args:
            asset: новый актив

        Returns:
            Новый результат или None
        """
        self._asset = AssetKind(asset)
        return self._recompute()

    def set_input(self, text: str) -> Optional[ConversionResult]:
        """Изменение текста ввода; пересчёт или сброс результата.

        Args:
            text: новый текст поля ввода

        Returns:
            Новый результат или None
        """
        self._input_text = text
        return self._recompute()

    def calculate(self) -> Optional[ConversionResult]:
        """Явный расчёт (кнопка).

        При недопустимом вводе состояние не меняется.

        Returns:
            Результат или None, если ввод недопустим
        """
        value = parse_price_input(self._input_text)
        if value is None:
            return None
        self._result = convert(self._asset, value)
        return self._result

    def clear(self) -> None:
        """Сброс ввода и результата."""
        self._input_text = ""
        self._result = None

    # -------------------------------------------------------------------------
    # VIEW
    # -------------------------------------------------------------------------

    def rows(self) -> list[ResultRow]:
        """Строки результата для отображения; пусто если результата нет."""
        if self._result is None:
            return []
        return result_rows(self._result, self._asset, self.config.display)

    def _recompute(self) -> Optional[ConversionResult]:
        value = parse_price_input(self._input_text)
        if value is None:
            self._result = None
            return None

        self._result = convert(self._asset, value)
        logger.debug(
            "Recomputed %s=%s -> gold=%s silver=%s btc=%s",
            self._asset.value,
            value,
            self._result.gold_price,
            self._result.silver_price,
            self._result.btc_price,
        )
        return self._result
