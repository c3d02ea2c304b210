"""Input Parsing — разбор текста поля ввода в цену

Граница между формой и ядром: ядро получает только конечное
неотрицательное число. Всё остальное отклоняется здесь.

Коды отказа:
- empty_input      — пустая строка / только пробелы
- not_a_number     — текст не разбирается как число
- not_finite       — NaN / Inf
- negative_value   — число < 0
"""

import logging
import re
from typing import Final, Optional

from src.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)


REASON_EMPTY_INPUT: Final[str] = "empty_input"
REASON_NOT_A_NUMBER: Final[str] = "not_a_number"
REASON_NOT_FINITE: Final[str] = "not_finite"
REASON_NEGATIVE_VALUE: Final[str] = "negative_value"

# Число со знаком: "1784.21", ".5", "1e3" или с разделителем тысяч "1,784.21"
_NUMBER_RE: Final[re.Pattern] = re.compile(
    r"[+-]?(?:\d{1,3}(?:,\d{3})+(?:\.\d*)?|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

# NaN / Inf в написании float()
_NON_FINITE_RE: Final[re.Pattern] = re.compile(r"[+-]?(?:nan|inf|infinity)", re.IGNORECASE)


class InvalidPriceInput(ValueError):
    """Текст поля ввода не является неотрицательной конечной ценой.

    Attributes:
        text: исходный текст
        reason: машинно-читаемый код отказа
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid price input {text!r} ({reason})")


def require_price_input(text: str) -> float:
    """Разбор текста в цену с отказом через исключение.

    Допускаются пробелы по краям и разделитель тысяч "," только в
    позициях тысяч (как в отформатированном выводе). "_" и прочие
    формы, которые принимает float(), отклоняются.

    Args:
        text: текст поля ввода

    Returns:
        Цена (конечная, >= 0)

    Raises:
        InvalidPriceInput: если текст не является допустимой ценой
    """
    stripped = text.strip() if text is not None else ""
    if not stripped:
        raise InvalidPriceInput(text, REASON_EMPTY_INPUT)

    if _NON_FINITE_RE.fullmatch(stripped):
        raise InvalidPriceInput(text, REASON_NOT_FINITE)

    if not _NUMBER_RE.fullmatch(stripped):
        raise InvalidPriceInput(text, REASON_NOT_A_NUMBER)

    value = float(stripped.replace(",", ""))

    # "1e400" переполняется в Inf
    if not is_valid_float(value):
        raise InvalidPriceInput(text, REASON_NOT_FINITE)

    if value < 0:
        raise InvalidPriceInput(text, REASON_NEGATIVE_VALUE)

    # "-0" разбирается в -0.0
    return value + 0.0


def parse_price_input(text: str) -> Optional[float]:
    """Разбор текста в цену; None если текст недопустим."""
    try:
        return require_price_input(text)
    except InvalidPriceInput as e:
        logger.debug("Rejected price input %r: %s", e.text, e.reason)
        return None
