"""Payload — JSON граница калькулятора

Запрос и результат в виде dict проходят через JSON Schema контракты
(conversion_request / conversion_result) до и после вызова ядра.
"""

import logging
from typing import Any, Dict

from src.core.contracts import validate_conversion_request, validate_conversion_result
from src.core.domain.conversion import ConversionInput, ConversionResult
from src.core.math.price_model import convert_input

logger = logging.getLogger(__name__)


def request_from_payload(data: Dict[str, Any]) -> ConversionInput:
    """Запрос из dict: контракт, затем Pydantic модель.

    Args:
        data: {"asset": ..., "value": ...}

    Returns:
        ConversionInput

    Raises:
        jsonschema.ValidationError: Если dict не соответствует контракту
        pydantic.ValidationError: Если value не конечно
    """
    validate_conversion_request(data)
    return ConversionInput.model_validate(data)


def result_to_payload(result: ConversionResult) -> Dict[str, Any]:
    """Результат в dict по контракту conversion_result.

    Raises:
        jsonschema.ValidationError: Если результат нарушает контракт
    """
    data = result.to_dict()
    validate_conversion_result(data)
    return data


def convert_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    """Конверсия dict → dict с проверкой обоих контрактов."""
    request = request_from_payload(data)
    result = convert_input(request)
    logger.debug("Converted payload %s=%s", request.asset.value, request.value)
    return result_to_payload(result)
