"""
Numerical Safeguards — Safe Math Primitives

Примитивы численной устойчивости для модели цен:
- NaN/Inf проверка входов
- floor-at-zero для выходов модели

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. floor_at_zero никогда не возвращает отрицательное значение
2. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# NaN/Inf ПРОВЕРКА
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# FLOOR AT ZERO
# =============================================================================


def floor_at_zero(value: float) -> float:
    """
    Пол на нуле: max(0, value).

    Отрицательное значение заменяется на 0.0, неотрицательное возвращается
    без изменений (бит в бит).

    Examples:
        >>> floor_at_zero(23.14)
        23.14
        >>> floor_at_zero(-0.51)
        0.0
    """
    # -0.0 тоже приводится к 0.0
    if value <= 0.0:
        return 0.0
    return value
