"""
Numerical Safeguards — Epsilon-сравнения для геометрических предикатов

Модуль централизует все сравнения с толерантностью:
- Epsilon-равенство и нестрогие неравенства (|diff| <= eps считается равенством)
- Классификация знака значения с учётом eps (-1 / 0 / +1)
- Проверка валидности float (NaN/Inf)

Все функции принимают толерантность явным параметром. Предикаты ядра
(ориентация, пересечение, принадлежность отрезку) сравнивают модуль
значения с eps, а не само значение со сдвинутым порогом +eps/-eps.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение симметрично: approximately_equal(a, b) == approximately_equal(b, a)
2. Результат всегда Python bool/int (не numpy.bool_)
3. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon float64, единая толерантность геометрических предикатов
EPS_F64: Final[float] = sys.float_info.epsilon


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: Any) -> bool:
    """
    Проверка, является ли значение конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение (int, float или numpy scalar)

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def validate_eps(eps: Any) -> None:
    """
    Валидация толерантности.

    Raises:
        ValueError: Если eps отрицательный или NaN/Inf
    """
    if not is_valid_float(eps):
        raise ValueError(f"eps must be a valid float (not NaN/Inf), got {eps}")

    if eps < 0:
        raise ValueError(f"eps must be non-negative, got {eps}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def approximately_equal(a: Any, b: Any, eps: Any = EPS_F64) -> bool:
    """
    Равенство с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) <= eps

    Examples:
        >>> approximately_equal(1.0, 1.0 + 1e-17)
        True
        >>> approximately_equal(1.0, 1.1)
        False
    """
    return bool(abs(a - b) <= eps)


def approximately_lte(a: Any, b: Any, eps: Any = EPS_F64) -> bool:
    """
    a <= b с учётом толерантности.

    True если a < b или a ≈ b (в пределах eps).
    """
    return bool(a - b <= eps)


def approximately_gte(a: Any, b: Any, eps: Any = EPS_F64) -> bool:
    """
    a >= b с учётом толерантности.

    True если a > b или a ≈ b (в пределах eps).
    """
    return bool(b - a <= eps)


def is_zero(value: Any, tol: Any = EPS_F64) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Returns:
        True если abs(value) <= tol
    """
    return bool(abs(value) <= tol)


def is_positive(value: Any, tol: Any = EPS_F64) -> bool:
    """
    Returns:
        True если value > tol
    """
    return bool(value > tol)


def is_negative(value: Any, tol: Any = EPS_F64) -> bool:
    """
    Returns:
        True если value < -tol
    """
    return bool(value < -tol)


def compare_with_tolerance(a: Any, b: Any, tol: Any = EPS_F64) -> int:
    """
    Сравнение двух значений с учётом толерантности.

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-17)
        0
    """
    diff = a - b

    if is_zero(diff, tol):
        return 0
    elif is_positive(diff, tol):
        return 1
    else:
        return -1

