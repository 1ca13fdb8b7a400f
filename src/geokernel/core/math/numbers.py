"""
Numbers — числовая абстракция геометрического ядра

Геометрия параметризована типом числа T. Поддерживаемые типы:
- Python int и float
- NumPy fixed-width скаляры: int8..int64, uint8..uint64, float16..float64

Две capability:
- Numbers: хранение, порядок, арифметика (все поддерживаемые типы).
  Используется Point / Segment / Triangle и cross-product.
- Floats: Numbers + sqrt, π и представимый epsilon (float и numpy.floating).
  Требуется для расстояний, площадей, периметров и предикатов с толерантностью.

Canonical домен — float64. Все переходы T <-> float64 проходят через
to_canonical / from_canonical.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Непредставимое значение → ConversionFailure, никогда не silent truncation
2. Дробное значение в целочисленный тип → ConversionFailure (не округление)
3. NaN/Inf не представимы ни в одном типе
4. Нарушение capability → TypeError
5. Ненулевое значение, обращающееся в ноль в узком float → ConversionFailure
"""

import logging
import math
from typing import Any, Final, Iterable, Union

import numpy as np

from geokernel.core.errors import ConversionFailure
from geokernel.core.math.numerical_safeguards import EPS_F64

logger = logging.getLogger(__name__)

# Аннотация для значений любого поддерживаемого типа
Number = Union[int, float, np.integer, np.floating]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# π в canonical домене
PI_F64: Final[float] = math.pi


# =============================================================================
# CAPABILITY
# =============================================================================


def is_integer_type(number_type: type) -> bool:
    """Целочисленный тип (bool и numpy.bool_ исключены)."""
    if issubclass(number_type, bool):
        return False
    return issubclass(number_type, (int, np.integer))


def is_float_type(number_type: type) -> bool:
    """Тип с capability Floats."""
    return issubclass(number_type, (float, np.floating))


def is_number_type(number_type: type) -> bool:
    """Тип с capability Numbers."""
    return is_integer_type(number_type) or is_float_type(number_type)


def is_number(value: Any) -> bool:
    """Значение поддерживаемого числового типа."""
    return is_number_type(type(value))


def number_type_of(value: Any) -> type:
    """
    Тип числа T для значения.

    Raises:
        TypeError: Если тип не поддерживается
    """
    number_type = type(value)
    if not is_number_type(number_type):
        raise TypeError(f"unsupported number type: {number_type.__name__}")
    return number_type


def common_number_type(values: Iterable[Any]) -> type:
    """
    Общий тип T для набора значений.

    Raises:
        TypeError: Если набор пуст, содержит неподдерживаемый тип
            или значения разных типов
    """
    number_types = {number_type_of(v) for v in values}
    if not number_types:
        raise TypeError("cannot infer number type from an empty collection")
    if len(number_types) > 1:
        names = ", ".join(sorted(t.__name__ for t in number_types))
        raise TypeError(f"mixed number types: {names}")
    return number_types.pop()


def require_numbers(number_type: type, operation: str) -> None:
    """
    Raises:
        TypeError: Если тип не обладает capability Numbers
    """
    if not is_number_type(number_type):
        raise TypeError(
            f"{operation} requires a number type, got {number_type.__name__}"
        )


def require_floats(number_type: type, operation: str) -> None:
    """
    Raises:
        TypeError: Если тип не обладает capability Floats
    """
    if not is_float_type(number_type):
        raise TypeError(
            f"{operation} requires a floating number type, got {number_type.__name__}"
        )


# =============================================================================
# КОНВЕРСИЯ T <-> CANONICAL
# =============================================================================


def to_canonical(value: Number) -> float:
    """
    Конверсия значения T в canonical float64.

    Raises:
        ConversionFailure: Если значение не представимо в float64
            (NaN/Inf или int вне диапазона float64)
    """
    try:
        result = float(value)
    except OverflowError as exc:
        logger.debug("Conversion of %r into float64 overflowed", value)
        raise ConversionFailure(
            f"Failed to convert {value!r} into float64: value out of range."
        ) from exc

    if not math.isfinite(result):
        raise ConversionFailure(f"Failed to convert {value!r} into float64: not finite.")

    return result


def _integral_to(value: int, number_type: type) -> Number:
    """Целое значение в целочисленный тип T с проверкой диапазона."""
    if issubclass(number_type, np.integer):
        info = np.iinfo(number_type)
        if value < info.min or value > info.max:
            logger.debug("%d is outside of %s range", value, number_type.__name__)
            raise ConversionFailure(
                f"Failed to convert {value} into {number_type.__name__}: "
                f"outside of [{info.min}, {info.max}]."
            )
    return number_type(value)


def from_canonical(value: float, number_type: type) -> Number:
    """
    Конверсия canonical float64 в тип T.

    Для целочисленных T значение должно быть целым и в диапазоне типа.
    Для float T значение не должно переполнять тип или обращаться в ноль
    (потеря точности допустима).

    Raises:
        TypeError: Если number_type не поддерживается
        ConversionFailure: Если значение не представимо в T
    """
    require_numbers(number_type, "conversion")

    if not math.isfinite(value):
        raise ConversionFailure(
            f"Failed to convert {value!r} into {number_type.__name__}: not finite."
        )

    if is_integer_type(number_type):
        if not float(value).is_integer():
            logger.debug("%r has no representation in %s", value, number_type.__name__)
            raise ConversionFailure(
                f"Failed to convert {value!r} into {number_type.__name__}: "
                f"value is not integral."
            )
        return _integral_to(int(value), number_type)

    with np.errstate(over="ignore"):
        result = number_type(value)

    if not math.isfinite(result):
        logger.debug("%r overflows %s", value, number_type.__name__)
        raise ConversionFailure(
            f"Failed to convert {value!r} into {number_type.__name__}: value out of range."
        )

    if result == 0 and value != 0:
        logger.debug("%r underflows %s", value, number_type.__name__)
        raise ConversionFailure(
            f"Failed to convert {value!r} into {number_type.__name__}: "
            f"value underflows to zero."
        )

    return result


def cast(value: Number, number_type: type) -> Number:
    """
    Конверсия значения в другой тип T.

    Целое → целое конвертируется без float64 (без потери точности),
    остальные пары проходят через canonical домен.

    Raises:
        TypeError: Если один из типов не поддерживается
        ConversionFailure: Если значение не представимо в number_type
    """
    require_numbers(number_type, "cast")
    if is_integer_type(number_type_of(value)) and is_integer_type(number_type):
        return _integral_to(int(value), number_type)
    return from_canonical(to_canonical(value), number_type)


# =============================================================================
# КОНСТАНТЫ В ТИПЕ T
# =============================================================================


def epsilon_for(number_type: type, eps: float = EPS_F64) -> Number:
    """
    Толерантность eps в типе T.

    Для целочисленных T и float16 epsilon float64 не представим → ConversionFailure.
    """
    return from_canonical(eps, number_type)


def pi_for(number_type: type) -> Number:
    """
    π в типе T.

    Raises:
        ConversionFailure: Если T не может представить π (целочисленные типы)
    """
    return from_canonical(PI_F64, number_type)


def zero_for(number_type: type) -> Number:
    return from_canonical(0.0, number_type)


def half_for(number_type: type) -> Number:
    return from_canonical(0.5, number_type)


def sqrt_of(value: Number) -> Number:
    """
    Квадратный корень в типе значения.

    Raises:
        TypeError: Если тип не обладает capability Floats
        ValueError: Если значение отрицательное
    """
    number_type = number_type_of(value)
    require_floats(number_type, "sqrt")
    return number_type(math.sqrt(value))
