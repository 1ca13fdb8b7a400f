"""
Distance — евклидово расстояние между точками

Квадрат расстояния всегда считается в canonical float64 и только затем
конвертируется обратно в T. Так квадрат смещения не переполняет узкие
типы (float16/float32).

Принимает Point или кортеж (x, y): нужны только координаты.

Ошибки:
- distance2: ConversionFailure при непредставимой конверсии T <-> float64
- distance: CalculationFailure, если distance2 завершился ошибкой
- обе: TypeError для типов без capability Floats
"""

from typing import Any

from geokernel.core.errors import CalculationFailure, ConversionFailure
from geokernel.core.math.numbers import (
    Number,
    common_number_type,
    from_canonical,
    require_floats,
    sqrt_of,
    to_canonical,
)


def coordinates(point: Any) -> tuple[Number, Number]:
    """Координаты (x, y) точки или кортежа."""
    if isinstance(point, tuple):
        x, y = point
        return x, y
    return point.x, point.y


def distance2(a: Any, b: Any) -> Number:
    """
    Квадрат расстояния между a и b в типе T.

    Алгоритм:
        (dx, dy) = (b.x - a.x, b.y - a.y) в float64
        distance2 = T(dx² + dy²)

    Raises:
        TypeError: Если T не Floats или точки разных типов
        ConversionFailure: Если координата или результат не представимы

    Examples:
        >>> distance2((0.0, 0.0), (10.0, 10.0))
        200.0
    """
    ax, ay = coordinates(a)
    bx, by = coordinates(b)
    number_type = common_number_type((ax, ay, bx, by))
    require_floats(number_type, "distance2")

    dx = to_canonical(bx) - to_canonical(ax)
    dy = to_canonical(by) - to_canonical(ay)

    return from_canonical(dx * dx + dy * dy, number_type)


def distance(a: Any, b: Any) -> Number:
    """
    Расстояние между a и b в типе T: sqrt(distance2(a, b)).

    Raises:
        TypeError: Если T не Floats или точки разных типов
        CalculationFailure: Если расчёт distance2 завершился ошибкой

    Examples:
        >>> distance((0.0, 0.0), (3.0, 4.0))
        5.0
    """
    try:
        squared = distance2(a, b)
    except ConversionFailure as exc:
        raise CalculationFailure(
            f"Failed to calculate distance2 when calculating distance: {exc}"
        ) from exc

    return sqrt_of(squared)
