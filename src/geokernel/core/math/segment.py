"""
Segment Predicates — ориентация и принадлежность отрезку

Отрезок задаётся парой точек (p0, p1). Точки — Point или кортежи (x, y).

ФОРМУЛЫ:
    cross(p0, p1, o) = p0.x*p1.y + p1.x*o.y + o.x*p0.y
                     - p0.x*o.y - p1.x*p0.y - o.x*p1.y

    Удвоенная знаковая площадь треугольника (p0, p1, o):
    > 0 — o слева от p0→p1 (поворот против часовой стрелки)
    < 0 — o справа
    = 0 — коллинеарны

    on_segment: d(p0, o) + d(p1, o) - d(p0, p1) ≈ 0 (в пределах eps)
    within_bounds: o внутри bounding box отрезка (в пределах tol)

Тест по сумме расстояний устойчив к округлению, но НЕ к очень длинным
отрезкам: абсолютный eps теряет смысл при больших длинах. Для таких
данных передавайте eps явно.
"""

from typing import Any

from geokernel.core.math.distance import coordinates, distance, distance2
from geokernel.core.math.numbers import (
    Number,
    common_number_type,
    epsilon_for,
    require_floats,
)
from geokernel.core.math.numerical_safeguards import (
    EPS_F64,
    approximately_equal,
    approximately_gte,
    approximately_lte,
    validate_eps,
)


def cross(p0: Any, p1: Any, other: Any) -> Number:
    """
    Знаковая ориентация точки other относительно отрезка p0→p1.

    Считается в типе T (capability Numbers).

    Raises:
        TypeError: Если точки разных типов

    Examples:
        >>> cross((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))
        1.0
    """
    x0, y0 = coordinates(p0)
    x1, y1 = coordinates(p1)
    ox, oy = coordinates(other)
    common_number_type((x0, y0, x1, y1, ox, oy))

    return x0 * y1 + x1 * oy + ox * y0 - x0 * oy - x1 * y0 - ox * y1


def magnitude(p0: Any, p1: Any) -> Number:
    """Длина отрезка."""
    return distance(p0, p1)


def magnitude2(p0: Any, p1: Any) -> Number:
    """Квадрат длины отрезка."""
    return distance2(p0, p1)


def on_segment(p0: Any, p1: Any, other: Any, eps: float = EPS_F64) -> bool:
    """
    Лежит ли точка other на отрезке p0→p1.

    Коллинеарность + нахождение между концами через равенство
    суммы расстояний длине отрезка.

    Args:
        p0, p1: Концы отрезка
        other: Проверяемая точка
        eps: Толерантность в canonical домене (default: EPS_F64)

    Raises:
        ValueError: Если eps отрицательный или NaN/Inf
        TypeError: Если T не Floats
        ConversionFailure: Если eps не представим в T
        CalculationFailure: Если расчёт расстояния завершился ошибкой
    """
    validate_eps(eps)
    x0, _ = coordinates(p0)
    require_floats(type(x0), "on_segment")
    tol = epsilon_for(type(x0), eps)

    return approximately_equal(
        distance(p0, other) + distance(p1, other), distance(p0, p1), tol
    )


def within_bounds(p0: Any, p1: Any, other: Any, tol: Number) -> bool:
    """
    Лежит ли other внутри bounding box отрезка p0→p1 (с учётом tol).

    Для точки, коллинеарность которой уже установлена через cross,
    это точная проверка "между концами" без накопления ошибки
    суммы расстояний.

    Args:
        tol: Толерантность в типе T (см. epsilon_for)
    """
    x0, y0 = coordinates(p0)
    x1, y1 = coordinates(p1)
    ox, oy = coordinates(other)
    return (
        approximately_gte(ox, min(x0, x1), tol)
        and approximately_lte(ox, max(x0, x1), tol)
        and approximately_gte(oy, min(y0, y1), tol)
        and approximately_lte(oy, max(y0, y1), tol)
    )
