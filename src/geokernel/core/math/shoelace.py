"""
Shoelace — метрики замкнутого цикла вершин

Вершины образуют замкнутый цикл: последняя соединяется с первой.

ФОРМУЛЫ:
    signed_area = 0.5 * Σ (x_i * y_{i+1} - x_{i+1} * y_i)
    perimeter   = Σ d(v_i, v_{i+1})

Знак signed_area кодирует направление обхода: > 0 — против часовой стрелки
(в стандартной системе координат с осью Y вверх).
"""

import math
from typing import Any, Iterator, Sequence

import numpy as np

from geokernel.core.errors import CalculationFailure
from geokernel.core.math.distance import coordinates, distance
from geokernel.core.math.numbers import (
    Number,
    common_number_type,
    half_for,
    require_floats,
    zero_for,
)


def closed_edges(vertices: Sequence[Any]) -> Iterator[tuple[Any, Any]]:
    """
    Рёбра замкнутого цикла: (v0, v1), (v1, v2), ..., (v_{n-1}, v0).

    Examples:
        >>> list(closed_edges(["a", "b", "c"]))
        [('a', 'b'), ('b', 'c'), ('c', 'a')]
    """
    count = len(vertices)
    for i in range(count):
        yield vertices[i], vertices[(i + 1) % count]


def _number_type(vertices: Sequence[Any], operation: str) -> type:
    number_type = common_number_type(
        c for vertex in vertices for c in coordinates(vertex)
    )
    require_floats(number_type, operation)
    return number_type


def _require_finite(value: Number, operation: str) -> Number:
    """
    Raises:
        CalculationFailure: Если накопленная сумма переполнила тип T
    """
    if not math.isfinite(value):
        raise CalculationFailure(
            f"Failed to calculate {operation}: result {value!r} is not finite "
            f"in {type(value).__name__}."
        )
    return value


def signed_area(vertices: Sequence[Any]) -> Number:
    """
    Знаковая площадь замкнутого цикла (shoelace) в типе T.

    Raises:
        TypeError: Если T не Floats, набор пуст или типы смешаны
        ConversionFailure: Если 0 или 0.5 не представимы в T
        CalculationFailure: Если сумма переполнила T (inf/nan)

    Examples:
        >>> signed_area([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
        1.0
    """
    number_type = _number_type(vertices, "signed_area")

    total = zero_for(number_type)
    with np.errstate(over="ignore", invalid="ignore"):
        for v0, v1 in closed_edges(vertices):
            x0, y0 = coordinates(v0)
            x1, y1 = coordinates(v1)
            total = total + (x0 * y1 - x1 * y0)
        area = total * half_for(number_type)

    return _require_finite(area, "signed area")


def perimeter(vertices: Sequence[Any]) -> Number:
    """
    Сумма длин рёбер замкнутого цикла в типе T.

    Raises:
        TypeError: Если T не Floats, набор пуст или типы смешаны
        CalculationFailure: Если расчёт длины ребра или сумма завершились ошибкой
    """
    number_type = _number_type(vertices, "perimeter")

    total = zero_for(number_type)
    with np.errstate(over="ignore"):
        for v0, v1 in closed_edges(vertices):
            total = total + distance(v0, v1)

    return _require_finite(total, "perimeter")


def bounding_box(points: Sequence[Any]) -> tuple[Number, Number, Number, Number]:
    """
    Границы axis-aligned bounding box (capability Numbers).

    Returns:
        (min_x, min_y, max_x, max_y)

    Raises:
        ValueError: Если набор точек пуст
        TypeError: Если типы смешаны
    """
    if not points:
        raise ValueError("bounding box requires at least one point")

    common_number_type(c for point in points for c in coordinates(point))

    min_x, min_y = coordinates(points[0])
    max_x, max_y = min_x, min_y
    for point in points[1:]:
        x, y = coordinates(point)
        min_x = min(min_x, x)
        max_x = max(max_x, x)
        min_y = min(min_y, y)
        max_y = max(max_y, y)

    return min_x, min_y, max_x, max_y
