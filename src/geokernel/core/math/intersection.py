"""
Intersection — тест пересечения двух отрезков

Для отрезков A = (a0, a1) и B = (b0, b1):
    d1 = cross(B, a0)    d2 = cross(B, a1)
    d3 = cross(A, b0)    d4 = cross(A, b1)

1. Общее положение: знаки (d1, d2) строго противоположны И
   знаки (d3, d4) строго противоположны → пересекаются.
2. Касание концом / коллинеарное наложение: dk ≈ 0 (|dk| <= eps) И
   соответствующая точка внутри bounding box другого отрезка → пересекаются.
   Коллинеарность уже установлена через dk, поэтому проверяется только
   положение между концами.
3. Иначе → не пересекаются.

Знак каждого dk определяется через compare_with_tolerance(dk, 0, tol): значения в
пределах eps от нуля считаются нулём, а не сравниваются с порогом +eps.

Тест симметричен: intersects(A, B) == intersects(B, A).
"""

from typing import Any

from geokernel.core.math.distance import coordinates
from geokernel.core.math.numbers import common_number_type, epsilon_for, require_floats
from geokernel.core.math.numerical_safeguards import (
    EPS_F64,
    compare_with_tolerance,
    validate_eps,
)
from geokernel.core.math.segment import cross, within_bounds


def intersects(a0: Any, a1: Any, b0: Any, b1: Any, eps: float = EPS_F64) -> bool:
    """
    Пересекаются ли отрезки a0→a1 и b0→b1.

    Args:
        a0, a1: Концы отрезка A
        b0, b1: Концы отрезка B
        eps: Толерантность в canonical домене (default: EPS_F64)

    Returns:
        True если отрезки имеют хотя бы одну общую точку

    Raises:
        ValueError: Если eps отрицательный или NaN/Inf
        TypeError: Если T не Floats или точки разных типов
        ConversionFailure: Если eps не представим в T

    Examples:
        >>> intersects((0.0, 0.0), (10.0, 10.0), (0.0, 10.0), (10.0, 0.0))
        True
        >>> intersects((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0))
        False
    """
    validate_eps(eps)
    number_type = common_number_type(
        c for point in (a0, a1, b0, b1) for c in coordinates(point)
    )
    require_floats(number_type, "intersects")
    tol = epsilon_for(number_type, eps)

    s1 = compare_with_tolerance(cross(b0, b1, a0), 0, tol)
    s2 = compare_with_tolerance(cross(b0, b1, a1), 0, tol)
    s3 = compare_with_tolerance(cross(a0, a1, b0), 0, tol)
    s4 = compare_with_tolerance(cross(a0, a1, b1), 0, tol)

    if s1 * s2 < 0 and s3 * s4 < 0:
        return True

    # Касание: sign == 0 (коллинеарность) и точка между концами другого отрезка
    touches = (
        (s1, (b0, b1), a0),
        (s2, (b0, b1), a1),
        (s3, (a0, a1), b0),
        (s4, (a0, a1), b1),
    )
    for sign, (p0, p1), point in touches:
        if sign == 0 and within_bounds(p0, p1, point, tol):
            return True

    return False
