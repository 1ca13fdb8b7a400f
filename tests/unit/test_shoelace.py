"""
Тесты для Shoelace (метрики замкнутого цикла)

Проверяет:
1. closed_edges замыкает цикл
2. signed_area: знак по направлению обхода, величина
3. perimeter замкнутого цикла
4. bounding_box
"""

import numpy as np
import pytest

from geokernel.core.domain.point import Point
from geokernel.core.errors import CalculationFailure
from geokernel.core.math.shoelace import bounding_box, closed_edges, perimeter, signed_area

UNIT_SQUARE_CW = [Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0), Point(1.0, 0.0)]


class TestClosedEdges:
    """Тесты для closed_edges"""

    def test_wraps_last_to_first(self) -> None:
        edges = list(closed_edges([1, 2, 3]))
        assert edges == [(1, 2), (2, 3), (3, 1)]

    def test_edge_count_equals_vertex_count(self) -> None:
        assert len(list(closed_edges(UNIT_SQUARE_CW))) == 4

    def test_empty(self) -> None:
        assert list(closed_edges([])) == []


class TestSignedArea:
    """Тесты для signed_area"""

    def test_clockwise_negative(self) -> None:
        assert signed_area(UNIT_SQUARE_CW) == -1.0

    def test_counter_clockwise_positive(self) -> None:
        assert signed_area(list(reversed(UNIT_SQUARE_CW))) == 1.0

    def test_triangle(self) -> None:
        assert signed_area([(0.0, 0.0), (4.0, 0.0), (0.0, 3.0)]) == 6.0

    def test_degenerate_zero(self) -> None:
        assert signed_area([Point(1.0, 1.0)] * 3) == 0.0

    def test_float32_preserves_type(self) -> None:
        f = np.float32
        area = signed_area([Point(f(0), f(0)), Point(f(2), f(0)), Point(f(2), f(2))])
        assert area == f(2.0)
        assert type(area) is np.float32

    def test_float16_overflow_raises(self) -> None:
        """Сумма shoelace переполняет float16 → CalculationFailure, не inf"""
        f = np.float16
        square = [Point(f(x), f(y)) for x, y in ((0, 0), (300, 0), (300, 300), (0, 300))]
        with pytest.raises(CalculationFailure, match="signed area"):
            signed_area(square)

    def test_float32_overflow_raises(self) -> None:
        f = np.float32
        big = f(1e20)
        with pytest.raises(CalculationFailure, match="not finite"):
            signed_area([Point(f(0), f(0)), Point(big, f(0)), Point(big, big)])

    def test_integer_vertices_raise(self) -> None:
        with pytest.raises(TypeError, match="signed_area requires a floating number type"):
            signed_area([Point(0, 0), Point(1, 0), Point(1, 1)])


class TestPerimeter:
    """Тесты для perimeter"""

    def test_unit_square(self) -> None:
        assert perimeter(UNIT_SQUARE_CW) == 4.0

    def test_right_triangle(self) -> None:
        assert perimeter([(0.0, 0.0), (3.0, 0.0), (3.0, 4.0)]) == 12.0


class TestBoundingBox:
    """Тесты для bounding_box"""

    def test_bounds(self) -> None:
        points = [Point(1.0, 1.0), Point(1.0, -1.0), Point(3.0, -1.0), Point(3.0, 1.0)]
        assert bounding_box(points) == (1.0, -1.0, 3.0, 1.0)

    def test_single_point(self) -> None:
        assert bounding_box([Point(2, 3)]) == (2, 3, 2, 3)

    def test_integer_points_supported(self) -> None:
        assert bounding_box([Point(5, -2), Point(-1, 7)]) == (-1, -2, 5, 7)

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one point"):
            bounding_box([])

    def test_mixed_types_raise(self) -> None:
        with pytest.raises(TypeError, match="mixed number types"):
            bounding_box([Point(0, 0), Point(1.0, 1.0)])
