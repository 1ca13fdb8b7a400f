"""
Тесты для Rectangle и Circle

Проверяет:
1. Rectangle: bounding box из точек и полигона, порядок углов, метрики
2. Rectangle: ошибки построения
3. Circle: площадь и длина окружности, π в типе T
"""

import math

import numpy as np
import pytest
from pydantic import ValidationError

from geokernel.core.domain.circle import Circle
from geokernel.core.domain.point import Point
from geokernel.core.domain.polygon import Polygon
from geokernel.core.domain.rectangle import Rectangle
from geokernel.core.errors import ConversionFailure, InstantiationFailure

OFFSET_SQUARE = {Point(1.0, 1.0), Point(1.0, -1.0), Point(3.0, -1.0), Point(3.0, 1.0)}


# =============================================================================
# ТЕСТЫ: Rectangle
# =============================================================================


class TestRectangleFromPoints:
    """Bounding box набора точек"""

    def test_corner_order(self) -> None:
        """Углы: (minX,minY), (maxX,minY), (maxX,maxY), (minX,maxY)"""
        rect = Rectangle.from_points(OFFSET_SQUARE)
        assert rect.vertices == (
            Point(1.0, -1.0),
            Point(3.0, -1.0),
            Point(3.0, 1.0),
            Point(1.0, 1.0),
        )

    def test_metrics(self) -> None:
        rect = Rectangle.from_points(OFFSET_SQUARE)
        assert rect.area() == 4.0
        assert rect.perimeter() == 8.0
        assert rect.width() == 2.0
        assert rect.height() == 2.0

    def test_scattered_points(self) -> None:
        points = [Point(0.0, 5.0), Point(-2.0, 1.0), Point(4.0, 3.0), Point(1.0, -1.0)]
        rect = Rectangle.from_points(points)
        assert rect.vertices[0] == Point(-2.0, -1.0)
        assert rect.vertices[2] == Point(4.0, 5.0)
        assert rect.area() == 36.0

    def test_integer_points(self) -> None:
        """Bounding box доступен для Numbers, метрики — только для Floats"""
        rect = Rectangle.from_points([Point(0, 0), Point(4, 3)])
        assert rect.number_type is int
        assert rect.vertices[2] == Point(4, 3)
        with pytest.raises(TypeError, match="requires a floating number type"):
            rect.area()

    def test_empty_raises(self) -> None:
        with pytest.raises(InstantiationFailure, match="no points"):
            Rectangle.from_points([])

    def test_mixed_types_raise(self) -> None:
        with pytest.raises(InstantiationFailure):
            Rectangle.from_points([Point(0, 0), Point(1.0, 1.0)])


class TestRectangleModel:
    """Построение по углам, связь с Polygon"""

    def test_from_polygon(self) -> None:
        polygon = Polygon([Point(0.0, 0.0), Point(4.0, 0.0), Point(2.0, 3.0)])
        rect = Rectangle.from_polygon(polygon)
        assert rect.vertices == (
            Point(0.0, 0.0),
            Point(4.0, 0.0),
            Point(4.0, 3.0),
            Point(0.0, 3.0),
        )
        assert rect.area() == 12.0

    def test_to_polygon(self) -> None:
        rect = Rectangle.from_points(OFFSET_SQUARE)
        polygon = rect.to_polygon()
        assert polygon.vertices == rect.vertices
        assert polygon.area() == rect.area()

    def test_wrong_vertex_count_raises(self) -> None:
        with pytest.raises(InstantiationFailure, match="expected 4 vertices"):
            Rectangle([Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0)])

    def test_mixed_corner_types_raise(self) -> None:
        with pytest.raises(InstantiationFailure):
            Rectangle([Point(0.0, 0.0), Point(1.0, 0.0), Point(1, 1), Point(0.0, 1.0)])

    def test_immutable(self) -> None:
        rect = Rectangle.from_points(OFFSET_SQUARE)
        with pytest.raises(ValidationError):
            rect.vertices = ()  # type: ignore


# =============================================================================
# ТЕСТЫ: Circle
# =============================================================================


class TestCircle:
    """Площадь и длина окружности"""

    def test_radius_ten(self) -> None:
        circle = Circle(Point(0.0, 0.0), 10.0)
        assert circle.area() == pytest.approx(100.0 * math.pi)
        assert circle.circumference() == pytest.approx(20.0 * math.pi)

    def test_unit_circle(self) -> None:
        circle = Circle(Point(5.0, -5.0), 1.0)
        assert circle.area() == math.pi
        assert circle.circumference() == 2.0 * math.pi

    def test_float32(self) -> None:
        f = np.float32
        circle = Circle(Point(f(0), f(0)), f(2))
        area = circle.area()
        assert type(area) is np.float32
        assert area == pytest.approx(4.0 * math.pi, rel=1e-6)
        assert circle.circumference() == pytest.approx(4.0 * math.pi, rel=1e-6)

    def test_integer_radius_pi_not_representable(self) -> None:
        circle = Circle(Point(0, 0), 10)
        with pytest.raises(ConversionFailure):
            circle.area()
        with pytest.raises(ConversionFailure):
            circle.circumference()

    def test_radius_type_must_match_center(self) -> None:
        with pytest.raises(ValidationError, match="center number type"):
            Circle(Point(0.0, 0.0), 10)

    def test_radius_must_be_number(self) -> None:
        with pytest.raises(ValidationError):
            Circle(Point(0.0, 0.0), "10")  # type: ignore

    def test_negative_radius_accepted(self) -> None:
        """Знак радиуса не проверяется"""
        circle = Circle(Point(0.0, 0.0), -1.0)
        assert circle.area() == math.pi
        assert circle.circumference() == -2.0 * math.pi

    def test_immutable(self) -> None:
        circle = Circle(Point(0.0, 0.0), 1.0)
        with pytest.raises(ValidationError):
            circle.radius = 2.0  # type: ignore
