"""
Rectangle — axis-aligned bounding box

Прямоугольник не строится произвольно: он выводится из полигона или из
набора точек через min/max проход по координатам.

Порядок углов фиксирован:
    (minX, minY), (maxX, minY), (maxX, maxY), (minX, maxY)

Это axis-aligned bounding box, а не ориентированный прямоугольник
минимальной площади.
"""

from typing import Any, Iterable, Sequence

from pydantic import BaseModel, Field, field_validator

from geokernel.core.domain.point import Point
from geokernel.core.domain.polygon import Polygon
from geokernel.core.errors import InstantiationFailure
from geokernel.core.math.distance import distance
from geokernel.core.math.numbers import Number, common_number_type
from geokernel.core.math.shoelace import bounding_box, perimeter


class Rectangle(BaseModel):
    """
    Axis-aligned прямоугольник из 4 углов одного типа T.

    Immutable модель (frozen=True).
    """

    vertices: tuple[Point, ...] = Field(
        ..., description="Углы: (minX,minY), (maxX,minY), (maxX,maxY), (minX,maxY)"
    )

    model_config = {"frozen": True}

    def __init__(self, vertices: Sequence[Point], **data: Any) -> None:
        super().__init__(vertices=tuple(vertices), **data)

    @field_validator("vertices")
    @classmethod
    def validate_corners(cls, v: tuple[Point, ...]) -> tuple[Point, ...]:
        """
        Raises:
            InstantiationFailure: Если углов не 4 или типы смешаны
        """
        if len(v) != 4:
            raise InstantiationFailure(
                f"Not a valid rectangle, expected 4 vertices (got {len(v)})."
            )
        try:
            common_number_type(p.x for p in v)
        except TypeError as exc:
            raise InstantiationFailure(f"Not a valid rectangle: {exc}.") from exc
        return v

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Rectangle":
        """
        Bounding box набора точек.

        Порядок точек не важен: принимается любой iterable (в т.ч. set).

        Raises:
            InstantiationFailure: Если набор пуст или типы смешаны
        """
        points = list(points)
        if not points:
            raise InstantiationFailure("Cannot build a bounding box from no points.")

        try:
            min_x, min_y, max_x, max_y = bounding_box(points)
        except TypeError as exc:
            raise InstantiationFailure(f"Not a valid rectangle: {exc}.") from exc

        return cls(
            [
                Point(min_x, min_y),
                Point(max_x, min_y),
                Point(max_x, max_y),
                Point(min_x, max_y),
            ]
        )

    @classmethod
    def from_polygon(cls, polygon: Polygon) -> "Rectangle":
        """Bounding box полигона."""
        return cls.from_points(polygon.vertices)

    @property
    def number_type(self) -> type:
        return self.vertices[0].number_type

    def width(self) -> Number:
        """Длина стороны угол 0 → угол 1."""
        return distance(self.vertices[0], self.vertices[1])

    def height(self) -> Number:
        """Длина стороны угол 1 → угол 2."""
        return distance(self.vertices[1], self.vertices[2])

    def area(self) -> Number:
        """
        Площадь: width * height.

        Raises:
            TypeError: Если T не Floats
            CalculationFailure: Если расчёт расстояния завершился ошибкой
        """
        return self.width() * self.height()

    def perimeter(self) -> Number:
        """Сумма длин 4 сторон замкнутого цикла."""
        return perimeter(self.vertices)

    def to_polygon(self) -> Polygon:
        """Прямоугольник как полигон (с нормализацией обхода)."""
        return Polygon(self.vertices)
