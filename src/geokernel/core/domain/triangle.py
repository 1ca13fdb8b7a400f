"""
Triangle — три вершины одного типа T (capability Numbers)
"""

from typing import Any, Sequence

from pydantic import BaseModel, Field, field_validator

from geokernel.core.domain.point import Point
from geokernel.core.domain.polygon import Polygon
from geokernel.core.math.numbers import common_number_type


class Triangle(BaseModel):
    """Хранение трёх вершин. Метрики доступны через to_polygon()."""

    vertices: tuple[Point, Point, Point] = Field(..., description="Вершины треугольника")

    model_config = {"frozen": True}

    def __init__(self, vertices: Sequence[Point], **data: Any) -> None:
        super().__init__(vertices=tuple(vertices), **data)

    @field_validator("vertices")
    @classmethod
    def validate_number_type(cls, v: tuple[Point, Point, Point]) -> tuple[Point, Point, Point]:
        try:
            common_number_type(p.x for p in v)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc
        return v

    @property
    def number_type(self) -> type:
        return self.vertices[0].number_type

    def to_polygon(self) -> Polygon:
        """
        Треугольник как полигон (с нормализацией обхода).

        Raises:
            TypeError: Если T не Floats
        """
        return Polygon(self.vertices)
