"""
Segment — отрезок (p0, p1) как значение

Immutable Pydantic модель. Направление p0 → p1 важно для знака cross,
но не для пересечения: intersects симметричен.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from geokernel.core.domain.point import Point
from geokernel.core.math.intersection import intersects
from geokernel.core.math.numbers import Number
from geokernel.core.math.numerical_safeguards import EPS_F64
from geokernel.core.math.segment import cross, magnitude, magnitude2, on_segment


class Segment(BaseModel):
    """Отрезок между двумя точками одного типа T."""

    p0: Point = Field(..., description="Начало отрезка")
    p1: Point = Field(..., description="Конец отрезка")

    model_config = {"frozen": True}

    def __init__(self, p0: Point, p1: Point, **data: Any) -> None:
        super().__init__(p0=p0, p1=p1, **data)

    @model_validator(mode="after")
    def validate_number_type(self) -> "Segment":
        """Концы отрезка одного типа T."""
        if self.p0.number_type is not self.p1.number_type:
            raise ValueError(
                f"segment endpoints must share one number type, "
                f"got {self.p0.number_type.__name__} and {self.p1.number_type.__name__}"
            )
        return self

    @property
    def number_type(self) -> type:
        return self.p0.number_type

    def reversed(self) -> "Segment":
        return Segment(self.p1, self.p0)

    def cross(self, other: Point) -> Number:
        """Знаковая ориентация точки other относительно p0 → p1."""
        return cross(self.p0, self.p1, other)

    def contains(self, other: Point, eps: float = EPS_F64) -> bool:
        """Лежит ли точка на отрезке (тест суммы расстояний)."""
        return on_segment(self.p0, self.p1, other, eps=eps)

    def magnitude(self) -> Number:
        return magnitude(self.p0, self.p1)

    def magnitude2(self) -> Number:
        return magnitude2(self.p0, self.p1)

    def intersects(self, other: "Segment", eps: float = EPS_F64) -> bool:
        """Имеют ли отрезки общую точку."""
        return intersects(self.p0, self.p1, other.p0, other.p1, eps=eps)
