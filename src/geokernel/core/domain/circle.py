"""
Circle — окружность (center, radius)

Знак радиуса не проверяется. Метрики считаются в типе T радиуса,
π конвертируется в T и для целочисленных типов не представим.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from geokernel.core.domain.point import Point
from geokernel.core.math.numbers import Number, is_number, pi_for


class Circle(BaseModel):
    """Все точки окружности равноудалены от центра."""

    center: Point = Field(..., description="Центр окружности")
    radius: Any = Field(..., description="Радиус (тип T центра)")

    model_config = {"frozen": True}

    def __init__(self, center: Point, radius: Number, **data: Any) -> None:
        super().__init__(center=center, radius=radius, **data)

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: Any) -> Any:
        if not is_number(v):
            raise ValueError(f"radius must be a supported number, got {type(v).__name__}")
        return v

    @model_validator(mode="after")
    def validate_number_type(self) -> "Circle":
        """Радиус и центр одного типа T."""
        if type(self.radius) is not self.center.number_type:
            raise ValueError(
                f"radius must share the center number type, "
                f"got {type(self.radius).__name__} and {self.center.number_type.__name__}"
            )
        return self

    def pi(self) -> Number:
        """
        π в типе T.

        Raises:
            ConversionFailure: Если T не может представить π
        """
        return pi_for(type(self.radius))

    def area(self) -> Number:
        """radius² · π"""
        return self.radius * self.radius * self.pi()

    def circumference(self) -> Number:
        """2 · radius · π"""
        return (self.radius + self.radius) * self.pi()
