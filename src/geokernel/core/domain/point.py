"""
Point — атомарное геометрическое значение (x, y)

Immutable Pydantic модель над типом числа T (capability Numbers).
Обе координаты имеют один и тот же тип T. Идентичность только по
координатам: точки с равными координатами равны и имеют равный hash.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from geokernel.core.math.numbers import (
    Number,
    cast,
    is_number,
    number_type_of,
    to_canonical,
)


class Point(BaseModel):
    """
    Точка на плоскости.

    Immutable модель (frozen=True). Арифметика (+, -) выполняется в типе T
    и возвращает новую точку.
    """

    x: Any = Field(..., description="Координата X (тип T)")
    y: Any = Field(..., description="Координата Y (тип T)")

    model_config = {"frozen": True}

    def __init__(self, x: Number, y: Number, **data: Any) -> None:
        super().__init__(x=x, y=y, **data)

    @field_validator("x", "y")
    @classmethod
    def validate_coordinate(cls, v: Any) -> Any:
        """Координата должна быть поддерживаемым числом (bool не число)."""
        if not is_number(v):
            raise ValueError(
                f"coordinate must be a supported number, got {type(v).__name__}"
            )
        return v

    @model_validator(mode="after")
    def validate_number_type(self) -> "Point":
        """Обе координаты одного типа T."""
        if type(self.x) is not type(self.y):
            raise ValueError(
                f"coordinates must share one number type, "
                f"got {type(self.x).__name__} and {type(self.y).__name__}"
            )
        return self

    @classmethod
    def from_tuple(cls, coords: tuple[Number, Number]) -> "Point":
        x, y = coords
        return cls(x, y)

    @property
    def number_type(self) -> type:
        """Тип числа T."""
        return number_type_of(self.x)

    def as_tuple(self) -> tuple[Number, Number]:
        return (self.x, self.y)

    def to_canonical(self) -> tuple[float, float]:
        """
        Координаты в canonical float64.

        Raises:
            ConversionFailure: Если координата не представима в float64
        """
        return (to_canonical(self.x), to_canonical(self.y))

    def cast(self, number_type: type) -> "Point":
        """
        Точка в другом типе T.

        Raises:
            ConversionFailure: Если координата не представима в number_type
        """
        return Point(cast(self.x, number_type), cast(self.y, number_type))

    def _check_operand(self, other: Any) -> None:
        if not isinstance(other, Point):
            raise TypeError(f"expected Point, got {type(other).__name__}")
        if other.number_type is not self.number_type:
            raise TypeError(
                f"cannot combine Point[{self.number_type.__name__}] "
                f"with Point[{other.number_type.__name__}]"
            )

    def __add__(self, other: "Point") -> "Point":
        self._check_operand(other)
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        """Вектор смещения other → self."""
        self._check_operand(other)
        return Point(self.x - other.x, self.y - other.y)

