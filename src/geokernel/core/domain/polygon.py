"""
Polygon — упорядоченный замкнутый цикл вершин

Immutable Pydantic модель над типом T с capability Floats.

Построение:
1. Меньше 3 вершин → InstantiationFailure
2. Вершины разных типов → InstantiationFailure
3. Signed area (shoelace) > 0 → порядок сохраняется, иначе разворачивается
4. Ошибка расчёта площади → InstantiationFailure (с исходной ошибкой в __cause__)

Полигон никогда не изменяется на месте: insert_vertex строит новый
полигон из производного списка вершин и заново проходит валидацию.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Построение из списка и из развёрнутого списка даёт одинаковую площадь
   и одинаковый набор вершин
2. Вставка существующей вершины — no-op, не ошибка
"""

import logging
from typing import TYPE_CHECKING, Any, Iterator, Sequence

from pydantic import BaseModel, Field, field_validator

from geokernel.core.domain.ordering import PointOrder
from geokernel.core.domain.point import Point
from geokernel.core.domain.segment import Segment
from geokernel.core.errors import GeometryError, InstantiationFailure, MutationFailure
from geokernel.core.math.numbers import (
    Number,
    common_number_type,
    epsilon_for,
    require_floats,
    zero_for,
)
from geokernel.core.math.numerical_safeguards import (
    EPS_F64,
    is_negative,
    validate_eps,
)
from geokernel.core.math.segment import on_segment, within_bounds
from geokernel.core.math.shoelace import closed_edges, perimeter, signed_area

if TYPE_CHECKING:
    from geokernel.core.domain.rectangle import Rectangle

logger = logging.getLogger(__name__)


class Polygon(BaseModel):
    """
    Полигон с нормализованным направлением обхода.

    Immutable модель (frozen=True). Все изменения создают новый экземпляр.
    """

    vertices: tuple[Point, ...] = Field(
        ..., description="Вершины в нормализованном порядке обхода (замкнутый цикл)"
    )

    model_config = {"frozen": True}

    def __init__(self, vertices: Sequence[Point], **data: Any) -> None:
        super().__init__(vertices=tuple(vertices), **data)

    @field_validator("vertices")
    @classmethod
    def normalize_winding(cls, v: tuple[Point, ...]) -> tuple[Point, ...]:
        """
        Проверка числа вершин и нормализация направления обхода.

        Raises:
            InstantiationFailure: Мало вершин, смешанные типы или ошибка площади
            TypeError: Если T не Floats
        """
        if len(v) < 3:
            raise InstantiationFailure(
                f"Not a valid polygon, less than 3 vertices (got {len(v)})."
            )

        try:
            number_type = common_number_type(p.x for p in v)
        except TypeError as exc:
            raise InstantiationFailure(f"Not a valid polygon: {exc}.") from exc
        require_floats(number_type, "Polygon")

        try:
            area = signed_area(v)
        except GeometryError as exc:
            raise InstantiationFailure(
                f"Not a valid polygon, failed to calculate area: {exc}"
            ) from exc

        if area > zero_for(number_type):
            return v

        logger.debug("Reversing polygon winding, signed area %r", area)
        return tuple(reversed(v))

    @property
    def number_type(self) -> type:
        """Тип числа T."""
        return self.vertices[0].number_type

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:  # type: ignore[override]
        """Итерация по вершинам (а не по полям модели)."""
        return iter(self.vertices)

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.has_vertex(point)

    def has_vertex(self, point: Point) -> bool:
        """
        Является ли точка вершиной.

        Сравнение учитывает тип T: Point(0, 0) не вершина Polygon[float].
        """
        return point.number_type is self.number_type and point in self.vertices

    def edges(self) -> list[Segment]:
        """Рёбра замкнутого цикла (последняя вершина → первая)."""
        return [Segment(v0, v1) for v0, v1 in closed_edges(self.vertices)]

    def perimeter(self) -> Number:
        """
        Периметр: сумма длин рёбер замкнутого цикла.

        Raises:
            CalculationFailure: Если расчёт длины ребра завершился ошибкой
        """
        return perimeter(self.vertices)

    def area(self) -> Number:
        """
        Знаковая площадь (shoelace).

        После построения площадь неотрицательна: направление нормализовано.
        """
        return signed_area(self.vertices)

    def orientation(self, eps: float = EPS_F64) -> PointOrder:
        """
        Классификация направления обхода.

        CLOCKWISE если площадь не меньше -eps, иначе COUNTER_CLOCKWISE.
        Имена сохраняют историческую конвенцию: положительная площадь
        shoelace классифицируется как CLOCKWISE.

        Raises:
            ValueError: Если eps отрицательный или NaN/Inf
            ConversionFailure: Если eps не представим в T
        """
        validate_eps(eps)
        tol = epsilon_for(self.number_type, eps)

        if is_negative(self.area(), tol):
            return PointOrder.COUNTER_CLOCKWISE
        return PointOrder.CLOCKWISE

    def insert_vertex(self, point: Point, eps: float = EPS_F64) -> "Polygon":
        """
        Вставка вершины на ребро, коллинеарное точке.

        Ищется первое ребро замкнутого цикла, у которого:
        - точка внутри bounding box ребра по обеим осям
        - точка коллинеарна ребру (тест суммы расстояний, как on_segment)

        Точка вставляется сразу после первой вершины ребра, полигон
        строится заново (с повторной нормализацией обхода).

        Args:
            point: Новая вершина
            eps: Толерантность в canonical домене (default: EPS_F64)

        Returns:
            Новый полигон, или self если точка уже является вершиной

        Raises:
            MutationFailure: Если ни одно ребро не подходит
            TypeError: Если тип точки отличается от T полигона
        """
        if point.number_type is not self.number_type:
            raise TypeError(
                f"cannot insert Point[{point.number_type.__name__}] "
                f"into Polygon[{self.number_type.__name__}]"
            )

        if self.has_vertex(point):
            logger.debug("%r is already a vertex of the polygon", point)
            return self

        validate_eps(eps)
        tol = epsilon_for(self.number_type, eps)

        for index, (v0, v1) in enumerate(closed_edges(self.vertices)):
            if within_bounds(v0, v1, point, tol) and on_segment(
                v0, v1, point, eps=eps
            ):
                head = self.vertices[: index + 1]
                tail = self.vertices[index + 1 :]
                return Polygon([*head, point, *tail])

        logger.debug("No edge of the polygon is collinear with %r", point)
        raise MutationFailure(f"Failed to insert vertex {point!r} into polygon.")

    def bounding_box(self) -> "Rectangle":
        """
        Axis-aligned bounding box полигона.

        Углы: (minX,minY), (maxX,minY), (maxX,maxY), (minX,maxY).
        """
        from geokernel.core.domain.rectangle import Rectangle

        return Rectangle.from_polygon(self)
