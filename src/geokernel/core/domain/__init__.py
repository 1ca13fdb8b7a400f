"""
Domain models and value objects.

Contains the geometric value types: Point, Segment, Triangle, Polygon,
Rectangle, Circle.
"""

from geokernel.core.domain.circle import Circle
from geokernel.core.domain.ordering import PointOrder
from geokernel.core.domain.point import Point
from geokernel.core.domain.polygon import Polygon
from geokernel.core.domain.rectangle import Rectangle
from geokernel.core.domain.segment import Segment
from geokernel.core.domain.triangle import Triangle

__all__ = [
    # Values
    "Point",
    "Segment",
    "Triangle",
    # Shapes
    "Polygon",
    "Rectangle",
    "Circle",
    # Enums
    "PointOrder",
]
