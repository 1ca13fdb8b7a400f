"""
geokernel — 2-D computational-geometry kernel

Point/vector arithmetic, euclidean distance, segment relations and
polygon/rectangle/circle metrics over int, float and NumPy fixed-width
number types.
"""

from geokernel.core.domain import (
    Circle,
    Point,
    PointOrder,
    Polygon,
    Rectangle,
    Segment,
    Triangle,
)
from geokernel.core.errors import (
    CalculationFailure,
    ConversionFailure,
    GeometryError,
    InstantiationFailure,
    MutationFailure,
)
from geokernel.core.math import (
    EPS_F64,
    cross,
    distance,
    distance2,
    intersects,
    magnitude,
    magnitude2,
    on_segment,
)

__version__ = "0.1.0"

__all__ = [
    # Shapes
    "Circle",
    "Point",
    "PointOrder",
    "Polygon",
    "Rectangle",
    "Segment",
    "Triangle",
    # Errors
    "GeometryError",
    "CalculationFailure",
    "ConversionFailure",
    "InstantiationFailure",
    "MutationFailure",
    # Predicates
    "EPS_F64",
    "cross",
    "distance",
    "distance2",
    "intersects",
    "magnitude",
    "magnitude2",
    "on_segment",
]
