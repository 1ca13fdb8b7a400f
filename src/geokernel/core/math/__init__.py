"""
Core math modules для geokernel

Числовая абстракция, epsilon-сравнения и геометрические предикаты.
Модули работают с любыми объектами, у которых есть координаты x/y,
и с кортежами (x, y).
"""

# Numerical Safeguards
from geokernel.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_F64,
    # Epsilon comparisons
    approximately_equal,
    approximately_gte,
    approximately_lte,
    compare_with_tolerance,
    is_negative,
    is_positive,
    is_zero,
    # Validation
    is_valid_float,
    validate_eps,
)

# Numbers
from geokernel.core.math.numbers import (
    PI_F64,
    Number,
    cast,
    common_number_type,
    epsilon_for,
    from_canonical,
    half_for,
    is_float_type,
    is_integer_type,
    is_number,
    is_number_type,
    number_type_of,
    pi_for,
    require_floats,
    require_numbers,
    sqrt_of,
    to_canonical,
    zero_for,
)

# Distance
from geokernel.core.math.distance import coordinates, distance, distance2

# Segment Predicates
from geokernel.core.math.segment import (
    cross,
    magnitude,
    magnitude2,
    on_segment,
    within_bounds,
)

# Intersection
from geokernel.core.math.intersection import intersects

# Shoelace
from geokernel.core.math.shoelace import (
    bounding_box,
    closed_edges,
    perimeter,
    signed_area,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_F64",
    # Numerical Safeguards — Epsilon comparisons
    "approximately_equal",
    "approximately_gte",
    "approximately_lte",
    "compare_with_tolerance",
    "is_negative",
    "is_positive",
    "is_zero",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "validate_eps",
    # Numbers — Constants
    "PI_F64",
    # Numbers — Types
    "Number",
    # Numbers — Capability
    "is_float_type",
    "is_integer_type",
    "is_number",
    "is_number_type",
    "number_type_of",
    "common_number_type",
    "require_floats",
    "require_numbers",
    # Numbers — Conversion
    "cast",
    "from_canonical",
    "to_canonical",
    "epsilon_for",
    "half_for",
    "pi_for",
    "zero_for",
    "sqrt_of",
    # Distance
    "coordinates",
    "distance",
    "distance2",
    # Segment Predicates
    "cross",
    "magnitude",
    "magnitude2",
    "on_segment",
    "within_bounds",
    # Intersection
    "intersects",
    # Shoelace
    "bounding_box",
    "closed_edges",
    "perimeter",
    "signed_area",
]
