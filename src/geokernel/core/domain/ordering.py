"""
PointOrder — классификация направления обхода вершин полигона
"""

from enum import Enum


class PointOrder(str, Enum):
    """Направление обхода (winding) вершин"""

    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"
