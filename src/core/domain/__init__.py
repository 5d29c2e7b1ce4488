"""
Domain models and value objects.

Contains the immutable Point value type and its orderings.
"""

from src.core.domain.ordering import (
    MANHATTAN_COMPARATOR,
    XY_COMPARATOR,
    YX_COMPARATOR,
    ManhattanComparator,
    XYComparator,
    YXComparator,
    natural_order,
)
from src.core.domain.point import (
    ORIGIN,
    STRING_PRECISION,
    Point,
    from_point,
    from_polar,
    from_xy,
)

__all__ = [
    # Point model
    "Point",
    "ORIGIN",
    "STRING_PRECISION",
    "from_xy",
    "from_polar",
    "from_point",
    # Orderings
    "XYComparator",
    "YXComparator",
    "ManhattanComparator",
    "XY_COMPARATOR",
    "YX_COMPARATOR",
    "MANHATTAN_COMPARATOR",
    "natural_order",
]
