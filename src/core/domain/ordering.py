"""
Ordering — Компараторы точек

Stateless компараторы для Point, независимые от натурального порядка
(по расстоянию от начала координат):
- XYComparator: по X, затем по Y (полный порядок)
- YXComparator: по Y, затем по X (полный порядок)
- ManhattanComparator: по |X| + |Y| (не полный: антидиагональные точки равны)

Каждый компаратор — callable (p1, p2) -> int, пригодный для
functools.cmp_to_key, и метод key(point) для sorted(key=...).
Сравнение float идёт через compare_floats: -0.0 < 0.0, NaN — максимум.
"""

from typing import TYPE_CHECKING, Final

from src.core.math.numerical_safeguards import compare_floats, float_sort_key

if TYPE_CHECKING:
    from src.core.domain.point import Point


# =============================================================================
# КОМПАРАТОРЫ
# =============================================================================


class XYComparator:
    """Упорядочение по X, затем (при равных X) по Y."""

    def __call__(self, p1: "Point", p2: "Point") -> int:
        comparison = compare_floats(p1.x, p2.x)
        if comparison == 0:
            comparison = compare_floats(p1.y, p2.y)
        return comparison

    def key(self, point: "Point") -> tuple:
        return (float_sort_key(point.x), float_sort_key(point.y))


class YXComparator:
    """Упорядочение по Y, затем (при равных Y) по X."""

    def __call__(self, p1: "Point", p2: "Point") -> int:
        comparison = compare_floats(p1.y, p2.y)
        if comparison == 0:
            comparison = compare_floats(p1.x, p2.x)
        return comparison

    def key(self, point: "Point") -> tuple:
        return (float_sort_key(point.y), float_sort_key(point.x))


class ManhattanComparator:
    """Упорядочение по манхэттенской норме |X| + |Y|."""

    def __call__(self, p1: "Point", p2: "Point") -> int:
        return compare_floats(_manhattan(p1), _manhattan(p2))

    def key(self, point: "Point") -> tuple:
        return float_sort_key(_manhattan(point))


def _manhattan(point: "Point") -> float:
    return abs(point.x) + abs(point.y)


def natural_order(p1: "Point", p2: "Point") -> int:
    """
    Натуральный порядок как отдельный компаратор: по расстоянию r.

    Точки на одной окружности (разный угол) считаются равными.
    """
    return compare_floats(p1.r, p2.r)


# =============================================================================
# SINGLETONS
# =============================================================================

XY_COMPARATOR: Final[XYComparator] = XYComparator()
YX_COMPARATOR: Final[YXComparator] = YXComparator()
MANHATTAN_COMPARATOR: Final[ManhattanComparator] = ManhattanComparator()
