"""
Point — Точка (вектор) евклидовой плоскости

Immutable Pydantic модель, хранящая оба представления точки:
- декартовы координаты (x, y)
- полярные координаты (r, theta), theta в [0, 2π)
- признак cartesian_centric: какое семейство координат было задано
- кэшированный hash, вычисленный только из (x, y)

Экземпляры создаются фабриками from_xy / from_polar / from_point.
Любой путь через валидацию pydantic (включая Point(...) и model_validate)
проходит канонизацию: зависимое семейство координат всегда пересчитывается
из авторитетного, поэтому несогласованную точку создать нельзя.
model_copy не принимает update.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. r >= 0
2. theta в [0, 2π) для любых конечных входов (включая r < 0 и theta < 0)
3. x = r·cos(theta), y = r·sin(theta) с точностью до округления
4. Равные точки имеют равный hash
5. Никакой валидации: ±Inf/NaN распространяются по IEEE-семантике

ПОРЯДОК:
    Натуральный порядок (<, compare_to) — только по r, без разрешения
    ничьих. Полные порядки — компараторы из src.core.domain.ordering.
"""

import math
import numbers
from typing import Any, ClassVar, Final, Mapping, Optional

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from src.core.domain.ordering import (
    MANHATTAN_COMPARATOR,
    XY_COMPARATOR,
    YX_COMPARATOR,
    ManhattanComparator,
    XYComparator,
    YXComparator,
)
from src.core.log import get_logger
from src.core.math.angles import normalize_angle, polar_angle, reflect_angle
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    compare_floats,
    float_hash_key,
    is_close,
    is_valid_float,
    reciprocal,
)

logger = get_logger(__name__)

# Количество знаков после запятой в строковом представлении
STRING_PRECISION: Final[int] = 15


# =============================================================================
# КАНОНИЗАЦИЯ
# =============================================================================


def _canonical_cartesian(x: float, y: float) -> dict[str, float]:
    """Полярные поля из авторитетных (x, y)."""
    return {"x": x, "y": y, "r": math.hypot(x, y), "theta": polar_angle(x, y)}


def _canonical_polar(r: float, theta: float) -> dict[str, float]:
    """
    Канонические (r, theta) и производные (x, y).

    - r > 0: theta приводится к [0, 2π)
    - r < 0: r → |r|, theta отражается (поворот на π)
    - r == 0: r и theta схлопываются в 0
    - r is NaN: theta тоже NaN
    """
    if r > 0:
        theta = normalize_angle(theta)
    elif r < 0:
        r = -r
        theta = reflect_angle(theta)
    elif r == 0:
        # У начала координат нет направления
        r = 0.0
        theta = 0.0
    else:
        theta = math.nan
    return {"x": r * math.cos(theta), "y": r * math.sin(theta), "r": r, "theta": theta}


# =============================================================================
# POINT MODEL
# =============================================================================


class Point(BaseModel):
    """
    Точка в двумерном евклидовом пространстве.

    Immutable модель (frozen=True). Все операции возвращают новые экземпляры.
    """

    XY_COMPARATOR: ClassVar[XYComparator] = XY_COMPARATOR
    YX_COMPARATOR: ClassVar[YXComparator] = YX_COMPARATOR
    MANHATTAN_COMPARATOR: ClassVar[ManhattanComparator] = MANHATTAN_COMPARATOR

    x: float = Field(..., description="Абсцисса")
    y: float = Field(..., description="Ордината")
    r: float = Field(..., description="Расстояние от начала координат (>= 0)")
    theta: float = Field(..., description="Полярный угол, [0, 2π)")
    cartesian_centric: bool = Field(
        ..., description="True если точка задана декартовыми координатами"
    )

    model_config = {"frozen": True}  # Immutable

    _hash_code: int = PrivateAttr(default=0)

    def model_post_init(self, __context: Any) -> None:
        # hash только из (x, y): полярные поля в него не входят
        self._hash_code = hash((float_hash_key(self.x), float_hash_key(self.y)))

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_xy(cls, x: float, y: float) -> "Point":
        """
        Точка с декартовыми координатами (x, y).

        Args:
            x: Абсцисса
            y: Ордината

        Returns:
            Новая cartesian-centric точка
        """
        return cls._canonical(x=x, y=y)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Point":
        """
        Точка с полярными координатами (r, theta).

        Канонизация:
        - r > 0: theta приводится к [0, 2π)
        - r < 0: r → |r|, theta отражается (поворот на π)
        - r == 0: r и theta схлопываются в 0
        - r is NaN: r, theta, x, y — NaN

        Args:
            r: Расстояние от начала координат (знак учитывается)
            theta: Угол против часовой стрелки от положительной оси X

        Returns:
            Новая polar-centric точка
        """
        return cls._canonical(r=r, theta=theta)

    @classmethod
    def from_point(cls, source: "Point") -> "Point":
        """
        Копия source: все поля и hash копируются без пересчёта.

        Args:
            source: Исходная точка

        Returns:
            Новый экземпляр, равный source и с тем же hash
        """
        return source.model_copy()

    @classmethod
    def _canonical(
        cls,
        x: Optional[float] = None,
        y: Optional[float] = None,
        r: Optional[float] = None,
        theta: Optional[float] = None,
    ) -> "Point":
        # Зависимое семейство координат вычисляет canonicalize
        if x is not None and y is not None:
            return cls(x=x, y=y, cartesian_centric=True)
        return cls(r=r, theta=theta, cartesian_centric=False)

    @model_validator(mode="before")
    @classmethod
    def canonicalize(cls, data: Any) -> Any:
        """
        Канонизация при любой валидации (Point(...), model_validate).

        Авторитетно только одно семейство координат: (x, y) для
        cartesian-centric точки, (r, theta) для polar-centric.
        Переданные значения зависимого семейства игнорируются и
        пересчитываются, поэтому несогласованную точку создать нельзя.
        Если cartesian_centric не указан, точка декартова при наличии x и y.
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)
        cartesian_centric = data.get("cartesian_centric")
        if cartesian_centric is None:
            cartesian_centric = data.get("x") is not None and data.get("y") is not None
        cartesian_centric = bool(cartesian_centric)
        data["cartesian_centric"] = cartesian_centric

        names = ("x", "y") if cartesian_centric else ("r", "theta")
        if any(data.get(name) is None for name in names):
            # Отсутствующие поля сообщит сама pydantic
            return data

        try:
            first, second = (float(data[name]) for name in names)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{names[0]}, {names[1]} must be real numbers: {e}") from e

        if cartesian_centric:
            data.update(_canonical_cartesian(first, second))
        else:
            data.update(_canonical_polar(first, second))
        return data

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "Point":
        """
        Копия без изменения полей.

        Raises:
            TypeError: Если передан update (поля согласованы между собой
                и с кэшированным hash; новую точку строят фабрики)
        """
        if update:
            raise TypeError(
                "Point fields cannot be updated; use from_xy or from_polar instead"
            )
        return super().model_copy(deep=deep)

    def copy(self, *, include=None, exclude=None, update=None, deep: bool = False) -> "Point":
        """Устаревший pydantic API: те же ограничения, что у model_copy."""
        if include is not None or exclude is not None or update:
            raise TypeError(
                "Point fields cannot be changed on copy; use from_xy or from_polar instead"
            )
        return self.model_copy(deep=deep)

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def coordinates(self) -> tuple[float, float]:
        """Декартовы координаты (x, y)."""
        return (self.x, self.y)

    # -------------------------------------------------------------------------
    # Векторная арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Point") -> "Point":
        """
        Векторная сумма self + other.

        Если у слагаемых одинаковый канонический угол, радиусы складываются
        точно (без декартова round-trip).
        """
        if self.theta == other.theta:
            return Point.from_polar(self.r + other.r, self.theta)
        return Point.from_xy(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Point") -> "Point":
        """
        Векторная разность self - other.

        Приблизительно равна add(other.multiply(-1)); при общем угле
        радиусы вычитаются точно.
        """
        if self.theta == other.theta:
            return Point.from_polar(self.r - other.r, self.theta)
        return Point.from_xy(self.x - other.x, self.y - other.y)

    def multiply(self, scale: float) -> "Point":
        """
        Произведение скаляра scale на вектор self.

        Ветка выбирается по cartesian_centric, а не по углу:
        - cartesian-centric: масштабируются x и y напрямую
        - polar-centric, scale >= 0: r·scale, тот же угол
        - polar-centric, scale < 0: r·|scale|, угол отражается на π

        Args:
            scale: Скалярный множитель

        Returns:
            scale * self
        """
        if not is_valid_float(scale):
            logger.debug("Scaling %s by non-finite factor %r", self, scale)

        if self.cartesian_centric:
            return Point.from_xy(self.x * scale, self.y * scale)
        if scale >= 0:
            return Point.from_polar(self.r * scale, self.theta)
        return Point.from_polar(-self.r * scale, reflect_angle(self.theta))

    def divide(self, scale: float) -> "Point":
        """
        Эквивалентно multiply(1 / scale).

        Деление на ноль не защищено: результат содержит ±Inf/NaN.
        """
        return self.multiply(reciprocal(scale))

    def dot(self, other: "Point") -> float:
        """Скалярное произведение x1·x2 + y1·y2."""
        return self.x * other.x + self.y * other.y

    # -------------------------------------------------------------------------
    # Равенство, hash, порядок
    # -------------------------------------------------------------------------

    def hash_code(self) -> int:
        """Кэшированный hash, вычисленный из (x, y) при создании."""
        return self._hash_code

    def equals(self, other: object) -> bool:
        """
        Логическое равенство точек.

        - тот же объект → True
        - hash различается → False
        - обе точки polar-centric → сравниваются (r, theta)
        - иначе → сравниваются (x, y)

        Сравнение побитовое (==), поэтому точка с NaN не равна никакой
        другой точке, включая свою копию.
        """
        if other is self:
            return True
        if not isinstance(other, Point) or other._hash_code != self._hash_code:
            return False
        if not self.cartesian_centric and not other.cartesian_centric:
            return self.r == other.r and self.theta == other.theta
        return self.x == other.x and self.y == other.y

    def is_close(
        self,
        other: "Point",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Приближённое равенство по декартовым координатам.

        Args:
            other: Точка для сравнения
            rel_tol: Относительная толерантность
            abs_tol: Абсолютная толерантность

        Returns:
            True если x и y попарно близки
        """
        return is_close(self.x, other.x, rel_tol, abs_tol) and is_close(
            self.y, other.y, rel_tol, abs_tol
        )

    def compare_to(self, other: "Point") -> int:
        """Натуральный порядок: -1/0/+1 по расстоянию r."""
        return compare_floats(self.r, other.r)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self._hash_code

    def __lt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare_to(other) >= 0

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scale: float) -> "Point":
        if not isinstance(scale, numbers.Real):
            return NotImplemented
        return self.multiply(scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> "Point":
        if not isinstance(scale, numbers.Real):
            return NotImplemented
        return self.divide(scale)

    def __neg__(self) -> "Point":
        return self.multiply(-1)

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"Point({self.x:.{STRING_PRECISION}f}, {self.y:.{STRING_PRECISION}f})"

    __repr__ = __str__


# =============================================================================
# МОДУЛЬНЫЕ ФАБРИКИ И КОНСТАНТЫ
# =============================================================================

from_xy = Point.from_xy
from_polar = Point.from_polar
from_point = Point.from_point

# Начало декартовой системы координат
ORIGIN: Final[Point] = from_xy(0, 0)
