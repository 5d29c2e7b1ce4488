"""
Numerical Safeguards — Float Primitives для точек и векторов

Модуль содержит примитивы, общие для Point и его упорядочений:
- Проверка конечности float
- Epsilon-сравнения float с учётом машинной точности
- Полное (total) трёхзначное сравнение float, включая NaN и -0.0
- Обратное значение с IEEE-семантикой (без ZeroDivisionError)
- Стабильный hash-ключ для float (NaN хэшируется одинаково)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никаких exception на IEEE-граничных значениях (0.0, -0.0, ±Inf, NaN)
2. NaN/Inf НЕ санитизируются: они распространяются в результат как есть
3. compare_floats — полный порядок: антисимметричен и транзитивен
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Union

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для сравнений около нуля
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Общий hash-ключ для всех NaN
_NAN_HASH_KEY: Final[str] = "nan"


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare_floats(a: float, b: float) -> int:
    """
    Полное трёхзначное сравнение двух float.

    В отличие от операторов < и ==, задаёт полный порядок на всех float:
    - -0.0 меньше 0.0
    - NaN больше любого не-NaN значения (включая +Inf)
    - NaN равен NaN

    Благодаря этому сортировка списков, содержащих NaN или -0.0,
    остаётся согласованной.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        -1 если a < b
         0 если a и b неразличимы
        +1 если a > b

    Examples:
        >>> compare_floats(1.0, 2.0)
        -1
        >>> compare_floats(-0.0, 0.0)
        -1
        >>> compare_floats(float('nan'), float('inf'))
        1
        >>> compare_floats(float('nan'), float('nan'))
        0
    """
    if a < b:
        return -1
    if a > b:
        return 1

    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan or b_nan:
        # NaN — максимальный элемент порядка
        return int(a_nan) - int(b_nan)

    # a == b: различаем только знак нуля
    a_negative = math.copysign(1.0, a) < 0
    b_negative = math.copysign(1.0, b) < 0
    return int(b_negative) - int(a_negative)


def float_sort_key(value: float) -> tuple[int, float, float]:
    """
    Ключ сортировки float, согласованный с compare_floats.

    sorted(values, key=float_sort_key) упорядочивает значения так же,
    как functools.cmp_to_key(compare_floats).

    Args:
        value: Исходное значение

    Returns:
        (флаг NaN, значение, знак) — NaN в конце, -0.0 перед 0.0
    """
    if math.isnan(value):
        return (1, 0.0, 0.0)
    return (0, value, math.copysign(1.0, value))


# =============================================================================
# IEEE-АРИФМЕТИКА
# =============================================================================


def reciprocal(value: float) -> float:
    """
    Обратное значение 1 / value с IEEE-семантикой.

    Python бросает ZeroDivisionError на 1 / 0.0; здесь деление на ноль
    возвращает бесконечность со знаком нуля, как в IEEE 754.
    Результат НЕ санитизируется.

    Args:
        value: Делитель (может быть любым, включая 0.0, -0.0, Inf, NaN)

    Returns:
        1 / value

    Examples:
        >>> reciprocal(4.0)
        0.25
        >>> reciprocal(0.0)
        inf
        >>> reciprocal(-0.0)
        -inf
        >>> reciprocal(float('inf'))
        0.0
    """
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


# =============================================================================
# HASHING
# =============================================================================


def float_hash_key(value: float) -> Union[float, str]:
    """
    Hash-ключ float, стабильный для NaN.

    Начиная с Python 3.10 hash(nan) зависит от identity объекта, поэтому
    два NaN с одинаковыми битами дают разные hash. Все NaN отображаются
    в один ключ; остальные значения возвращаются без изменений.

    Args:
        value: Исходное значение

    Returns:
        value, либо общий ключ для NaN
    """
    if math.isnan(value):
        return _NAN_HASH_KEY
    return value
