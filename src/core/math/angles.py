"""
Angles — Канонизация полярного угла

Модуль приводит полярные углы к каноническому представителю
в полуинтервале [0, 2π):
- normalize_angle: произвольный угол → [0, 2π)
- reflect_angle: противоположное направление (поворот на π)
- polar_angle: atan2(y, x), перенесённый из [-π, π] в [0, 2π)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат конечного входа всегда в [0, 2π)
2. ±Inf/NaN на входе → NaN на выходе (без exception)
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Полный оборот
TAU: Final[float] = math.pi * 2


# =============================================================================
# КАНОНИЗАЦИЯ
# =============================================================================


def normalize_angle(theta: float) -> float:
    """
    Приведение угла к полуинтервалу [0, 2π).

    Остаток берётся через math.fmod (знак делимого), затем к отрицательному
    остатку прибавляется 2π. Если после сложения округление дало ровно 2π
    (очень малый отрицательный угол), результат схлопывается в 0.0.

    Args:
        theta: Угол в радианах (любой)

    Returns:
        Канонический угол в [0, 2π); NaN для ±Inf/NaN

    Examples:
        >>> normalize_angle(-math.pi / 2) == 3 * math.pi / 2
        True
        >>> normalize_angle(TAU)
        0.0
        >>> math.isnan(normalize_angle(float('inf')))
        True
    """
    if math.isinf(theta):
        # IEEE fmod(±Inf, y) = NaN; math.fmod бросает ValueError
        return math.nan

    theta = math.fmod(theta, TAU)
    if theta < 0:
        theta += TAU
    if theta >= TAU:
        theta = 0.0
    return theta


def reflect_angle(theta: float) -> float:
    """
    Угол противоположного направления: normalize_angle(theta + π).

    Args:
        theta: Угол в радианах

    Returns:
        Канонический угол, повёрнутый на π
    """
    return normalize_angle(theta + math.pi)


def polar_angle(x: float, y: float) -> float:
    """Полярный угол точки (x, y) в [0, 2π)."""
    theta = math.atan2(y, x)
    if theta < 0:
        theta += TAU
    if theta >= TAU:
        theta = 0.0
    return theta
