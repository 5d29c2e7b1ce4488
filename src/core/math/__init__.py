"""
Core math modules для planar

Математические примитивы: float-сравнения, IEEE-арифметика и канонизация углов.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Checks & comparisons
    compare_floats,
    float_sort_key,
    is_close,
    is_valid_float,
    # IEEE arithmetic
    reciprocal,
    # Hashing
    float_hash_key,
)

# Angles
from src.core.math.angles import (
    TAU,
    normalize_angle,
    polar_angle,
    reflect_angle,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Checks & comparisons
    "compare_floats",
    "float_sort_key",
    "is_close",
    "is_valid_float",
    # Numerical Safeguards — IEEE arithmetic
    "reciprocal",
    # Numerical Safeguards — Hashing
    "float_hash_key",
    # Angles
    "TAU",
    "normalize_angle",
    "polar_angle",
    "reflect_angle",
]
