"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку конечности float
2. Epsilon-сравнения float
3. Полное сравнение float (NaN, -0.0) и согласованный ключ сортировки
4. IEEE-семантику обратного значения
5. Стабильный hash-ключ для NaN
"""

import functools
import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    compare_floats,
    float_hash_key,
    float_sort_key,
    is_close,
    is_valid_float,
    reciprocal,
)

NAN = float("nan")
INF = float("inf")


# =============================================================================
# ТЕСТЫ ПРОВЕРОК
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-0.0)
        assert is_valid_float(1e308)
        assert is_valid_float(-5e-324)

    def test_non_finite_values_invalid(self) -> None:
        """NaN и ±Inf невалидны"""
        assert not is_valid_float(NAN)
        assert not is_valid_float(INF)
        assert not is_valid_float(-INF)


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        """Значения констант по умолчанию"""
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_relative_tolerance(self) -> None:
        """Относительная толерантность для больших значений"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(1e10, 1e10 + 1.0)
        assert not is_close(1.0, 1.1)

    def test_absolute_tolerance_near_zero(self) -> None:
        """Абсолютная толерантность около нуля"""
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-6)

    def test_custom_tolerance(self) -> None:
        """Пользовательская толерантность"""
        assert is_close(1.0, 1.05, rel_tol=0.1)
        assert is_close(0.0, 1e-6, abs_tol=1e-5)

    def test_nan_never_close(self) -> None:
        """NaN не близок ни к чему"""
        assert not is_close(NAN, NAN)
        assert not is_close(NAN, 0.0)


# =============================================================================
# ТЕСТЫ ПОЛНОГО СРАВНЕНИЯ
# =============================================================================


class TestCompareFloats:
    """Тесты для compare_floats"""

    def test_ordinary_values(self) -> None:
        """Обычные значения сравниваются естественно"""
        assert compare_floats(1.0, 2.0) == -1
        assert compare_floats(2.0, 1.0) == 1
        assert compare_floats(1.5, 1.5) == 0

    def test_infinities(self) -> None:
        """±Inf — крайние конечные точки порядка"""
        assert compare_floats(-INF, -1e308) == -1
        assert compare_floats(INF, 1e308) == 1
        assert compare_floats(INF, INF) == 0

    def test_signed_zero(self) -> None:
        """-0.0 меньше 0.0"""
        assert compare_floats(-0.0, 0.0) == -1
        assert compare_floats(0.0, -0.0) == 1
        assert compare_floats(-0.0, -0.0) == 0

    def test_nan_is_maximum(self) -> None:
        """NaN больше любого значения и равен NaN"""
        assert compare_floats(NAN, INF) == 1
        assert compare_floats(INF, NAN) == -1
        assert compare_floats(NAN, -1.0) == 1
        assert compare_floats(NAN, NAN) == 0

    @pytest.mark.parametrize(
        "values",
        [
            [3.0, -1.0, 0.0, -0.0, INF, -INF, NAN, 2.5],
            [NAN, NAN, 0.0, -0.0, 1.0],
        ],
    )
    def test_sort_key_matches_comparator(self, values: list[float]) -> None:
        """float_sort_key упорядочивает так же, как compare_floats"""
        by_cmp = sorted(values, key=functools.cmp_to_key(compare_floats))
        by_key = sorted(values, key=float_sort_key)

        assert [float_sort_key(v) for v in by_cmp] == [float_sort_key(v) for v in by_key]

    def test_sort_places_nan_last_and_negative_zero_first(self) -> None:
        """NaN в конце, -0.0 перед 0.0"""
        result = sorted([NAN, 0.0, -0.0, -INF], key=float_sort_key)

        assert result[0] == -INF
        assert math.copysign(1.0, result[1]) == -1.0
        assert math.copysign(1.0, result[2]) == 1.0
        assert math.isnan(result[3])


# =============================================================================
# ТЕСТЫ IEEE-АРИФМЕТИКИ
# =============================================================================


class TestReciprocal:
    """Тесты для reciprocal"""

    def test_ordinary_values(self) -> None:
        """Обычное деление"""
        assert reciprocal(4.0) == 0.25
        assert reciprocal(-2.0) == -0.5
        assert reciprocal(3) == pytest.approx(1 / 3)

    def test_zero_gives_signed_infinity(self) -> None:
        """Деление на ноль → бесконечность со знаком нуля, без exception"""
        assert reciprocal(0.0) == INF
        assert reciprocal(-0.0) == -INF
        assert reciprocal(0) == INF

    def test_infinity_gives_signed_zero(self) -> None:
        """1 / ±Inf → ±0.0"""
        assert reciprocal(INF) == 0.0
        assert math.copysign(1.0, reciprocal(-INF)) == -1.0

    def test_nan_propagates(self) -> None:
        """NaN не санитизируется"""
        assert math.isnan(reciprocal(NAN))


# =============================================================================
# ТЕСТЫ HASHING
# =============================================================================


class TestFloatHashKey:
    """Тесты для float_hash_key"""

    def test_ordinary_values_unchanged(self) -> None:
        """Обычные значения возвращаются как есть"""
        assert float_hash_key(1.5) == 1.5
        assert float_hash_key(-INF) == -INF

    def test_distinct_nan_objects_hash_equally(self) -> None:
        """Разные объекты NaN дают одинаковый hash"""
        first = float("nan")
        second = float("nan")

        assert hash(float_hash_key(first)) == hash(float_hash_key(second))
        assert hash((float_hash_key(first), 0.0)) == hash((float_hash_key(second), 0.0))
