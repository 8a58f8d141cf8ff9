"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf детекцию
2. Epsilon-сравнения float
3. values_equal: точное сравнение по умолчанию, толерантность только для float
4. Валидацию толерантностей
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    validate_tolerance,
    values_equal,
)


# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e300)

    def test_nan_invalid(self) -> None:
        """NaN невалиден"""
        assert not is_valid_float(float("nan"))

    def test_inf_invalid(self) -> None:
        """Inf невалиден"""
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_exact_match(self) -> None:
        assert is_close(1.0, 1.0)

    def test_close_values_within_default_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + EPS_FLOAT_COMPARE_REL / 10)

    def test_far_values_not_close(self) -> None:
        assert not is_close(1.0, 1.1)

    def test_small_absolute_difference(self) -> None:
        """Около нуля работает абсолютная толерантность"""
        assert is_close(0.0, EPS_FLOAT_COMPARE_ABS / 10)
        assert not is_close(0.0, 1e-6)


class TestValuesEqual:
    """Тесты для values_equal"""

    def test_exact_by_default(self) -> None:
        """Без толерантности сравнение точное"""
        assert values_equal(4, 4)
        assert not values_equal(0.1 + 0.2, 0.3)

    def test_float_tolerance(self) -> None:
        """Толерантность применяется к float"""
        assert values_equal(0.1 + 0.2, 0.3, rel_tol=1e-9)
        assert values_equal(0.0, 1e-15, abs_tol=1e-12)
        assert not values_equal(0.3, 0.4, rel_tol=1e-9)

    def test_tolerance_ignored_for_non_float(self) -> None:
        """Для не-float значений используется =="""
        assert values_equal("ab", "ab", rel_tol=0.5)
        assert not values_equal(1, 2, rel_tol=0.5, abs_tol=5.0)

    def test_mixed_int_float_exact(self) -> None:
        """int и float сравниваются через =="""
        assert values_equal(2, 2.0, rel_tol=1e-9)
        assert not values_equal(2, 2.0000001, rel_tol=1e-3)

    def test_nan_never_equal(self) -> None:
        nan = float("nan")
        assert not values_equal(nan, nan)
        assert not values_equal(nan, nan, rel_tol=1e-9)

    def test_returns_bool(self) -> None:
        assert values_equal(1, 1) is True
        assert values_equal(1, 2) is False


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateTolerance:
    """Тесты для validate_tolerance"""

    def test_valid_values_pass(self) -> None:
        validate_tolerance(0.0, "rel_tol")
        validate_tolerance(1e-9, "rel_tol")

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="rel_tol must be non-negative"):
            validate_tolerance(-1e-9, "rel_tol")

    def test_nan_inf_raise(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_tolerance(math.nan, "abs_tol")
        with pytest.raises(ValueError, match="NaN/Inf"):
            validate_tolerance(math.inf, "abs_tol")
