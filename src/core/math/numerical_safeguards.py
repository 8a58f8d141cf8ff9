"""
Numerical Safeguards — сравнение значений алгебры

Модуль обеспечивает единое правило равенства для всех проверок композиций:
- identity law при создании singleton
- сверка fold (check_fold)
- сверка initial_value при combine/decompose
- soundness-проверка decompose (part == net вставляемой композиции)

Для float используется сравнение с толерантностью (машинная точность),
для всех остальных типов — обычный `==`.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. При нулевых толерантностях поведение идентично `==`
2. NaN никогда не равен ничему (включая себя)
3. Толерантности применяются только если ОБА значения float
"""

import math
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность по умолчанию для float-алгебр
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность по умолчанию для float-алгебр
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
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

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def values_equal(
    a: Any,
    b: Any,
    rel_tol: float = 0.0,
    abs_tol: float = 0.0,
) -> bool:
    """
    Равенство двух значений алгебры.

    Если оба значения float и задана ненулевая толерантность, используется
    is_close. Во всех остальных случаях — `a == b`.

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 0.0 — точное сравнение)
        abs_tol: Абсолютная толерантность (default: 0.0 — точное сравнение)

    Returns:
        True если значения равны с учётом толерантности

    Examples:
        >>> values_equal(2, 2)
        True
        >>> values_equal(0.1 + 0.2, 0.3)
        False
        >>> values_equal(0.1 + 0.2, 0.3, rel_tol=1e-9)
        True
        >>> values_equal("ab", "ab", rel_tol=1e-9)
        True
    """
    if isinstance(a, float) and isinstance(b, float) and (rel_tol > 0 or abs_tol > 0):
        return is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
    return bool(a == b)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_tolerance(value: float, name: str) -> None:
    """
    Валидация толерантности сравнения.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
