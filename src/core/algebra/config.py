"""
AlgebraConfig — политика сравнения значений для операций над композициями

По умолчанию все сравнения точные (`==`), а construct не проверяет
identity law (в отличие от singleton).
"""

from dataclasses import dataclass
from typing import Any

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    validate_tolerance,
    values_equal,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AlgebraConfig:
    """Конфигурация алгебры композиций.

    Attributes:
        rel_tol: относительная толерантность для float-значений (0.0 = точно)
        abs_tol: абсолютная толерантность для float-значений (0.0 = точно)
        check_identity_on_construct: проверять identity law для каждой части
            при construct (по умолчанию только singleton проверяет его)
    """

    rel_tol: float = 0.0
    abs_tol: float = 0.0
    check_identity_on_construct: bool = False

    def __post_init__(self) -> None:
        validate_tolerance(self.rel_tol, "rel_tol")
        validate_tolerance(self.abs_tol, "abs_tol")

    def equal(self, a: Any, b: Any) -> bool:
        """Равенство двух значений алгебры по правилам этой конфигурации."""
        return values_equal(a, b, rel_tol=self.rel_tol, abs_tol=self.abs_tol)


DEFAULT_ALGEBRA_CONFIG = AlgebraConfig()

# Opt-in пресет для float-алгебр: сравнение с машинной точностью
FLOAT_ALGEBRA_CONFIG = AlgebraConfig(
    rel_tol=EPS_FLOAT_COMPARE_REL,
    abs_tol=EPS_FLOAT_COMPARE_ABS,
)


def resolve_config(config: AlgebraConfig | None) -> AlgebraConfig:
    return config or DEFAULT_ALGEBRA_CONFIG
