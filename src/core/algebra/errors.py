"""
Composition Errors — таксономия нарушений алгебры композиций

Каждое нарушение выбрасывается синхронно в точке вызова, ДО любой мутации.
Вызывающий код может перехватить исключение и восстановиться: ни одна
операция не оставляет частичных результатов.

Иерархия:
    CompositionError
    ├── IdentityViolation        — fold_fun(initial_value, net) != net
    ├── AlgebraMismatch          — разные initial_value или fold_fun
    ├── DecompositionMismatch    — parts[idx] != net вставляемой композиции
    ├── NonCommutativeSplit      — split некоммутативной композиции
    ├── NonIdempotentIdentity    — fold_fun(iv, iv) != iv при split
    ├── NonCommutativeSort       — to_partition некоммутативной композиции
    └── IndexOutOfRange          — idx вне [0, len(parts)) (также IndexError)
"""

from enum import Enum


# =============================================================================
# ERROR KINDS
# =============================================================================


class CompositionErrorKind(str, Enum):
    """Вид нарушения алгебры композиций"""

    IDENTITY_VIOLATION = "identity_violation"
    ALGEBRA_MISMATCH = "algebra_mismatch"
    DECOMPOSITION_MISMATCH = "decomposition_mismatch"
    NON_COMMUTATIVE_SPLIT = "non_commutative_split"
    NON_IDEMPOTENT_IDENTITY = "non_idempotent_identity"
    NON_COMMUTATIVE_SORT = "non_commutative_sort"
    INDEX_OUT_OF_RANGE = "index_out_of_range"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CompositionError(Exception):
    """
    Базовое нарушение алгебры композиций.

    Attributes:
        kind: Вид нарушения (CompositionErrorKind)
    """

    kind: CompositionErrorKind


class IdentityViolation(CompositionError):
    """initial_value не ведёт себя как левая единица для net."""

    kind = CompositionErrorKind.IDENTITY_VIOLATION


class AlgebraMismatch(CompositionError):
    """
    Операнды принадлежат разным алгебрам.

    Различаются initial_value, либо fold_fun не является одним и тем же
    объектом (сравнение по identity, не по поведению).
    """

    kind = CompositionErrorKind.ALGEBRA_MISMATCH


class DecompositionMismatch(CompositionError):
    """Заменяемая часть не равна net вставляемой композиции."""

    kind = CompositionErrorKind.DECOMPOSITION_MISMATCH


class NonCommutativeSplit(CompositionError):
    """
    Split некоммутативной композиции.

    Перегруппировка частей меняет результат при повторном объединении.
    """

    kind = CompositionErrorKind.NON_COMMUTATIVE_SPLIT


class NonIdempotentIdentity(CompositionError):
    """
    initial_value не идемпотентен: fold_fun(iv, iv) != iv.

    Обе половины split используют один и тот же initial_value, поэтому
    его вклад был бы учтён дважды.
    """

    kind = CompositionErrorKind.NON_IDEMPOTENT_IDENTITY


class NonCommutativeSort(CompositionError):
    """Сортировка частей некоммутативной композиции меняет net."""

    kind = CompositionErrorKind.NON_COMMUTATIVE_SORT


class IndexOutOfRange(CompositionError, IndexError):
    """Индекс не указывает на существующую часть композиции."""

    kind = CompositionErrorKind.INDEX_OUT_OF_RANGE
