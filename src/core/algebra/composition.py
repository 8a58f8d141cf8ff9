"""
Composition — результат fold упорядоченной последовательности частей

Composition хранит части (parts), кэшированный результат их свёртки (net),
initial_value и бинарную операцию fold_fun, а также заявление вызывающего
кода о коммутативности операции.

    net = fold_fun(...fold_fun(fold_fun(initial_value, p0), p1)..., pN)

Операции:
- singleton / construct   — создание (fold вычисляется при создании)
- check_fold / num_parts  — проверка и наблюдение
- combine                 — конкатенация частей, net = fold_fun(x.net, y.net)
- decompose               — замена одной части раскладкой другой композиции
- split / split_in_place  — разделение частей по предикату

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. net равен левому fold частей сразу после singleton/construct/combine
   (для combine — при ассоциативной fold_fun)
2. decompose НИКОГДА не пересчитывает net; актуальность net проверяет
   только check_fold
3. Коммутативность не проверяется — это допущение вызывающего кода
4. Все проверки выполняются ДО мутации; частичных результатов нет
5. fold_fun сравнивается по identity (`is`), а не по поведению
"""

import logging
from functools import reduce
from typing import Any, Callable, Generic, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from src.core.algebra.config import AlgebraConfig, resolve_config
from src.core.algebra.errors import (
    AlgebraMismatch,
    DecompositionMismatch,
    IdentityViolation,
    IndexOutOfRange,
    NonCommutativeSplit,
    NonIdempotentIdentity,
)
from src.core.algebra.rendering import render

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# COMPOSITION MODEL
# =============================================================================


class Composition(BaseModel, Generic[T]):
    """
    Композиция: части, их свёртка и алгебра, в которой она вычислена.

    Части хранятся в tuple: ни одна композиция не разделяет изменяемое
    хранилище с другой. decompose заменяет tuple целиком.

    Создавать через singleton/construct: прямой вызов конструктора не
    вычисляет и не проверяет net.
    """

    net: T = Field(..., description="Кэшированный fold частей")
    parts: tuple[T, ...] = Field(..., description="Упорядоченные части")
    initial_value: T = Field(..., description="Единица алгебры")
    fold_fun: Callable[[T, T], T] = Field(..., description="Бинарная операция свёртки")
    is_commutative: bool = Field(
        default=False, description="Заявлено ли, что порядок частей не влияет на net"
    )

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def __str__(self) -> str:
        return render(self)


# =============================================================================
# CONSTRUCTION
# =============================================================================


def _fold(parts: Iterable[T], initial_value: T, fold_fun: Callable[[T, T], T]) -> T:
    return reduce(fold_fun, parts, initial_value)


def singleton(
    net: T,
    initial_value: T,
    fold_fun: Callable[[T, T], T],
    is_commutative: bool,
    config: AlgebraConfig | None = None,
) -> Composition[T]:
    """
    Композиция из одной части.

    Единственная операция, проверяющая identity law:
        fold_fun(initial_value, net) == net

    Args:
        net: Единственная часть (она же результат)
        initial_value: Единица алгебры
        fold_fun: Бинарная операция
        is_commutative: Заявление о коммутативности
        config: Политика сравнения (default: точное сравнение)

    Returns:
        Composition с parts == (net,)

    Raises:
        IdentityViolation: если initial_value не является левой единицей для net

    Examples:
        >>> str(singleton(1, 0, operator.add, True))
        '[1] of 1 with 1 parts'
    """
    cfg = resolve_config(config)

    folded = fold_fun(initial_value, net)
    if not cfg.equal(folded, net):
        raise IdentityViolation(
            f"Initial value {initial_value!r} must behave like identity: "
            f"fold_fun({initial_value!r}, {net!r}) = {folded!r} != {net!r}"
        )

    return Composition(
        net=net,
        parts=(net,),
        initial_value=initial_value,
        fold_fun=fold_fun,
        is_commutative=is_commutative,
    )


def construct(
    parts: Iterable[T],
    initial_value: T,
    fold_fun: Callable[[T, T], T],
    is_commutative: bool,
    config: AlgebraConfig | None = None,
) -> Composition[T]:
    """
    Композиция из последовательности частей.

    net вычисляется левым fold от initial_value. Identity law по умолчанию
    НЕ проверяется (в отличие от singleton); включается через
    AlgebraConfig.check_identity_on_construct.

    Args:
        parts: Части в порядке свёртки (копируются)
        initial_value: Единица алгебры
        fold_fun: Бинарная операция
        is_commutative: Заявление о коммутативности
        config: Политика сравнения и проверок

    Returns:
        Composition с net = fold(parts)

    Raises:
        IdentityViolation: только если check_identity_on_construct=True и
            initial_value не является левой единицей хотя бы для одной части
    """
    cfg = resolve_config(config)
    owned = tuple(parts)

    if cfg.check_identity_on_construct:
        for index, part in enumerate(owned):
            folded = fold_fun(initial_value, part)
            if not cfg.equal(folded, part):
                raise IdentityViolation(
                    f"Initial value {initial_value!r} must behave like identity "
                    f"for part #{index}: fold_fun({initial_value!r}, {part!r}) = "
                    f"{folded!r} != {part!r}"
                )

    return Composition(
        net=_fold(owned, initial_value, fold_fun),
        parts=owned,
        initial_value=initial_value,
        fold_fun=fold_fun,
        is_commutative=is_commutative,
    )


# =============================================================================
# OBSERVATION
# =============================================================================


def check_fold(x: Composition[T], config: AlgebraConfig | None = None) -> bool:
    """
    Независимый пересчёт fold и сверка с сохранённым net.

    Единственный способ обнаружить расхождение net после decompose.
    Никогда не вызывается автоматически.

    Args:
        x: Проверяемая композиция
        config: Политика сравнения

    Returns:
        True если fold(parts) == net
    """
    cfg = resolve_config(config)
    return cfg.equal(_fold(x.parts, x.initial_value, x.fold_fun), x.net)


def num_parts(x: Any) -> int:
    """Количество частей композиции (или партиции)."""
    return len(x.parts)


# =============================================================================
# COMBINE
# =============================================================================


def _check_same_algebra(
    x: Composition[T], y: Composition[T], cfg: AlgebraConfig, operation: str
) -> None:
    if not cfg.equal(x.initial_value, y.initial_value):
        raise AlgebraMismatch(
            f"{operation}: both initial values must be the same, "
            f"got {x.initial_value!r} and {y.initial_value!r}"
        )
    if x.fold_fun is not y.fold_fun:
        raise AlgebraMismatch(
            f"{operation}: both folding functions must be the same object, "
            f"got {x.fold_fun!r} and {y.fold_fun!r}"
        )


def combine(
    x: Composition[T],
    y: Composition[T],
    check_valid: bool = True,
    config: AlgebraConfig | None = None,
) -> Composition[T]:
    """
    Объединение двух композиций: части x, затем части y.

    net = fold_fun(x.net, y.net) — без повторной свёртки; совпадает с
    fold(parts) только для ассоциативной fold_fun.

    is_commutative = x.is_commutative and y.is_commutative: конкатенация
    задаёт порядок МЕЖДУ группами.

    Args:
        x: Левый операнд
        y: Правый операнд
        check_valid: Проверять совпадение алгебр (см. combine_trusted)
        config: Политика сравнения

    Returns:
        Новая Composition; операнды не изменяются

    Raises:
        AlgebraMismatch: если check_valid и initial_value/fold_fun различаются
    """
    if check_valid:
        _check_same_algebra(x, y, resolve_config(config), "combine")
    else:
        logger.debug("combine: algebra validation skipped")

    logger.debug("combine: %d + %d parts", len(x.parts), len(y.parts))

    return Composition(
        net=x.fold_fun(x.net, y.net),
        parts=x.parts + y.parts,
        initial_value=x.initial_value,
        fold_fun=x.fold_fun,
        is_commutative=x.is_commutative and y.is_commutative,
    )


def combine_trusted(x: Composition[T], y: Composition[T]) -> Composition[T]:
    """combine без проверки алгебр: совместимость установлена вызывающим кодом."""
    return combine(x, y, check_valid=False)


# =============================================================================
# DECOMPOSE
# =============================================================================


def decompose(
    x: Composition[T],
    y: Composition[T],
    idx: int,
    check_valid: bool = True,
    config: AlgebraConfig | None = None,
) -> None:
    """
    Замена части x.parts[idx] всеми частями y (in-place splice).

    Длина x.parts меняется на len(y.parts) - 1. x.net НЕ пересчитывается:
    для неассоциативных или порядко-зависимых операций net может разойтись
    с fold(parts) — проверяется через check_fold.

    Порядок проверок (все до мутации):
    1. Совпадение алгебр (check_valid)
    2. Индекс в [0, len(x.parts)) (всегда: заменять нечего)
    3. x.parts[idx] == y.net (check_valid)

    Args:
        x: Изменяемая композиция
        y: Раскладка заменяемой части
        idx: Позиция заменяемой части
        check_valid: Выполнять проверки алгебры и soundness
        config: Политика сравнения

    Raises:
        AlgebraMismatch: initial_value/fold_fun различаются
        IndexOutOfRange: idx не указывает на часть x
        DecompositionMismatch: x.parts[idx] != y.net
    """
    cfg = resolve_config(config)

    if check_valid:
        _check_same_algebra(x, y, cfg, "decompose")

    if isinstance(idx, bool) or not 0 <= idx < len(x.parts):
        raise IndexOutOfRange(
            f"decompose: index {idx!r} out of range for composition "
            f"with {len(x.parts)} parts"
        )

    if check_valid and not cfg.equal(x.parts[idx], y.net):
        raise DecompositionMismatch(
            f"decompose: the net result {y.net!r} of the composition to be inserted "
            f"does not match the part {x.parts[idx]!r} it replaces at index {idx}"
        )

    if not check_valid:
        logger.debug("decompose: algebra and soundness validation skipped")

    x.parts = x.parts[:idx] + y.parts + x.parts[idx + 1:]

    logger.debug(
        "decompose: replaced part %d with %d parts (now %d parts)",
        idx,
        len(y.parts),
        len(x.parts),
    )


def decompose_trusted(x: Composition[T], y: Composition[T], idx: int) -> None:
    """decompose без проверок алгебры и soundness (индекс проверяется всегда)."""
    decompose(x, y, idx, check_valid=False)


# =============================================================================
# SPLIT
# =============================================================================


def _require_commutative_split(x: Composition[T], operation: str) -> None:
    if not x.is_commutative:
        raise NonCommutativeSplit(
            f"{operation}: the operation must be commutative for the parts to be "
            f"split according to a predicate, otherwise the result changes upon "
            f"recombining"
        )


def split(
    x: Composition[T],
    predicate: Callable[[T], bool],
    config: AlgebraConfig | None = None,
) -> tuple[Composition[T], Composition[T]]:
    """
    Стабильное разделение частей на удовлетворяющие и не удовлетворяющие
    предикату.

    Каждая половина создаётся через construct (net свёртывается заново),
    обе помечаются коммутативными. Для ассоциативной fold_fun:
        fold_fun(satisfying.net, unsatisfying.net) == x.net

    Args:
        x: Исходная композиция (не изменяется)
        predicate: Условие отбора частей
        config: Политика сравнения

    Returns:
        (satisfying, unsatisfying)

    Raises:
        NonCommutativeSplit: x не коммутативна
        NonIdempotentIdentity: fold_fun(iv, iv) != iv
    """
    cfg = resolve_config(config)

    _require_commutative_split(x, "split")

    doubled = x.fold_fun(x.initial_value, x.initial_value)
    if not cfg.equal(doubled, x.initial_value):
        raise NonIdempotentIdentity(
            f"split: the initial value {x.initial_value!r} must be idempotent under "
            f"the folding operation (got {doubled!r}); it is used in both halves"
        )

    satisfiers: list[T] = []
    unsatisfiers: list[T] = []
    for part in x.parts:
        if predicate(part):
            satisfiers.append(part)
        else:
            unsatisfiers.append(part)

    logger.debug(
        "split: %d parts -> %d satisfying, %d unsatisfying",
        len(x.parts),
        len(satisfiers),
        len(unsatisfiers),
    )

    satisfying = construct(satisfiers, x.initial_value, x.fold_fun, True)
    unsatisfying = construct(unsatisfiers, x.initial_value, x.fold_fun, True)
    return satisfying, unsatisfying


def split_in_place(x: Composition[T], predicate: Callable[[T], bool]) -> int:
    """
    Перестановка частей: сначала удовлетворяющие предикату, затем остальные.

    Порядок внутри каждой группы сохраняется, net не меняется.

    Returns:
        Количество частей, удовлетворяющих предикату

    Raises:
        NonCommutativeSplit: x не коммутативна
    """
    _require_commutative_split(x, "split_in_place")

    satisfiers: list[T] = []
    unsatisfiers: list[T] = []
    for part in x.parts:
        (satisfiers if predicate(part) else unsatisfiers).append(part)
    x.parts = tuple(satisfiers) + tuple(unsatisfiers)

    logger.debug("split_in_place: %d of %d parts moved first", len(satisfiers), len(x.parts))

    return len(satisfiers)
