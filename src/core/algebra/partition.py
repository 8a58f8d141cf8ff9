"""
Partition — каноничная (отсортированная) форма коммутативной композиции

Части партиции упорядочены по убыванию. Переход односторонний: обратной
операции, восстанавливающей исходный порядок, нет.
"""

import logging
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from src.core.algebra.composition import Composition
from src.core.algebra.errors import NonCommutativeSort
from src.core.algebra.rendering import render

logger = logging.getLogger(__name__)


# =============================================================================
# PARTITION MODEL
# =============================================================================


class Partition(BaseModel):
    """
    Immutable снимок композиции с частями, отсортированными по убыванию.

    Партиция не содержит изменяемой композиции: decompose и split_in_place
    над партицией отвергаются (frozen=True), порядок убывания сохраняется.
    """

    net: Any = Field(..., description="Fold частей (совпадает с источником)")
    parts: tuple[Any, ...] = Field(..., description="Части в порядке убывания")
    initial_value: Any = Field(..., description="Единица алгебры")
    fold_fun: Callable[[Any, Any], Any] = Field(..., description="Бинарная операция свёртки")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def is_commutative(self) -> bool:
        return True

    @property
    def num_parts(self) -> int:
        return len(self.parts)

    def __str__(self) -> str:
        return render(self)


# =============================================================================
# TO PARTITION
# =============================================================================


def to_partition(composition: Composition) -> Partition:
    """
    Сортировка частей коммутативной композиции по убыванию.

    net не меняется: для коммутативной операции результат свёртки не
    зависит от порядка частей. Части должны поддерживать полный порядок.

    Args:
        composition: Исходная композиция (не изменяется)

    Returns:
        Partition с частями в порядке убывания

    Raises:
        NonCommutativeSort: композиция не коммутативна
    """
    if not composition.is_commutative:
        raise NonCommutativeSort(
            "The operation must be commutative to go from composition to partition"
        )

    partition = Partition(
        net=composition.net,
        parts=tuple(sorted(composition.parts, reverse=True)),
        initial_value=composition.initial_value,
        fold_fun=composition.fold_fun,
    )

    logger.debug("to_partition: sorted %d parts", len(partition.parts))

    return partition
