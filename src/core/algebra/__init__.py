"""
Algebra of fold compositions

Composition — упорядоченные части и их свёртка под бинарной операцией.
Partition — отсортированная по убыванию форма коммутативной композиции.
"""

# Errors
from src.core.algebra.errors import (
    AlgebraMismatch,
    CompositionError,
    CompositionErrorKind,
    DecompositionMismatch,
    IdentityViolation,
    IndexOutOfRange,
    NonCommutativeSort,
    NonCommutativeSplit,
    NonIdempotentIdentity,
)

# Config
from src.core.algebra.config import (
    DEFAULT_ALGEBRA_CONFIG,
    FLOAT_ALGEBRA_CONFIG,
    AlgebraConfig,
)

# Composition
from src.core.algebra.composition import (
    Composition,
    check_fold,
    combine,
    combine_trusted,
    construct,
    decompose,
    decompose_trusted,
    num_parts,
    singleton,
    split,
    split_in_place,
)

# Partition
from src.core.algebra.partition import Partition, to_partition

# Rendering
from src.core.algebra.rendering import format_parts, render

__all__ = [
    # Errors
    "CompositionError",
    "CompositionErrorKind",
    "IdentityViolation",
    "AlgebraMismatch",
    "DecompositionMismatch",
    "NonCommutativeSplit",
    "NonIdempotentIdentity",
    "NonCommutativeSort",
    "IndexOutOfRange",
    # Config
    "AlgebraConfig",
    "DEFAULT_ALGEBRA_CONFIG",
    "FLOAT_ALGEBRA_CONFIG",
    # Composition — Types
    "Composition",
    # Composition — Construction
    "singleton",
    "construct",
    # Composition — Observation
    "check_fold",
    "num_parts",
    # Composition — Operations
    "combine",
    "combine_trusted",
    "decompose",
    "decompose_trusted",
    "split",
    "split_in_place",
    # Partition
    "Partition",
    "to_partition",
    # Rendering
    "format_parts",
    "render",
]
