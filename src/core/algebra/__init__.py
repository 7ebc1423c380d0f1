"""
Algebra — контракты Semigroup/Monoid и стандартные экземпляры.
"""

from src.core.algebra.monoid import (
    MONOID_ALL,
    MONOID_ANY,
    MONOID_PRODUCT,
    MONOID_STRING,
    MONOID_SUM,
    Monoid,
    MonoidLike,
    monoid_concat_all,
)
from src.core.algebra.semigroup import (
    SEMIGROUP_ALL,
    SEMIGROUP_ANY,
    SEMIGROUP_PRODUCT,
    SEMIGROUP_STRING,
    SEMIGROUP_SUM,
    Semigroup,
    SemigroupLike,
    concat_all,
    semigroup_first,
    semigroup_last,
    semigroup_max,
    semigroup_min,
)

__all__ = [
    # Semigroup — Types
    "Semigroup",
    "SemigroupLike",
    # Semigroup — Instances
    "SEMIGROUP_ALL",
    "SEMIGROUP_ANY",
    "SEMIGROUP_PRODUCT",
    "SEMIGROUP_STRING",
    "SEMIGROUP_SUM",
    "semigroup_first",
    "semigroup_last",
    "semigroup_max",
    "semigroup_min",
    # Semigroup — Functions
    "concat_all",
    # Monoid — Types
    "Monoid",
    "MonoidLike",
    # Monoid — Instances
    "MONOID_ALL",
    "MONOID_ANY",
    "MONOID_PRODUCT",
    "MONOID_STRING",
    "MONOID_SUM",
    # Monoid — Functions
    "monoid_concat_all",
]
