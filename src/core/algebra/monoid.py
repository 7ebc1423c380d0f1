"""
Monoid — Semigroup с нейтральным элементом

Monoid[A] = Semigroup[A] + empty: A, где
    concat(empty, x) == x == concat(x, empty)

Закон identity, как и ассоциативность, является обязанностью вызывающего.
"""

from typing import Any, Callable, Final, Generic, Iterable, Protocol, TypeVar

from pydantic import Field

from src.core.algebra.semigroup import Semigroup, concat_all

A = TypeVar("A")


class MonoidLike(Protocol[A]):
    """Структурный контракт: concat + empty."""

    concat: Callable[[A, A], A]
    empty: A


class Monoid(Semigroup[A], Generic[A]):
    """
    Monoid над типом A.

    Examples:
        >>> MONOID_SUM.concat(MONOID_SUM.empty, 5)
        5
    """

    empty: A = Field(..., description="Нейтральный элемент concat")


# =============================================================================
# СТАНДАРТНЫЕ ЭКЗЕМПЛЯРЫ
# =============================================================================

MONOID_ALL: Final[Monoid[bool]] = Monoid(concat=lambda x, y: x and y, empty=True)

MONOID_ANY: Final[Monoid[bool]] = Monoid(concat=lambda x, y: x or y, empty=False)

MONOID_SUM: Final[Monoid[Any]] = Monoid(concat=lambda x, y: x + y, empty=0)

MONOID_PRODUCT: Final[Monoid[Any]] = Monoid(concat=lambda x, y: x * y, empty=1)

MONOID_STRING: Final[Monoid[str]] = Monoid(concat=lambda x, y: x + y, empty="")


def monoid_concat_all(monoid: MonoidLike[A]) -> Callable[[Iterable[A]], A]:
    """
    Свёртка последовательности, начиная с monoid.empty.

    Examples:
        >>> monoid_concat_all(MONOID_SUM)([1, 2, 3])
        6
        >>> monoid_concat_all(MONOID_ALL)([])
        True
    """
    fold = concat_all(monoid)

    def fold_from_empty(items: Iterable[A]) -> A:
        return fold(monoid.empty, items)

    return fold_from_empty
