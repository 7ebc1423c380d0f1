"""
Semigroup — Ассоциативная бинарная операция

Контракт algebra-коллаборатора: пара (тип A, concat: (A, A) → A), где concat
ассоциативна. Нейтральный элемент НЕ требуется (semigroup, не monoid).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. concat(concat(x, y), z) == concat(x, concat(y, z)) — обязанность вызывающего
2. Экземпляры immutable (frozen=True), операции не мутируют аргументы
3. Ассоциативность НЕ проверяется в runtime (см. src.core.laws)
"""

from typing import Any, Callable, Final, Generic, Iterable, Protocol, TypeVar

from pydantic import BaseModel, Field

A = TypeVar("A")


# =============================================================================
# КОНТРАКТ
# =============================================================================


class SemigroupLike(Protocol[A]):
    """Структурный контракт: любой объект с атрибутом concat."""

    concat: Callable[[A, A], A]


class Semigroup(BaseModel, Generic[A]):
    """
    Semigroup над типом A.

    Immutable модель (frozen=True). Любая производная операция создаёт
    новый экземпляр.

    Examples:
        >>> SEMIGROUP_SUM.concat(2, 3)
        5
    """

    concat: Callable[[A, A], A] = Field(..., description="Ассоциативная операция (A, A) → A")

    model_config = {"frozen": True}


# =============================================================================
# СТАНДАРТНЫЕ ЭКЗЕМПЛЯРЫ
# =============================================================================

# Логическое И над bool
SEMIGROUP_ALL: Final[Semigroup[bool]] = Semigroup(concat=lambda x, y: x and y)

# Логическое ИЛИ над bool
SEMIGROUP_ANY: Final[Semigroup[bool]] = Semigroup(concat=lambda x, y: x or y)

# Сложение чисел
SEMIGROUP_SUM: Final[Semigroup[Any]] = Semigroup(concat=lambda x, y: x + y)

# Умножение чисел
SEMIGROUP_PRODUCT: Final[Semigroup[Any]] = Semigroup(concat=lambda x, y: x * y)

# Конкатенация строк
SEMIGROUP_STRING: Final[Semigroup[str]] = Semigroup(concat=lambda x, y: x + y)


def semigroup_min() -> Semigroup[Any]:
    """Semigroup, выбирающий меньший из двух элементов (при равенстве — левый)."""
    return Semigroup(concat=lambda x, y: y if y < x else x)


def semigroup_max() -> Semigroup[Any]:
    """Semigroup, выбирающий больший из двух элементов (при равенстве — левый)."""
    return Semigroup(concat=lambda x, y: y if y > x else x)


def semigroup_first() -> Semigroup[Any]:
    """Semigroup, всегда возвращающий левый аргумент."""
    return Semigroup(concat=lambda x, _: x)


def semigroup_last() -> Semigroup[Any]:
    """Semigroup, всегда возвращающий правый аргумент."""
    return Semigroup(concat=lambda _, y: y)


# =============================================================================
# СВЁРТКА
# =============================================================================


def concat_all(semigroup: SemigroupLike[A]) -> Callable[[A, Iterable[A]], A]:
    """
    Свёртка последовательности через semigroup (слева направо).

    Args:
        semigroup: Любой объект с атрибутом concat

    Returns:
        Функция (start, items) → start ⊕ items[0] ⊕ ... ⊕ items[n-1].
        Для пустого items возвращает start без изменений.

    Examples:
        >>> concat_all(SEMIGROUP_SUM)(1, [2, 3, 4])
        10
        >>> concat_all(SEMIGROUP_SUM)(7, [])
        7
    """

    def fold(start: A, items: Iterable[A]) -> A:
        result = start
        for item in items:
            result = semigroup.concat(result, item)
        return result

    return fold
