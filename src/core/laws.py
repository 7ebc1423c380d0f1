"""
Laws — Опциональная проверка алгебраических законов на выборке

Операции src.core.isomorphism доверяют вызывающему безусловно: биекция и
ассоциативность НЕ проверяются в runtime. Этот модуль вызывается только
явно (отладка, тесты) и проверяет законы на конечной выборке значений.

Проверяемые законы:
1. Round-trip:     from_(to(a)) == a,  to(from_(b)) == b
2. Associativity:  concat(concat(x, y), z) == concat(x, concat(y, z))
3. Identity:       concat(empty, x) == x == concat(x, empty)

Успешная проверка на выборке НЕ доказывает закон, только не опровергает его.
"""

import logging
from itertools import islice, product
from typing import Any, Final, Iterable, Optional

from src.core.algebra import MonoidLike, SemigroupLike
from src.core.isomorphism import Isomorphism

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ПРОВЕРКИ
# =============================================================================

# Максимальное количество значений, берущихся из каждой выборки
LAW_CHECK_MAX_SAMPLES: Final[int] = 64

# Максимальное количество троек (x, y, z) для проверки ассоциативности
LAW_CHECK_MAX_TRIPLES: Final[int] = 4096


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LawViolation(Exception):
    """
    Нарушение алгебраического закона на конкретном значении выборки.

    Attributes:
        law: Имя нарушенного закона
        sample: Значение (или кортеж значений), на котором закон нарушен
    """

    def __init__(self, law: str, sample: Any, message: str):
        super().__init__(message)
        self.law = law
        self.sample = sample


class IsomorphismLawViolation(LawViolation):
    """Пара функций не является биекцией (round-trip нарушен)."""
    pass


class SemigroupLawViolation(LawViolation):
    """Операция concat не ассоциативна."""
    pass


class MonoidLawViolation(LawViolation):
    """empty не является нейтральным элементом concat."""
    pass


# =============================================================================
# ISOMORPHISM
# =============================================================================


def check_round_trip(
    isomorphism: Isomorphism[Any, Any],
    samples_a: Iterable[Any] = (),
    samples_b: Iterable[Any] = (),
    max_samples: int = LAW_CHECK_MAX_SAMPLES,
) -> None:
    """
    Проверка round-trip закона в обе стороны.

    Args:
        isomorphism: Проверяемый изоморфизм
        samples_a: Значения типа A для проверки from_(to(a)) == a
        samples_b: Значения типа B для проверки to(from_(b)) == b
        max_samples: Ограничение на количество значений из каждой выборки

    Raises:
        IsomorphismLawViolation: на первом значении, нарушающем закон
        ValueError: если max_samples ≤ 0

    Examples:
        >>> check_round_trip(Isomorphism(to=str, from_=int), [1, 2], ["3"])
        >>> check_round_trip(Isomorphism(to=abs, from_=lambda x: x), [-1])  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        IsomorphismLawViolation: ...
    """
    if max_samples <= 0:
        raise ValueError(f"max_samples must be positive, got {max_samples}")

    checked = 0
    for a in islice(samples_a, max_samples):
        back = isomorphism.from_(isomorphism.to(a))
        if back != a:
            logger.warning("Round-trip A → B → A violated for %r (got %r)", a, back)
            raise IsomorphismLawViolation(
                "round_trip_a",
                a,
                f"Round-trip violated: from_(to({a!r})) == {back!r}, expected {a!r}",
            )
        checked += 1

    for b in islice(samples_b, max_samples):
        back = isomorphism.to(isomorphism.from_(b))
        if back != b:
            logger.warning("Round-trip B → A → B violated for %r (got %r)", b, back)
            raise IsomorphismLawViolation(
                "round_trip_b",
                b,
                f"Round-trip violated: to(from_({b!r})) == {back!r}, expected {b!r}",
            )
        checked += 1

    logger.debug("Round-trip law holds on %d samples", checked)


def is_lawful_isomorphism(
    isomorphism: Isomorphism[Any, Any],
    samples_a: Iterable[Any] = (),
    samples_b: Iterable[Any] = (),
    max_samples: int = LAW_CHECK_MAX_SAMPLES,
) -> bool:
    """
    Проверка round-trip закона без exception.

    Returns:
        True если закон выполняется на всей выборке, False иначе
    """
    try:
        check_round_trip(isomorphism, samples_a, samples_b, max_samples=max_samples)
    except IsomorphismLawViolation:
        return False
    return True


# =============================================================================
# SEMIGROUP / MONOID
# =============================================================================


def check_associativity(
    semigroup: SemigroupLike[Any],
    samples: Iterable[Any],
    max_samples: int = LAW_CHECK_MAX_SAMPLES,
    max_triples: int = LAW_CHECK_MAX_TRIPLES,
) -> None:
    """
    Проверка ассоциативности concat на всех тройках из выборки.

    Args:
        semigroup: Любой объект с атрибутом concat
        samples: Значения для построения троек (x, y, z)
        max_samples: Ограничение на количество значений выборки
        max_triples: Ограничение на количество проверяемых троек

    Raises:
        SemigroupLawViolation: на первой тройке, нарушающей закон
        ValueError: если max_samples ≤ 0 или max_triples ≤ 0

    Examples:
        >>> from src.core.algebra import SEMIGROUP_SUM
        >>> check_associativity(SEMIGROUP_SUM, [0, 1, 2])
    """
    if max_samples <= 0:
        raise ValueError(f"max_samples must be positive, got {max_samples}")
    if max_triples <= 0:
        raise ValueError(f"max_triples must be positive, got {max_triples}")

    values = list(islice(samples, max_samples))
    concat = semigroup.concat

    checked = 0
    for x, y, z in islice(product(values, repeat=3), max_triples):
        left = concat(concat(x, y), z)
        right = concat(x, concat(y, z))
        if left != right:
            logger.warning("Associativity violated for %r: %r != %r", (x, y, z), left, right)
            raise SemigroupLawViolation(
                "associativity",
                (x, y, z),
                f"Associativity violated for ({x!r}, {y!r}, {z!r}): "
                f"(x ⊕ y) ⊕ z == {left!r}, x ⊕ (y ⊕ z) == {right!r}",
            )
        checked += 1

    logger.debug("Associativity holds on %d triples", checked)


def check_identity(
    monoid: MonoidLike[Any],
    samples: Iterable[Any],
    max_samples: int = LAW_CHECK_MAX_SAMPLES,
) -> None:
    """
    Проверка закона нейтрального элемента.

    Raises:
        MonoidLawViolation: на первом значении, нарушающем закон
        ValueError: если max_samples ≤ 0
    """
    if max_samples <= 0:
        raise ValueError(f"max_samples must be positive, got {max_samples}")

    empty = monoid.empty
    violation: Optional[str] = None
    checked = 0

    for x in islice(samples, max_samples):
        if monoid.concat(empty, x) != x:
            violation = "left_identity"
        elif monoid.concat(x, empty) != x:
            violation = "right_identity"

        if violation is not None:
            logger.warning("Monoid %s violated for %r (empty=%r)", violation, x, empty)
            raise MonoidLawViolation(
                violation,
                x,
                f"Monoid {violation} violated for {x!r} with empty={empty!r}",
            )
        checked += 1

    logger.debug("Identity law holds on %d samples", checked)
