"""
Isomorphism — Обратимое преобразование без потерь между двумя типами

Два изоморфных типа эквивалентны для всех практических целей. Любые два
типа с одинаковой мощностью изоморфны, например bool и {0, 1}. Между двумя
типами может существовать множество корректных изоморфизмов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (обязанность вызывающего, НЕ проверяются в runtime):
1. from_(to(a)) == a для всех a ∈ A
2. to(from_(b)) == b для всех b ∈ B
3. Порядок типов не важен: reverse меняет роли без изменения поведения

Все операции модуля чистые и тотальные: не бросают исключений, не имеют
side effects, безопасны для конкурентного вызова. Нарушение биекции даёт
молча некорректный результат (например, потерю ассоциативности у
производного semigroup). Для явной проверки законов см. src.core.laws.
"""

from typing import Callable, Generic, TypeVar

from pydantic import BaseModel, Field

from src.core.algebra import Monoid, MonoidLike, Semigroup, SemigroupLike
from src.core.optics import Iso, IsoLike

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


# =============================================================================
# ISOMORPHISM MODEL
# =============================================================================


class Isomorphism(BaseModel, Generic[A, B]):
    """
    Изоморфизм между A и B: пара взаимно обратных функций.

    Поле from_ снаружи называется "from" (alias), принимаются оба имени:
        Isomorphism(to=f, from_=g)
        Isomorphism(**{"to": f, "from": g})

    Immutable модель (frozen=True).
    """

    to: Callable[[A], B] = Field(..., description="Прямая функция A → B")
    from_: Callable[[B], A] = Field(..., alias="from", description="Обратная функция B → A")

    model_config = {"frozen": True, "populate_by_name": True}


# =============================================================================
# ISOMORPHISM ⇄ ISO
# =============================================================================


def _get_iso_iso() -> "Isomorphism[Isomorphism[A, B], Iso[A, B]]":
    # Isomorphism и Iso сами изоморфны.
    return Isomorphism(
        to=lambda x: Iso(get=x.to, reverse_get=x.from_),
        from_=lambda x: Isomorphism(to=x.get, from_=x.reverse_get),
    )


def to_iso(isomorphism: Isomorphism[A, B]) -> Iso[A, B]:
    """
    Конверсия Isomorphism → Iso (total accessor).

    get = isomorphism.to, reverse_get = isomorphism.from_

    Examples:
        >>> to_iso(Isomorphism(to=str, from_=int)).get(7)
        '7'
    """
    return _get_iso_iso().to(isomorphism)


def from_iso(accessor: IsoLike[A, B]) -> Isomorphism[A, B]:
    """
    Конверсия Iso (или любого объекта с get / reverse_get) → Isomorphism.

    to = accessor.get, from_ = accessor.reverse_get

    Examples:
        >>> from_iso(Iso(get=str, reverse_get=int)).from_("7")
        7
    """
    return _get_iso_iso().from_(accessor)


# =============================================================================
# КОНСТРУКТОРЫ И КОМБИНАТОРЫ
# =============================================================================


def identity() -> Isomorphism[A, A]:
    """Тождественный изоморфизм A ⇄ A."""
    return Isomorphism(to=lambda x: x, from_=lambda x: x)


def reverse(isomorphism: Isomorphism[A, B]) -> Isomorphism[B, A]:
    """
    Поменять порядок типов: Isomorphism[A, B] → Isomorphism[B, A].

    Инволюция: reverse(reverse(i)) ведёт себя как i.

    Examples:
        >>> reverse(Isomorphism(to=str, from_=int)).to("3")
        3
    """
    return Isomorphism(to=isomorphism.from_, from_=isomorphism.to)


def compose(
    first: Isomorphism[A, B],
    second: Isomorphism[B, C],
) -> Isomorphism[A, C]:
    """
    Композиция A ⇄ B и B ⇄ C в A ⇄ C.

    Examples:
        >>> iso = compose(Isomorphism(to=str, from_=int), Isomorphism(to=list, from_="".join))
        >>> iso.to(12), iso.from_(["1", "2"])
        (['1', '2'], 12)
    """
    return Isomorphism(
        to=lambda a: second.to(first.to(a)),
        from_=lambda c: first.from_(second.from_(c)),
    )


# =============================================================================
# ПРОИЗВОДНЫЕ АЛГЕБРАИЧЕСКИЕ СТРУКТУРЫ
# =============================================================================


def derive_semigroup(
    isomorphism: Isomorphism[A, B],
) -> Callable[[SemigroupLike[A]], Semigroup[B]]:
    """
    Вывести Semigroup для B из Semigroup для A и изоморфизма A ⇄ B.

    concat_B(y, z) = to(concat_A(from_(y), from_(z)))

    Каррирована: derive_semigroup(iso) возвращает переиспользуемый deriver,
    применимый к любому semigroup над A. Ассоциативность производной
    операции следует из ассоциативности исходной и биективности iso.

    Examples:
        >>> from src.core.algebra import SEMIGROUP_ALL
        >>> iso_bool_binary = Isomorphism(to=lambda x: 1 if x else 0, from_=lambda n: n == 1)
        >>> semigroup_binary_all = derive_semigroup(iso_bool_binary)(SEMIGROUP_ALL)
        >>> semigroup_binary_all.concat(0, 1)
        0
        >>> semigroup_binary_all.concat(1, 1)
        1
    """

    def derive(semigroup: SemigroupLike[A]) -> Semigroup[B]:
        return Semigroup(
            concat=lambda y, z: isomorphism.to(
                semigroup.concat(isomorphism.from_(y), isomorphism.from_(z))
            )
        )

    return derive


def derive_monoid(
    isomorphism: Isomorphism[A, B],
) -> Callable[[MonoidLike[A]], Monoid[B]]:
    """
    Вывести Monoid для B из Monoid для A и изоморфизма A ⇄ B.

    concat — как в derive_semigroup, empty_B = to(empty_A).

    Examples:
        >>> from src.core.algebra import MONOID_ANY
        >>> iso_bool_binary = Isomorphism(to=lambda x: 1 if x else 0, from_=lambda n: n == 1)
        >>> derive_monoid(iso_bool_binary)(MONOID_ANY).empty
        0
    """
    derive_concat = derive_semigroup(isomorphism)

    def derive(monoid: MonoidLike[A]) -> Monoid[B]:
        return Monoid(
            concat=derive_concat(monoid).concat,
            empty=isomorphism.to(monoid.empty),
        )

    return derive
