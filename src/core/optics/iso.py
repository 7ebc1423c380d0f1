"""
Iso — Total accessor (optic)

Контракт optics-коллаборатора: пара функций
    get:         A → B
    reverse_get: B → A
образующих биекцию. Поведенчески идентична src.core.isomorphism.Isomorphism,
отличаются только имена полей.
"""

from typing import Callable, Generic, Protocol, TypeVar

from pydantic import BaseModel, Field

A = TypeVar("A")
B = TypeVar("B")


class IsoLike(Protocol[A, B]):
    """Структурный контракт: любой объект с get / reverse_get."""

    get: Callable[[A], B]
    reverse_get: Callable[[B], A]


class Iso(BaseModel, Generic[A, B]):
    """
    Total accessor между A и B.

    Immutable модель (frozen=True).

    Examples:
        >>> iso = Iso(get=str, reverse_get=int)
        >>> iso.get(5), iso.reverse_get("5")
        ('5', 5)
    """

    get: Callable[[A], B] = Field(..., description="Прямая функция A → B")
    reverse_get: Callable[[B], A] = Field(..., description="Обратная функция B → A")

    model_config = {"frozen": True}

    def modify(self, f: Callable[[B], B]) -> Callable[[A], A]:
        """
        Поднять функцию B → B до функции A → A.

        modify(f)(a) = reverse_get(f(get(a)))

        Examples:
            >>> Iso(get=str, reverse_get=int).modify(lambda s: s + "0")(4)
            40
        """

        def modified(a: A) -> A:
            return self.reverse_get(f(self.get(a)))

        return modified
