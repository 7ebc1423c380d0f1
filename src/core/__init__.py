"""
Core — изоморфизмы и связанные с ними алгебраические структуры.

Все модули чистые: без состояния, I/O и внешних систем.
"""

from src.core.isomorphism import (
    Isomorphism,
    compose,
    derive_monoid,
    derive_semigroup,
    from_iso,
    identity,
    reverse,
    to_iso,
)

__all__ = [
    # Types
    "Isomorphism",
    # Optics conversion
    "from_iso",
    "to_iso",
    # Constructors & combinators
    "compose",
    "identity",
    "reverse",
    # Derivation
    "derive_monoid",
    "derive_semigroup",
]
