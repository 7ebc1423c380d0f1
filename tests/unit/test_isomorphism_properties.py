"""
Property-тесты законов Isomorphism (hypothesis)

Проверяемые свойства:
1. Round-trip через Iso в обе стороны
2. reverse — инволюция и поточечная перестановка to/from_
3. derive_semigroup: определение concat и ассоциативность
4. compose с reverse — тождество
"""

from hypothesis import given
from hypothesis import strategies as st

from src.core import Isomorphism, compose, derive_semigroup, from_iso, reverse, to_iso
from src.core.algebra import SEMIGROUP_ALL, SEMIGROUP_ANY, SEMIGROUP_SUM
from src.core.optics import Iso


# =============================================================================
# ISOMORPHISMS
# =============================================================================

# int ⇄ десятичная строка
ISO_INT_STR = Isomorphism(to=str, from_=int)

# bool ⇄ {0, 1}
ISO_BOOL_BINARY = Isomorphism(to=lambda x: 1 if x else 0, from_=lambda n: n == 1)

# int ⇄ int, сдвиг на константу
ISO_SHIFT = Isomorphism(to=lambda n: n + 17, from_=lambda n: n - 17)


# =============================================================================
# STRATEGIES
# =============================================================================

INTS = st.integers(min_value=-(10**9), max_value=10**9)
CANONICAL_INT_STRS = INTS.map(str)
BINARY = st.sampled_from([0, 1])


# =============================================================================
# PROPERTIES
# =============================================================================


@given(a=INTS, b=CANONICAL_INT_STRS)
def test_from_iso_to_iso_roundtrip(a, b):
    back = from_iso(to_iso(ISO_INT_STR))
    assert back.to(a) == ISO_INT_STR.to(a)
    assert back.from_(b) == ISO_INT_STR.from_(b)


@given(a=INTS, b=INTS)
def test_to_iso_from_iso_roundtrip(a, b):
    accessor = Iso(get=lambda n: n * 3, reverse_get=lambda n: n // 3)
    back = to_iso(from_iso(accessor))
    assert back.get(a) == accessor.get(a)
    assert back.reverse_get(b) == accessor.reverse_get(b)


@given(a=INTS, b=CANONICAL_INT_STRS)
def test_reverse_involution(a, b):
    twice = reverse(reverse(ISO_INT_STR))
    assert twice.to(a) == ISO_INT_STR.to(a)
    assert twice.from_(b) == ISO_INT_STR.from_(b)


@given(a=INTS, b=CANONICAL_INT_STRS)
def test_reverse_swaps_pointwise(a, b):
    rev = reverse(ISO_INT_STR)
    assert rev.to(b) == ISO_INT_STR.from_(b)
    assert rev.from_(a) == ISO_INT_STR.to(a)


@given(b1=CANONICAL_INT_STRS, b2=CANONICAL_INT_STRS)
def test_derived_concat_definition(b1, b2):
    derived = derive_semigroup(ISO_INT_STR)(SEMIGROUP_SUM)
    expected = ISO_INT_STR.to(SEMIGROUP_SUM.concat(ISO_INT_STR.from_(b1), ISO_INT_STR.from_(b2)))
    assert derived.concat(b1, b2) == expected


@given(x=CANONICAL_INT_STRS, y=CANONICAL_INT_STRS, z=CANONICAL_INT_STRS)
def test_derived_sum_associativity(x, y, z):
    derived = derive_semigroup(ISO_INT_STR)(SEMIGROUP_SUM)
    assert derived.concat(derived.concat(x, y), z) == derived.concat(x, derived.concat(y, z))


@given(x=INTS, y=INTS, z=INTS)
def test_derived_shift_associativity(x, y, z):
    derived = derive_semigroup(ISO_SHIFT)(SEMIGROUP_SUM)
    assert derived.concat(derived.concat(x, y), z) == derived.concat(x, derived.concat(y, z))


@given(x=BINARY, y=BINARY, z=BINARY)
def test_derived_binary_associativity(x, y, z):
    for source in (SEMIGROUP_ALL, SEMIGROUP_ANY):
        derived = derive_semigroup(ISO_BOOL_BINARY)(source)
        assert derived.concat(derived.concat(x, y), z) == derived.concat(x, derived.concat(y, z))


@given(a=INTS)
def test_compose_with_reverse_is_identity(a):
    round_trip = compose(ISO_SHIFT, reverse(ISO_SHIFT))
    assert round_trip.to(a) == a
    assert round_trip.from_(a) == a


def test_binary_all_scenario():
    semigroup_binary_all = derive_semigroup(ISO_BOOL_BINARY)(SEMIGROUP_ALL)
    assert semigroup_binary_all.concat(0, 1) == 0
    assert semigroup_binary_all.concat(1, 1) == 1
