"""
Тесты для Optics — модель Iso и modify
"""

import pytest
from pydantic import ValidationError

from src.core.optics import Iso


@pytest.fixture
def iso_int_str() -> Iso:
    return Iso(get=str, reverse_get=int)


class TestIso:
    """Тесты модели Iso"""

    def test_get_reverse_get(self, iso_int_str: Iso) -> None:
        assert iso_int_str.get(12) == "12"
        assert iso_int_str.reverse_get("12") == 12

    def test_frozen(self, iso_int_str: Iso) -> None:
        with pytest.raises(ValidationError):
            iso_int_str.get = repr

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Iso(get=str, reverse_get=None)


class TestModify:
    """Тесты Iso.modify"""

    def test_modify_lifts_function(self, iso_int_str: Iso) -> None:
        """modify(f)(a) = reverse_get(f(get(a)))"""
        append_zero = iso_int_str.modify(lambda s: s + "0")
        assert append_zero(4) == 40
        assert append_zero(-12) == -120

    def test_modify_identity_is_identity(self, iso_int_str: Iso) -> None:
        """modify(id) — тождество на A"""
        unchanged = iso_int_str.modify(lambda s: s)
        for a in (-5, 0, 17):
            assert unchanged(a) == a
