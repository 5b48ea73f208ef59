"""Tests for element data and bond kinds."""

import pytest
from stereopy.elements import (
    AROMATIC_SUBSET,
    ELEMENTS,
    ORGANIC_SUBSET,
    Bond,
    Element,
    is_aromatic_symbol,
)


class TestElement:
    """Test Element class."""

    @pytest.mark.parametrize("symbol,number", [
        ("C", 6),
        ("N", 7),
        ("O", 8),
        ("Cl", 17),
        ("Br", 35),
        ("Og", 118),
        ("*", 0),
    ])
    def test_from_symbol(self, symbol, number):
        elem = Element.from_symbol(symbol)
        assert elem is not None
        assert elem.symbol == symbol
        assert elem.atomic_number == number

    def test_from_atomic_number(self):
        elem = Element.from_atomic_number(6)
        assert elem is Element.from_symbol("C")

    def test_aromatic_lowercase(self):
        """Lowercase symbols find the same element."""
        assert Element.from_symbol("c") is Element.from_symbol("C")
        assert Element.from_symbol("se") is Element.from_symbol("Se")

    def test_invalid_symbol(self):
        assert Element.from_symbol("Xx") is None
        assert Element.from_atomic_number(200) is None

    def test_table_in_order(self):
        assert [e.atomic_number for e in ELEMENTS] == list(range(len(ELEMENTS)))

    def test_is_organic(self):
        assert Element.from_symbol("S").is_organic
        assert not Element.from_symbol("Na").is_organic

    @pytest.mark.parametrize("symbol,valence,expected", [
        ("C", 0, 4),
        ("C", 3, 1),
        ("C", 4, 0),
        ("N", 3, 0),
        ("N", 4, 1),
        ("S", 3, 1),
        ("S", 5, 1),
        ("S", 7, 0),
        ("Na", 0, 0),
    ])
    def test_implicit_hydrogens(self, symbol, valence, expected):
        """Hydrogens fill the lowest allowed valence that fits."""
        assert Element.from_symbol(symbol).implicit_hydrogens(valence) == expected


class TestSubsets:
    """Test organic and aromatic subsets."""

    def test_organic_subset(self):
        assert ORGANIC_SUBSET == {"B", "C", "N", "O", "P", "S", "F", "Cl", "Br", "I"}

    def test_aromatic_subset(self):
        assert AROMATIC_SUBSET == {"b", "c", "n", "o", "p", "s"}
        assert is_aromatic_symbol("c")
        assert not is_aromatic_symbol("C")


class TestBond:
    """Test bond kinds."""

    @pytest.mark.parametrize("bond,electrons", [
        (Bond.IMPLICIT, 2),
        (Bond.SINGLE, 2),
        (Bond.DOUBLE, 4),
        (Bond.TRIPLE, 6),
        (Bond.QUADRUPLE, 8),
        (Bond.AROMATIC, 3),
        (Bond.UP, 2),
        (Bond.DOWN, 2),
    ])
    def test_electrons(self, bond, electrons):
        assert bond.electrons == electrons

    def test_inverse(self):
        assert Bond.UP.inverse() is Bond.DOWN
        assert Bond.DOWN.inverse() is Bond.UP
        for bond in Bond:
            if not bond.is_directional:
                assert bond.inverse() is bond

    @pytest.mark.parametrize("token,bond", [
        ("", Bond.IMPLICIT),
        ("=", Bond.DOUBLE),
        ("/", Bond.UP),
        ("\\", Bond.DOWN),
    ])
    def test_from_token(self, token, bond):
        assert Bond.from_token(token) is bond
        assert str(bond) == token

    def test_from_token_unknown(self):
        with pytest.raises(ValueError):
            Bond.from_token("~")
