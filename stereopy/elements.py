"""
Chemical elements and bond kinds.

This module provides the element registry, the organic subset tables and
the closed catalog of bond kinds that the stereo code reasons over.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Final, FrozenSet


class Bond(Enum):
    """Bond kinds with their SMILES token and electron contribution.

    ``UP`` and ``DOWN`` are the directional single bonds (``/`` and ``\\``)
    used next to stereo double bonds. Their meaning depends on the
    direction the bond is read in, see :meth:`inverse`.
    """

    IMPLICIT = ("", 2)
    SINGLE = ("-", 2)
    DOUBLE = ("=", 4)
    TRIPLE = ("#", 6)
    QUADRUPLE = ("$", 8)
    AROMATIC = (":", 3)
    UP = ("/", 2)
    DOWN = ("\\", 2)

    def __init__(self, token: str, electrons: int) -> None:
        self.token = token
        self.electrons = electrons

    def __str__(self) -> str:
        return self.token

    @property
    def is_directional(self) -> bool:
        """Whether this is an up or down bond."""
        return self is Bond.UP or self is Bond.DOWN

    def inverse(self) -> "Bond":
        """The same bond read from the other end."""
        if self is Bond.UP:
            return Bond.DOWN
        if self is Bond.DOWN:
            return Bond.UP
        return self

    @classmethod
    def from_token(cls, token: str) -> "Bond":
        """Look up a bond kind by its SMILES token.

        Raises:
            ValueError: If the token is not a bond symbol.
        """
        for bond in cls:
            if bond.token == token:
                return bond
        raise ValueError(f"Unknown bond token: {token!r}")


@dataclass(frozen=True, slots=True)
class Element:
    """Immutable element data.

    Attributes:
        atomic_number: Atomic number (proton count), 0 for the wildcard.
        symbol: Element symbol (e.g., "C", "Cl").
        valences: Allowed valences when written in the organic subset,
            ascending. Empty for elements that must be bracketed.
    """

    atomic_number: int
    symbol: str
    valences: tuple[int, ...] = ()

    _by_symbol: ClassVar[dict[str, "Element"]] = {}
    _by_number: ClassVar[dict[int, "Element"]] = {}

    def __post_init__(self) -> None:
        Element._by_symbol[self.symbol] = self
        Element._by_symbol[self.symbol.lower()] = self  # Aromatic lowercase
        Element._by_number[self.atomic_number] = self

    @classmethod
    def from_symbol(cls, symbol: str) -> "Element | None":
        """Look up element by symbol (case-insensitive for single letters)."""
        if symbol in cls._by_symbol:
            return cls._by_symbol[symbol]
        return cls._by_symbol.get(symbol.capitalize())

    @classmethod
    def from_atomic_number(cls, num: int) -> "Element | None":
        """Look up element by atomic number."""
        return cls._by_number.get(num)

    @property
    def is_organic(self) -> bool:
        """Whether the element may be written without brackets."""
        return self.symbol in ORGANIC_SUBSET

    def implicit_hydrogens(self, valence: int) -> int:
        """Hydrogens needed to fill the lowest allowed valence.

        Args:
            valence: Bond order sum already used by explicit bonds.

        Returns:
            Number of implicit hydrogens, 0 if no allowed valence fits.

        Example:
            >>> Element.from_symbol("S").implicit_hydrogens(3)
            1
        """
        for allowed in self.valences:
            if valence <= allowed:
                return allowed - valence
        return 0


# Periodic table in atomic number order, index 0 is the wildcard
_SYMBOLS: Final[tuple[str, ...]] = tuple("""
    * H He
    Li Be B C N O F Ne
    Na Mg Al Si P S Cl Ar
    K Ca Sc Ti V Cr Mn Fe Co Ni Cu Zn Ga Ge As Se Br Kr
    Rb Sr Y Zr Nb Mo Tc Ru Rh Pd Ag Cd In Sn Sb Te I Xe
    Cs Ba La Ce Pr Nd Pm Sm Eu Gd Tb Dy Ho Er Tm Yb Lu
    Hf Ta W Re Os Ir Pt Au Hg Tl Pb Bi Po At Rn
    Fr Ra Ac Th Pa U Np Pu Am Cm Bk Cf Es Fm Md No Lr
    Rf Db Sg Bh Hs Mt Ds Rg Cn Nh Fl Mc Lv Ts Og
""".split())

# Valences of the organic subset, used for implicit hydrogen counts
ORGANIC_VALENCES: Final[dict[str, tuple[int, ...]]] = {
    "B": (3,),
    "C": (4,),
    "N": (3, 5),
    "O": (2,),
    "P": (3, 5),
    "S": (2, 4, 6),
    "F": (1,),
    "Cl": (1,),
    "Br": (1,),
    "I": (1,),
}

ELEMENTS: Final[tuple[Element, ...]] = tuple(
    Element(num, sym, ORGANIC_VALENCES.get(sym, ()))
    for num, sym in enumerate(_SYMBOLS)
)

# Daylight "organic subset" - atoms that can appear without brackets
ORGANIC_SUBSET: Final[FrozenSet[str]] = frozenset(ORGANIC_VALENCES)

# Aromatic element symbols allowed in lowercase form outside brackets
AROMATIC_SUBSET: Final[FrozenSet[str]] = frozenset({
    "b", "c", "n", "o", "p", "s",
})

# Two-letter elements in organic subset (need special handling in parser)
TWO_LETTER_ORGANIC: Final[FrozenSet[str]] = frozenset({"Cl", "Br"})


def is_aromatic_symbol(symbol: str) -> bool:
    """Check if symbol represents an aromatic organic subset atom."""
    return symbol in AROMATIC_SUBSET
