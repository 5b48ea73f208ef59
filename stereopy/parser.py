"""
SMILES string parser.

This module converts SMILES strings into ChemicalGraph objects.

Features:
    - Organic subset and aromatic atoms
    - Bracket atoms with isotopes, hydrogens, charges and atom classes
    - Ring closures (0-9, %nn, %(n)) with bonds on either side
    - Branches and multi-component molecules (dot separator)
    - Chirality marks (@, @@, @TH1, @AL2, @SP1, @TB5, @OH12, ...)
    - Directional bonds (/ and \\)

The incident edges of every atom are kept in the order they were written,
a ring closure taking the place of its digit. Tetrahedral chirality marks
become Tetrahedral topologies over that order.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Callable

from stereopy.configuration import Configuration, ConfigurationType
from stereopy.elements import (
    AROMATIC_SUBSET,
    ORGANIC_SUBSET,
    TWO_LETTER_ORGANIC,
    Bond,
    Element,
    is_aromatic_symbol,
)
from stereopy.exceptions import ParseError, RingError
from stereopy.stereo.explicit import to_explicit
from stereopy.topology import tetrahedral
from stereopy.types import Atom, ChemicalGraph, Edge


# Lowercase symbols allowed inside brackets in addition to the subset
_BRACKET_AROMATIC = AROMATIC_SUBSET | {"se", "as"}

# Letters that may follow '@' in an explicit chirality class
_CHIRAL_CLASSES = ("TH", "AL", "SP", "TB", "OH")


class _Tokenizer:
    """Character access to a SMILES string with lookahead."""

    __slots__ = ("_string", "_pos")

    def __init__(self, string: str) -> None:
        self._string = string
        self._pos = 0

    @property
    def position(self) -> int:
        """Current position in the string."""
        return self._pos

    def peek(self, offset: int = 0) -> str | None:
        """Character at current position + offset, None past the end."""
        pos = self._pos + offset
        if pos >= len(self._string):
            return None
        return self._string[pos]

    def next(self) -> str | None:
        """Consume and return the next character, None at the end."""
        if self._pos >= len(self._string):
            return None
        char = self._string[self._pos]
        self._pos += 1
        return char

    def skip(self, count: int = 1) -> None:
        """Skip ``count`` characters."""
        self._pos = min(self._pos + count, len(self._string))

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while ``predicate`` holds."""
        start = self._pos
        while self._pos < len(self._string) and predicate(self._string[self._pos]):
            self._pos += 1
        return self._string[start:self._pos]

    def read_number(self) -> int | None:
        """Read an integer, or None if no digits are present."""
        digits = self.read_while(str.isdigit)
        return int(digits) if digits else None

    def is_eof(self) -> bool:
        """Check if at end of string."""
        return self._pos >= len(self._string)

    def expect(self, char: str) -> None:
        """Consume the expected character.

        Raises:
            ParseError: If the next character doesn't match.
        """
        actual = self.next()
        if actual != char:
            raise ParseError(
                f"Expected '{char}', got '{actual}'",
                self._string,
                self._pos - 1,
            )


@dataclass
class _RingBond:
    """An opened ring closure waiting for its partner."""

    atom: int
    bond: Bond | None
    slot: int  # index in the written neighbor order of ``atom``


@dataclass
class _ParserState:
    """Mutable state for the SMILES parser."""

    open_rings: dict[int, _RingBond] = field(default_factory=dict)
    branch_stack: list[int] = field(default_factory=list)
    prev_atom: int | None = None
    pending_bond: Bond | None = None

    # Written neighbor order per atom, None marks an open ring closure
    written: list[list[int | None]] = field(default_factory=list)
    first_in_component: list[bool] = field(default_factory=list)
    marks: dict[int, Configuration] = field(default_factory=dict)


class SmilesParser:
    """SMILES string parser.

    Example:
        >>> g = SmilesParser("F/C=C/F").parse()
        >>> g.order, g.size
        (4, 3)

    For convenience, use the module-level `parse()` function:
        >>> from stereopy import parse
        >>> g = parse("CCO")
    """

    def __init__(self, smiles: str) -> None:
        """Initialize parser with a SMILES string.

        Args:
            smiles: SMILES string to parse.
        """
        self._smiles = smiles
        self._tokenizer = _Tokenizer(smiles)
        self._graph = ChemicalGraph()
        self._state = _ParserState()

    def parse(self) -> ChemicalGraph:
        """Parse the SMILES string into a ChemicalGraph.

        Returns:
            Parsed graph.

        Raises:
            ParseError: If SMILES syntax is invalid.
            RingError: If ring closures are invalid.
        """
        tok = self._tokenizer
        state = self._state

        while not tok.is_eof():
            char = tok.peek()

            if char == ".":
                tok.next()
                self._check_no_pending_bond()
                state.prev_atom = None
                continue

            if char in "-=#$:/\\":
                self._parse_bond()
                continue

            if char == "(":
                tok.next()
                if state.prev_atom is None:
                    raise ParseError("Branch without preceding atom", self._smiles, tok.position - 1)
                state.branch_stack.append(state.prev_atom)
                continue

            if char == ")":
                tok.next()
                if not state.branch_stack:
                    raise ParseError("Unbalanced ')'", self._smiles, tok.position - 1)
                self._check_no_pending_bond()
                state.prev_atom = state.branch_stack.pop()
                continue

            if char.isdigit() or char == "%":
                self._parse_ring_closure()
                continue

            if char == "[":
                self._parse_bracket_atom()
                continue

            if char == "*" or char.isalpha():
                self._parse_organic_atom()
                continue

            raise ParseError(
                f"Unexpected character: '{char}'",
                self._smiles,
                tok.position,
            )

        self._check_no_pending_bond()
        if state.branch_stack:
            raise ParseError("Unclosed branch", self._smiles)

        if state.open_rings:
            unclosed = sorted(state.open_rings)
            raise RingError(
                f"Unclosed ring indices: {unclosed}",
                ring_index=unclosed[0],
            )

        g = self._graph
        for u, order in enumerate(state.written):
            g.arrange(u, [g.edge(u, v) for v in order])

        for u, c in state.marks.items():
            self._add_topology(u, c)

        return g

    def _check_no_pending_bond(self) -> None:
        if self._state.pending_bond is not None:
            raise ParseError(
                f"Bond '{self._state.pending_bond.token}' is not followed by an atom",
                self._smiles,
                self._tokenizer.position - 1,
            )

    def _parse_bond(self) -> None:
        """Parse a bond symbol."""
        tok = self._tokenizer
        if self._state.pending_bond is not None:
            raise ParseError("Two consecutive bonds", self._smiles, tok.position)
        self._state.pending_bond = Bond.from_token(tok.next())

    def _parse_ring_closure(self) -> None:
        """Parse a ring closure digit."""
        tok = self._tokenizer
        state = self._state
        start = tok.position

        ring_idx = self._read_ring_index()

        if state.prev_atom is None:
            raise ParseError(
                "Ring closure without preceding atom",
                self._smiles,
                start,
            )

        atom = state.prev_atom
        bond = state.pending_bond
        state.pending_bond = None

        if ring_idx not in state.open_rings:
            state.open_rings[ring_idx] = _RingBond(atom, bond, len(state.written[atom]))
            state.written[atom].append(None)
            return

        opening = state.open_rings.pop(ring_idx)
        if opening.bond is not None and bond is not None \
                and opening.bond is not bond and opening.bond is not bond.inverse():
            raise RingError(
                f"Conflicting bonds for ring closure {ring_idx}",
                ring_index=ring_idx,
            )

        if opening.bond is not None:
            edge = Edge(opening.atom, atom, opening.bond)
        elif bond is not None:
            edge = Edge(atom, opening.atom, bond)
        else:
            edge = Edge(opening.atom, atom, self._implicit_bond(opening.atom, atom))

        try:
            self._graph.add_edge(edge)
        except ValueError as err:
            raise RingError(
                f"Invalid ring closure {ring_idx}: {err}",
                ring_index=ring_idx,
            ) from err

        state.written[opening.atom][opening.slot] = atom
        state.written[atom].append(opening.atom)

    def _read_ring_index(self) -> int:
        """Read a ring closure index (0-9, %nn, %(n))."""
        tok = self._tokenizer

        if tok.peek() == "%":
            tok.next()

            if tok.peek() == "(":
                tok.next()
                num = tok.read_number()
                if num is None:
                    raise ParseError(
                        "Empty ring index in %()",
                        self._smiles,
                        tok.position,
                    )
                tok.expect(")")
                return num

            d1 = tok.next()
            d2 = tok.next()
            if not (d1 and d1.isdigit() and d2 and d2.isdigit()):
                raise ParseError(
                    "Expected two digits after %",
                    self._smiles,
                    tok.position,
                )
            return int(d1 + d2)

        return int(tok.next())

    def _parse_organic_atom(self) -> None:
        """Parse an organic subset atom (not in brackets)."""
        tok = self._tokenizer
        start = tok.position

        symbol = tok.next()
        assert symbol is not None

        char2 = tok.peek()
        if char2 and symbol + char2 in TWO_LETTER_ORGANIC:
            tok.next()
            symbol += char2

        aromatic = is_aromatic_symbol(symbol)
        if symbol != "*" and not aromatic and symbol not in ORGANIC_SUBSET:
            raise ParseError(
                f"Element '{symbol}' must be written in brackets",
                self._smiles,
                start,
            )

        element = Element.from_symbol(symbol)
        assert element is not None
        self._add_atom(Atom(element, is_aromatic=aromatic))

    def _parse_bracket_atom(self) -> None:
        """Parse a bracket atom, e.g. [13CH3+:1] or [C@@H]."""
        tok = self._tokenizer

        tok.expect("[")

        isotope = tok.read_number()
        element, aromatic = self._read_bracket_symbol()

        chirality: Configuration | None = None
        if tok.peek() == "@":
            chirality = self._read_chirality()

        hydrogens = 0
        if tok.peek() == "H":
            tok.next()
            count = tok.read_number()
            hydrogens = 1 if count is None else count

        charge = self._read_charge()

        atom_class = 0
        if tok.peek() == ":":
            tok.next()
            atom_class = tok.read_number()
            if atom_class is None:
                raise ParseError("Expected atom class number", self._smiles, tok.position)

        tok.expect("]")

        u = self._add_atom(Atom(
            element,
            hydrogens=hydrogens,
            charge=charge,
            isotope=isotope,
            atom_class=atom_class,
            is_aromatic=aromatic,
            is_bracket=True,
        ))
        if chirality is not None:
            self._state.marks[u] = chirality

    def _read_bracket_symbol(self) -> tuple[Element, bool]:
        """Read the element symbol of a bracket atom."""
        tok = self._tokenizer
        start = tok.position
        char1 = tok.peek()

        if char1 == "*":
            tok.next()
            element = Element.from_atomic_number(0)
            assert element is not None
            return element, False

        if not char1 or not char1.isalpha():
            raise ParseError("Expected element symbol", self._smiles, start)

        char2 = tok.peek(1)
        if char1.islower():
            symbol = char1
            if char2 and char1 + char2 in _BRACKET_AROMATIC:
                symbol = char1 + char2
            if symbol not in _BRACKET_AROMATIC:
                raise ParseError(
                    f"'{symbol}' is not an aromatic element",
                    self._smiles,
                    start,
                )
        else:
            symbol = char1
            if char2 and char2.islower() \
                    and Element.from_symbol(char1 + char2) is not None:
                symbol = char1 + char2

        element = Element.from_symbol(symbol)
        if element is None:
            raise ParseError(f"Unknown element '{symbol}'", self._smiles, start)

        tok.skip(len(symbol))
        return element, symbol.islower()

    def _read_chirality(self) -> Configuration:
        """Read '@', '@@' or an explicit class such as '@TB12'."""
        tok = self._tokenizer
        start = tok.position
        tok.expect("@")

        if tok.peek() == "@":
            tok.next()
            return Configuration.CLOCKWISE

        prefix = (tok.peek() or "") + (tok.peek(1) or "")
        if prefix not in _CHIRAL_CLASSES:
            return Configuration.ANTI_CLOCKWISE

        tok.next()
        tok.next()
        num = tok.read_number()
        try:
            return Configuration.from_token(f"@{prefix}{'' if num is None else num}")
        except ValueError as err:
            raise ParseError(str(err), self._smiles, start) from err

    def _read_charge(self) -> int:
        """Read an optional charge (+, -, ++, --, +2, -3)."""
        tok = self._tokenizer

        char = tok.peek()
        if char not in ("+", "-"):
            return 0

        sign = 1 if char == "+" else -1
        count = len(tok.read_while(lambda c: c == char))

        num = tok.read_number()
        if num is not None:
            return sign * num
        return sign * count

    def _add_atom(self, atom: Atom) -> int:
        """Add an atom and bond it to the previous one."""
        state = self._state
        u = self._graph.add_atom(atom)
        state.written.append([])
        state.first_in_component.append(state.prev_atom is None)

        prev = state.prev_atom
        if prev is not None:
            bond = state.pending_bond
            if bond is None:
                bond = self._implicit_bond(prev, u)
            self._graph.add_edge(Edge(prev, u, bond))
            state.written[prev].append(u)
            state.written[u].append(prev)
        elif state.pending_bond is not None:
            raise ParseError(
                "Bond without preceding atom",
                self._smiles,
                self._tokenizer.position,
            )

        state.pending_bond = None
        state.prev_atom = u
        return u

    def _implicit_bond(self, u: int, v: int) -> Bond:
        """Unwritten bond, aromatic between two aromatic atoms."""
        g = self._graph
        if g.atom(u).is_aromatic and g.atom(v).is_aromatic:
            return Bond.AROMATIC
        return Bond.IMPLICIT

    def _add_topology(self, u: int, c: Configuration) -> None:
        """Turn the chirality mark on ``u`` into a topology."""
        g = self._graph
        explicit = to_explicit(g, u, c)
        vs = g.neighbors(u)

        if explicit.kind is ConfigurationType.TETRAHEDRAL and len(vs) in (3, 4):
            # implicit hydrogen or lone pair written first moves behind the
            # neighbors; a sulfoxide lone pair sits where a hydrogen would
            # (so [S@](C)(=O)CC and C[S@](=O)CC are mirror images)
            if len(vs) == 3 and self._state.first_in_component[u]:
                explicit = (
                    Configuration.TH2 if explicit is Configuration.TH1
                    else Configuration.TH1
                )
            g.add_topology(tetrahedral(u, vs, explicit))
            return

        warnings.warn(
            f"Ignoring chirality '{c}' on atom {u} ({explicit.name} is not supported)",
            stacklevel=3,
        )


def parse(smiles: str) -> ChemicalGraph:
    """Parse a SMILES string into a ChemicalGraph.

    This is a convenience function that creates a SmilesParser and
    calls parse().

    Args:
        smiles: SMILES string to parse.

    Returns:
        Parsed graph.

    Raises:
        ParseError: If SMILES syntax is invalid.
        RingError: If ring closures are invalid.

    Example:
        >>> g = parse("CCO")
        >>> g.order
        3
    """
    return SmilesParser(smiles).parse()
