"""
Core molecular graph types.

This module defines the data structures the stereo code reads and
rewrites: immutable Atom and Edge values and the ChemicalGraph container
holding per-vertex ordered edge lists and topologies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, Iterator

from stereopy.elements import Bond, Element
from stereopy.topology import Topology, unknown

if TYPE_CHECKING:
    from typing import Self


@dataclass(frozen=True, slots=True)
class Atom:
    """An atom of a chemical graph.

    Attributes:
        element: The element.
        hydrogens: Hydrogen count written in a bracket atom. Subset atoms
            derive theirs from the bonds, see
            :meth:`ChemicalGraph.implicit_hydrogens`.
        charge: Formal charge.
        isotope: Mass number, or None for natural abundance.
        atom_class: Atom class number (for reaction mapping), 0 if unset.
        is_aromatic: Whether the atom was written in lowercase.
        is_bracket: Whether the atom must be written in bracket form.
    """

    element: Element
    hydrogens: int = 0
    charge: int = 0
    isotope: int | None = None
    atom_class: int = 0
    is_aromatic: bool = False
    is_bracket: bool = False

    @property
    def symbol(self) -> str:
        """Element symbol, lowercase for aromatic atoms."""
        symbol = self.element.symbol
        return symbol.lower() if self.is_aromatic else symbol

    @property
    def is_subset(self) -> bool:
        """Whether the atom may be written in the organic subset."""
        return not self.is_bracket

    def to_bracket(self, hydrogens: int) -> "Atom":
        """Bracket form of this atom with an explicit hydrogen count.

        Isotope, charge and atom class are reset; aromaticity is kept.
        """
        return Atom(
            self.element,
            hydrogens=hydrogens,
            is_aromatic=self.is_aromatic,
            is_bracket=True,
        )


@dataclass(frozen=True, slots=True)
class Edge:
    """A bond between two vertices.

    The bond is stored as read from ``u`` towards ``v``. Directional bonds
    flip when read from the other end, see :meth:`bond_from`.

    Attributes:
        u: First endpoint.
        v: Second endpoint.
        bond: Bond kind read from ``u``.
    """

    u: int
    v: int
    bond: Bond = Bond.IMPLICIT

    def either(self) -> int:
        """One endpoint of the edge (the one the bond is read from)."""
        return self.u

    def other(self, x: int) -> int:
        """Get the endpoint opposite ``x``.

        Raises:
            ValueError: If ``x`` is not an endpoint of this edge.
        """
        if x == self.u:
            return self.v
        if x == self.v:
            return self.u
        raise ValueError(f"{x} is not an endpoint of {self}")

    def bond_from(self, x: int) -> Bond:
        """The bond read from endpoint ``x``.

        Raises:
            ValueError: If ``x`` is not an endpoint of this edge.
        """
        if x == self.u:
            return self.bond
        if x == self.v:
            return self.bond.inverse()
        raise ValueError(f"{x} is not an endpoint of {self}")

    @property
    def key(self) -> tuple[int, int]:
        """Endpoint pair identifying the edge regardless of direction."""
        return (self.u, self.v) if self.u < self.v else (self.v, self.u)

    def __contains__(self, x: int) -> bool:
        return x == self.u or x == self.v

    def __str__(self) -> str:
        return f"{self.u}{self.bond.token}{self.v}"


class ChemicalGraph:
    """A molecule as a graph of atoms with ordered adjacency.

    Each vertex owns an Atom, the sequence of its incident edges and at
    most one defined Topology. The order of the incident edges is the
    order the neighbors were written in; stereo parities are computed
    against it, so every copy preserves it.

    Example:
        >>> g = ChemicalGraph()
        >>> c = g.add_atom(Atom(Element.from_symbol("C")))
        >>> o = g.add_atom(Atom(Element.from_symbol("O")))
        >>> g.add_edge(Edge(c, o, Bond.DOUBLE))
        >>> g.degree(c)
        1
    """

    __slots__ = ("_atoms", "_edges", "_topologies")

    def __init__(self) -> None:
        self._atoms: list[Atom] = []
        self._edges: list[list[Edge]] = []
        self._topologies: dict[int, Topology] = {}

    def __len__(self) -> int:
        """Return number of vertices."""
        return len(self._atoms)

    def __iter__(self) -> Iterator[Atom]:
        """Iterate over atoms in vertex order."""
        return iter(self._atoms)

    @property
    def order(self) -> int:
        """Number of vertices."""
        return len(self._atoms)

    @property
    def size(self) -> int:
        """Number of edges."""
        return sum(len(es) for es in self._edges) // 2

    def atom(self, u: int) -> Atom:
        """The atom at vertex ``u``."""
        return self._atoms[u]

    def edges(self, u: int) -> tuple[Edge, ...]:
        """Incident edges of ``u`` in their written order."""
        return tuple(self._edges[u])

    def degree(self, u: int) -> int:
        """Number of edges incident to ``u``."""
        return len(self._edges[u])

    def neighbors(self, u: int) -> list[int]:
        """Adjacent vertices of ``u`` in edge order."""
        return [e.other(u) for e in self._edges[u]]

    def edge(self, u: int, v: int) -> Edge | None:
        """Find the edge between two vertices.

        Returns:
            The edge if ``u`` and ``v`` are adjacent, None otherwise.
        """
        for e in self._edges[u]:
            if e.other(u) == v:
                return e
        return None

    def iter_edges(self) -> Iterator[Edge]:
        """Every edge once, visited from its lower endpoint."""
        for u, es in enumerate(self._edges):
            for e in es:
                if e.other(u) > u:
                    yield e

    def add_atom(self, atom: Atom) -> int:
        """Add a vertex.

        Returns:
            Index of the new vertex.
        """
        self._atoms.append(atom)
        self._edges.append([])
        return len(self._atoms) - 1

    def add_edge(self, edge: Edge) -> None:
        """Append an edge to the adjacency of both endpoints.

        Raises:
            IndexError: If an endpoint is not a vertex of the graph.
            ValueError: If the edge is a loop or the vertices are already
                adjacent.
        """
        u, v = edge.u, edge.v
        if not (0 <= u < len(self._atoms) and 0 <= v < len(self._atoms)):
            raise IndexError(f"Vertex index out of bounds: {u}, {v}")
        if u == v:
            raise ValueError(f"Edge {edge} is a loop")
        if self.edge(u, v) is not None:
            raise ValueError(f"Vertices {u} and {v} are already adjacent")
        self._edges[u].append(edge)
        self._edges[v].append(edge)

    def arrange(self, u: int, edges: Iterable[Edge]) -> None:
        """Set the order of the incident edges of ``u``.

        Args:
            u: Vertex to rearrange.
            edges: A permutation of ``u``'s incident edges. Edges are
                matched by endpoints, so the edges of another graph over
                the same vertices can give the order.

        Raises:
            ValueError: If ``edges`` is not a permutation of the incident
                edges of ``u``.
        """
        current = {e.key: e for e in self._edges[u]}
        keys = [e.key for e in edges]
        if len(keys) != len(current) or set(keys) != set(current):
            raise ValueError(f"Not a permutation of the edges of {u}")
        self._edges[u] = [current[k] for k in keys]

    def add_topology(self, topology: Topology) -> bool:
        """Attach a topology to its focus atom.

        The unknown topology is ignored.

        Returns:
            Whether the topology was attached.
        """
        if not topology.is_defined:
            return False
        self._topologies[topology.atom] = topology
        return True

    def topology_of(self, u: int) -> Topology:
        """The topology of ``u``, the unknown topology if none was set."""
        return self._topologies.get(u, unknown())

    def bond_electrons(self, u: int) -> int:
        """Sum of the electrons contributed by the bonds of ``u``."""
        return sum(e.bond.electrons for e in self._edges[u])

    def implicit_hydrogens(self, u: int) -> int:
        """Number of hydrogens on ``u`` that are not graph vertices.

        Bracket atoms state their count; subset atoms fill the lowest
        allowed valence of their element.
        """
        atom = self._atoms[u]
        if atom.is_bracket:
            return atom.hydrogens
        return atom.element.implicit_hydrogens(self.bond_electrons(u) // 2)

    def copy(self) -> "Self":
        """Create a copy of the graph.

        Atoms, edges and topologies are immutable and shared; the
        adjacency lists are new.
        """
        g = ChemicalGraph()
        g._atoms = list(self._atoms)
        g._edges = [list(es) for es in self._edges]
        g._topologies = dict(self._topologies)
        return g
