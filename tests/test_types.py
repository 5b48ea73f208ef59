"""Tests for atoms, edges and the chemical graph container."""

import pytest

from stereopy import (
    Atom,
    Bond,
    ChemicalGraph,
    Configuration,
    Edge,
    Element,
    parse,
    tetrahedral,
    unknown,
)


CARBON = Element.from_symbol("C")


def chain(n: int) -> ChemicalGraph:
    """Linear carbon chain built without the parser."""
    g = ChemicalGraph()
    for _ in range(n):
        g.add_atom(Atom(CARBON))
    for u in range(n - 1):
        g.add_edge(Edge(u, u + 1))
    return g


class TestEdge:
    """Test Edge."""

    def test_other(self):
        e = Edge(2, 5, Bond.DOUBLE)
        assert e.either() == 2
        assert e.other(2) == 5
        assert e.other(5) == 2
        with pytest.raises(ValueError):
            e.other(3)

    def test_bond_from(self):
        e = Edge(2, 5, Bond.UP)
        assert e.bond_from(2) is Bond.UP
        assert e.bond_from(5) is Bond.DOWN
        with pytest.raises(ValueError):
            e.bond_from(0)

    def test_key(self):
        assert Edge(5, 2).key == (2, 5)
        assert Edge(2, 5).key == (2, 5)

    def test_contains_and_str(self):
        e = Edge(0, 1, Bond.DOUBLE)
        assert 0 in e
        assert 2 not in e
        assert str(e) == "0=1"


class TestAtom:
    """Test Atom."""

    def test_defaults(self):
        a = Atom(CARBON)
        assert a.is_subset
        assert a.hydrogens == 0
        assert a.isotope is None

    def test_aromatic_symbol(self):
        assert Atom(CARBON, is_aromatic=True).symbol == "c"

    def test_to_bracket(self):
        a = Atom(CARBON, is_aromatic=True).to_bracket(1)
        assert a.is_bracket
        assert a.hydrogens == 1
        assert a.is_aromatic


class TestChemicalGraph:
    """Test the graph container."""

    def test_counts(self):
        g = chain(4)
        assert len(g) == g.order == 4
        assert g.size == 3
        assert g.degree(1) == 2
        assert g.neighbors(1) == [0, 2]

    def test_edge_lookup(self):
        g = chain(3)
        assert g.edge(0, 1) is g.edge(1, 0)
        assert g.edge(0, 2) is None

    def test_iter_edges_once(self):
        g = parse("C1CCC1")
        assert sorted(e.key for e in g.iter_edges()) == [(0, 1), (0, 3), (1, 2), (2, 3)]

    def test_add_edge_errors(self):
        g = chain(2)
        with pytest.raises(IndexError):
            g.add_edge(Edge(0, 5))
        with pytest.raises(ValueError):
            g.add_edge(Edge(1, 1))
        with pytest.raises(ValueError):
            g.add_edge(Edge(1, 0))

    def test_arrange(self):
        g = chain(3)
        g.add_atom(Atom(CARBON))
        g.add_edge(Edge(1, 3))
        g.arrange(1, [Edge(3, 1), Edge(1, 2), Edge(0, 1)])
        assert g.neighbors(1) == [3, 2, 0]
        # the stored edges are kept
        assert g.edges(1)[0] is g.edge(3, 1)

    @pytest.mark.parametrize("edges", [
        [Edge(0, 1)],
        [Edge(0, 1), Edge(1, 3)],
        [Edge(0, 1), Edge(0, 1)],
    ])
    def test_arrange_not_permutation(self, edges):
        g = chain(3)
        with pytest.raises(ValueError):
            g.arrange(1, edges)

    def test_topologies(self):
        g = chain(5)
        assert g.topology_of(1) is unknown()
        assert not g.add_topology(unknown())
        t = tetrahedral(2, [1, 3, 4], Configuration.TH1)
        assert g.add_topology(t)
        assert g.topology_of(2) is t

    @pytest.mark.parametrize("smiles,atom,electrons,hydrogens", [
        ("C", 0, 0, 4),
        ("CC", 0, 2, 3),
        ("C=O", 0, 4, 2),
        ("C#N", 0, 6, 1),
        ("c1ccccc1", 0, 6, 1),
        ("CS(=O)(=O)C", 1, 12, 0),
    ])
    def test_hydrogens(self, smiles, atom, electrons, hydrogens):
        g = parse(smiles)
        assert g.bond_electrons(atom) == electrons
        assert g.implicit_hydrogens(atom) == hydrogens

    def test_copy(self):
        g = parse("F[C@H](Cl)Br")
        h = g.copy()
        h.add_atom(Atom(CARBON))
        h.add_edge(Edge(3, 4))
        assert g.order == 4
        assert g.degree(3) == 1
        assert h.topology_of(1) is g.topology_of(1)
