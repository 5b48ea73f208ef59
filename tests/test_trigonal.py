"""Tests for the conversion of up/down bonds to trigonal topologies."""

import pytest

from stereopy import Bond, Configuration, DoubleBond, Trigonal, parse, trigonal
from stereopy.stereo import (
    ToTrigonalTopology,
    configuration_of,
    to_trigonal_topology,
    trigonal_configuration_of,
)


class TestDifluoroethene:
    """The four ways of writing 1,2-difluoroethene."""

    @pytest.mark.parametrize("smiles,first,second", [
        ("F/C=C/F", Configuration.DB1, Configuration.DB1),
        ("F/C=C\\F", Configuration.DB1, Configuration.DB2),
        ("F\\C=C/F", Configuration.DB2, Configuration.DB1),
        ("F\\C=C\\F", Configuration.DB2, Configuration.DB2),
    ])
    def test_configurations(self, smiles, first, second):
        h = to_trigonal_topology(parse(smiles))
        assert h.topology_of(1).configuration is first
        assert h.topology_of(2).configuration is second

    def test_neighbors(self):
        """Partner first, then the substituent, the atom itself last."""
        h = to_trigonal_topology(parse("F/C=C/F"))
        left = h.topology_of(1)
        right = h.topology_of(2)
        assert isinstance(left, Trigonal)
        assert left.neighbors == (2, 0, 1)
        assert right.neighbors == (1, 3, 2)

    def test_directional_bonds_replaced(self):
        h = to_trigonal_topology(parse("F/C=C/F"))
        assert h.edge(0, 1).bond is Bond.IMPLICIT
        assert h.edge(2, 3).bond is Bond.IMPLICIT
        assert h.edge(1, 2).bond is Bond.DOUBLE
        assert not any(e.bond.is_directional for e in h.iter_edges())

    def test_atoms_promoted_to_bracket(self):
        """Double bond atoms keep their hydrogen as an explicit count."""
        h = to_trigonal_topology(parse("F/C=C/F"))
        for u in (1, 2):
            assert h.atom(u).is_bracket
            assert h.atom(u).hydrogens == 1
            assert h.implicit_hydrogens(u) == 1
        assert h.atom(0).is_subset
        assert h.atom(3).is_subset

    def test_input_untouched(self):
        g = parse("F/C=C/F")
        to_trigonal_topology(g)
        assert g.edge(0, 1).bond is Bond.UP
        assert g.atom(1).is_subset
        assert not g.topology_of(1).is_defined

    def test_class_and_function_agree(self):
        g = parse("F/C=C\\F")
        a = ToTrigonalTopology().transform(g)
        b = to_trigonal_topology(g)
        for u in range(g.order):
            assert a.topology_of(u) == b.topology_of(u)


class TestSecondLigand:
    """Marks on the second ligand examined at an endpoint."""

    @pytest.mark.parametrize("smiles,first,second,expected", [
        ("F/C=C(Cl)/F", Configuration.DB1, Configuration.DB2, DoubleBond.OPPOSITE),
        ("F\\C=C(Cl)\\F", Configuration.DB2, Configuration.DB1, DoubleBond.OPPOSITE),
        ("F/C=C(Cl)\\F", Configuration.DB1, Configuration.DB1, DoubleBond.TOGETHER),
        ("F\\C=C(Cl)/F", Configuration.DB2, Configuration.DB2, DoubleBond.TOGETHER),
    ])
    def test_configurations(self, smiles, first, second, expected):
        g = parse(smiles)
        h = to_trigonal_topology(g)
        assert h.topology_of(1).configuration is first
        assert h.topology_of(2).configuration is second
        assert h.topology_of(2).neighbors == (1, 3, 4)
        assert configuration_of(g, 0, 1, 2, 4) is expected
        assert trigonal_configuration_of(h, 0, 1, 2, 4) is expected

    @pytest.mark.parametrize("smiles", [
        "F/C=C(C)/F",
        "F\\C=C(C)\\F",
        "F/C=C(C)\\F",
        "F\\C=C(C)/F",
    ])
    def test_rdkit_agrees(self, smiles, double_bond_label):
        """Fluorine outranks methyl, so the label follows the fluorines."""
        expected = {"E": DoubleBond.OPPOSITE, "Z": DoubleBond.TOGETHER}
        h = to_trigonal_topology(parse(smiles))
        assert trigonal_configuration_of(h, 0, 1, 2, 4) is expected[double_bond_label(smiles)]


class TestPartialStereo:
    """Test double bonds with missing or unsupported marks."""

    def test_one_side_marked(self):
        """Only the marked end gets a topology."""
        h = to_trigonal_topology(parse("F/C=CF"))
        assert h.topology_of(1).configuration is Configuration.DB1
        assert not h.topology_of(2).is_defined
        assert h.atom(2).is_subset
        assert trigonal_configuration_of(h, 0, 1, 2, 3) is DoubleBond.UNSPECIFIED

    def test_no_marks(self):
        g = parse("FC=CF")
        h = to_trigonal_topology(g)
        assert not any(h.topology_of(u).is_defined for u in range(h.order))
        assert [a for a in h] == [a for a in g]

    def test_no_double_bond(self):
        """Directional bonds away from a double bond are only flattened."""
        h = to_trigonal_topology(parse("F/CC/F"))
        assert not any(h.topology_of(u).is_defined for u in range(h.order))
        assert h.edge(0, 1).bond is Bond.IMPLICIT

    def test_crowded_endpoint(self):
        """A sulfone sulfur cannot be a double bond center."""
        h = to_trigonal_topology(parse("CS(=O)(=O)/C=C/F"))
        assert not h.topology_of(1).is_defined
        assert h.topology_of(4).configuration is Configuration.DB1
        assert h.topology_of(5).configuration is Configuration.DB1


class TestExistingTopologies:
    """Test interaction with topologies already on the graph."""

    def test_tetrahedral_kept(self):
        g = parse("F[C@H](Cl)/C=C/F")
        h = to_trigonal_topology(g)
        assert h.topology_of(1) == g.topology_of(1)
        assert h.topology_of(3).configuration is Configuration.DB1
        assert h.topology_of(4).configuration is Configuration.DB1

    def test_no_promotion_with_prior_topology(self):
        """An atom that already had a topology is not rewritten."""
        g = parse("F/C=C/F")
        g.add_topology(trigonal(1, [2, 0, 1], Configuration.DB2))
        h = to_trigonal_topology(g)
        assert h.atom(1).is_subset
        assert h.topology_of(1).configuration is Configuration.DB1
        assert h.atom(2).is_bracket

    def test_edge_order_preserved(self):
        g = parse("C1(F)CC1.F/C=C/F")
        h = to_trigonal_topology(g)
        for u in range(g.order):
            assert [e.key for e in h.edges(u)] == [e.key for e in g.edges(u)]


class TestAgreement:
    """Builder, bond based classifier and RDKit agree."""

    def test_classifiers_agree(self, stereo_bond_smiles):
        for smiles in stereo_bond_smiles:
            g = parse(smiles)
            h = to_trigonal_topology(g)
            assert configuration_of(g, 0, 1, 2, 3) is trigonal_configuration_of(h, 0, 1, 2, 3)

    def test_rdkit_agrees(self, stereo_bond_smiles, double_bond_label):
        for smiles in stereo_bond_smiles:
            h = to_trigonal_topology(parse(smiles))
            expected = {"E": DoubleBond.OPPOSITE, "Z": DoubleBond.TOGETHER}
            label = double_bond_label(smiles)
            assert trigonal_configuration_of(h, 0, 1, 2, 3) is expected[label]
