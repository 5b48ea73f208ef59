"""Test configuration and fixtures for stereopy tests."""

from __future__ import annotations

import pytest


def rdkit_double_bond_label(smiles: str) -> str | None:
    """Get RDKit's CIP label for the double bond of a SMILES.

    RDKit is only used as a reference; the test is skipped when it is
    not installed.

    Args:
        smiles: SMILES with exactly one double bond.

    Returns:
        "E", "Z" or None if RDKit assigns no stereo.
    """
    Chem = pytest.importorskip("rdkit.Chem")
    rdCIPLabeler = pytest.importorskip("rdkit.Chem.rdCIPLabeler")

    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit could not parse: {smiles}")
    rdCIPLabeler.AssignCIPLabels(mol)

    for bond in mol.GetBonds():
        if bond.GetBondType() == Chem.BondType.DOUBLE and bond.HasProp("_CIPCode"):
            return bond.GetProp("_CIPCode")
    return None


@pytest.fixture
def simple_smiles() -> list[str]:
    """Basic valid SMILES strings for smoke testing."""
    return [
        "C",
        "CC",
        "CCO",
        "C=C",
        "C#N",
        "c1ccccc1",
        "C1CCCCC1",
        "[NH4+].[Cl-]",
    ]


@pytest.fixture
def stereo_bond_smiles() -> list[str]:
    """SMILES with E/Z stereochemistry, substituents at atoms 0 and 3."""
    return [
        "F/C=C/F",
        r"F/C=C\F",
        r"F\C=C/F",
        r"F\C=C\F",
        "C/C=C/C",
        r"C/C=C\C",
        "Cl/C=C/Cl",
        r"Cl/C=C\Cl",
    ]


@pytest.fixture
def chiral_smiles() -> list[str]:
    """SMILES with tetrahedral chirality."""
    return [
        "C[C@H](O)F",
        "C[C@@H](O)F",
        "F[C@H](Cl)Br",
        "F[C@@H](Cl)Br",
        "[C@H](Br)(Cl)F",
        "[C@@H](Br)(Cl)F",
        "C[C@H]1CCCCC1",
        "C[S@](=O)CC",
    ]


@pytest.fixture
def double_bond_label():
    """RDKit CIP label lookup, see :func:`rdkit_double_bond_label`."""
    return rdkit_double_bond_label
