"""Resolution of implicit chirality marks (``@``, ``@@``) by local valence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stereopy.configuration import Configuration
from stereopy.elements import Bond

if TYPE_CHECKING:
    from stereopy.types import ChemicalGraph


_OXYGEN = 8
_SULFUR = 16


def _is_sulfoxide(g: ChemicalGraph, u: int) -> bool:
    """Sulfur with a double bond to oxygen, the lone pair is the fourth ligand."""
    if g.atom(u).element.atomic_number != _SULFUR:
        return False
    for e in g.edges(u):
        if e.bond is Bond.DOUBLE \
                and g.atom(e.other(u)).element.atomic_number == _OXYGEN:
            return True
    return False


def to_explicit(g: ChemicalGraph, u: int, c: Configuration) -> Configuration:
    """Convert an implicit configuration to an explicit one.

    The geometry follows from the valence of ``u`` (degree plus implicit
    hydrogens): 4 is tetrahedral, 5 trigonal bipyramidal and 6 octahedral.
    A degree two atom between two double bonds is an allene center. With
    valence 3 only sulfoxides are resolved (as tetrahedral); square planar
    must always be written explicitly.

    Args:
        g: The graph.
        u: The atom carrying the mark.
        c: The configuration, returned as is if already explicit.

    Returns:
        The explicit configuration, or ``Configuration.UNKNOWN``.

    Example:
        >>> from stereopy import parse
        >>> g = parse("FC(Cl)Br")
        >>> to_explicit(g, 1, Configuration.ANTI_CLOCKWISE).name
        'TH1'
    """
    if not c.is_implicit:
        return c

    anticlockwise = c is Configuration.ANTI_CLOCKWISE
    deg = g.degree(u)
    valence = deg + g.implicit_hydrogens(u)

    if valence == 4:
        return Configuration.TH1 if anticlockwise else Configuration.TH2

    elif valence == 3:
        if _is_sulfoxide(g, u):
            return Configuration.TH1 if anticlockwise else Configuration.TH2
        # TODO: double bond atoms marked with @/@@ (trigonal from the atom)

    # odd number of cumulated double bonds (e.g. allene)
    elif deg == 2:
        for e in g.edges(u):
            if e.bond is not Bond.DOUBLE:
                return Configuration.UNKNOWN
        return Configuration.AL1 if anticlockwise else Configuration.AL2

    elif valence == 5:
        return Configuration.TB1 if anticlockwise else Configuration.TB2

    elif valence == 6:
        return Configuration.OH1 if anticlockwise else Configuration.OH2

    return Configuration.UNKNOWN
