"""
Cis/trans classification of a double bond and two substituents.

Both functions answer the same question for ``u-v=w-x``: are ``u`` and
``x`` on the same side of the double bond? :func:`configuration_of` reads
the up/down bonds directly, :func:`trigonal_configuration_of` reads the
trigonal topologies left by :class:`~stereopy.stereo.ToTrigonalTopology`.
"""

from __future__ import annotations

from stereopy.configuration import DoubleBond
from stereopy.elements import Bond
from stereopy.exceptions import InvalidStereoError
from stereopy.topology import Trigonal
from stereopy.types import ChemicalGraph, Edge


def _edge(g: ChemicalGraph, u: int, v: int) -> Edge:
    e = g.edge(u, v)
    if e is None:
        raise InvalidStereoError(f"atoms {u} and {v} are not bonded")
    return e


def _double_bond(g: ChemicalGraph, v: int, w: int) -> Edge:
    e = _edge(g, v, w)
    if e.bond is not Bond.DOUBLE:
        raise InvalidStereoError(
            f"atoms {v} and {w} are not connected by a double bond"
        )
    return e


def configuration_of(
    g: ChemicalGraph,
    u: int,
    v: int,
    w: int,
    x: int,
) -> DoubleBond:
    """Configuration of substituents ``u`` and ``x`` across ``v=w``.

    The marks are read in writing direction, ``u`` to ``v`` and ``w`` to
    ``x``. The same mark on both sides (``F/C=C/F``) puts the substituents
    opposite each other, different marks (``F/C=C\\F``) put them together.

    Args:
        g: The graph.
        u: Substituent of ``v``.
        v: First double bond atom.
        w: Second double bond atom.
        x: Substituent of ``w``.

    Returns:
        ``OPPOSITE`` or ``TOGETHER``; ``UNSPECIFIED`` when either side has
        no up/down bond.

    Raises:
        InvalidStereoError: If ``v=w`` is not a double bond or a
            substituent is not bonded to its double bond atom.
    """
    _double_bond(g, v, w)

    first = _edge(g, u, v).bond_from(u)
    second = _edge(g, w, x).bond_from(w)

    if not (first.is_directional and second.is_directional):
        return DoubleBond.UNSPECIFIED
    if first is second:
        return DoubleBond.OPPOSITE
    return DoubleBond.TOGETHER


def trigonal_configuration_of(
    g: ChemicalGraph,
    u: int,
    v: int,
    w: int,
    x: int,
) -> DoubleBond:
    """Configuration of ``u`` and ``x`` across ``v=w`` from topologies.

    Each endpoint topology is reordered to list its partner first and its
    substituent second. Looking at the same face of the double bond,
    substituents on opposite sides turn the same way and substituents on
    the same side turn opposite ways.

    The topologies agree with :func:`configuration_of` when every mark is
    written before the lower endpoint (``F/C=C/F``, ``F/C=C(Cl)/F``). A
    mark on a branch that follows the atom it marks (``C(/F)=C/F``) is
    read on the other side by the builder, so there the two differ.

    Returns:
        ``OPPOSITE`` or ``TOGETHER``; ``UNSPECIFIED`` when either endpoint
        has no trigonal topology.

    Raises:
        InvalidStereoError: If ``v=w`` is not a double bond or a
            substituent is not bonded to its double bond atom.
    """
    _double_bond(g, v, w)
    _edge(g, u, v)
    _edge(g, w, x)

    first = g.topology_of(v)
    second = g.topology_of(w)
    if not (isinstance(first, Trigonal) and isinstance(second, Trigonal)):
        return DoubleBond.UNSPECIFIED

    first = first.order_by(_rank(g.order, w, u))
    second = second.order_by(_rank(g.order, v, x))

    if first.configuration is second.configuration:
        return DoubleBond.OPPOSITE
    return DoubleBond.TOGETHER


def _rank(n: int, partner: int, substituent: int) -> list[int]:
    rank = [2] * n
    rank[partner] = 0
    rank[substituent] = 1
    return rank
