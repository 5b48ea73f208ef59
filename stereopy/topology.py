"""
Atom centric stereo topologies.

A topology describes the arrangement of neighbors around one focus atom:
the focus vertex, an ordered tuple of neighbor vertices and a sign. The
sign is relative to the stored order, so reordering the neighbors has to
adjust it by the parity of the permutation. Topologies are immutable;
:meth:`Topology.order_by` and :meth:`Topology.transform` return new values.

    >>> t = tetrahedral(1, [0, 2, 3, 4], Configuration.CLOCKWISE)
    >>> t.order_by([0, 1, 2, 4, 3]).configuration.name
    'TH1'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from stereopy.configuration import Configuration, ConfigurationType
from stereopy.exceptions import InvalidStereoError, UndefinedTopologyError


def parity(vs: Sequence[int], rank: Sequence[int]) -> int:
    """Sign of the permutation placing ``vs`` in ``rank`` order.

    Counts the pairs that are out of order; an even count is +1, odd is -1.

    Args:
        vs: Vertices.
        rank: Rank of every vertex, indexed by vertex.

    Returns:
        1 for an even permutation, -1 for an odd one.
    """
    count = 0
    for i in range(len(vs)):
        for j in range(i + 1, len(vs)):
            if rank[vs[i]] > rank[vs[j]]:
                count += 1
    return -1 if count & 1 else 1


def sort(vs: Sequence[int], rank: Sequence[int]) -> tuple[int, ...]:
    """Stable copy of ``vs`` ordered by ``rank``.

    Args:
        vs: Vertices to sort, left untouched.
        rank: Rank of every vertex, indexed by vertex.

    Returns:
        The vertices in ascending rank order.
    """
    ws = list(vs)
    # insertion sort, the lists hold 3 or 4 vertices
    for i in range(1, len(ws)):
        v = ws[i]
        j = i - 1
        while j >= 0 and rank[v] < rank[ws[j]]:
            ws[j + 1] = ws[j]
            j -= 1
        ws[j + 1] = v
    return tuple(ws)


def _sign_of(configuration: Configuration) -> int:
    return 1 if configuration.shorthand is Configuration.CLOCKWISE else -1


class Topology(ABC):
    """Relative arrangement of the neighbors around a vertex."""

    __slots__ = ()

    @property
    @abstractmethod
    def atom(self) -> int:
        """The vertex this topology describes.

        Raises:
            UndefinedTopologyError: For the unknown topology.
        """

    @property
    @abstractmethod
    def configuration(self) -> Configuration:
        """The configuration of this topology."""

    @property
    def is_defined(self) -> bool:
        """False only for the unknown topology."""
        return True

    @abstractmethod
    def order_by(self, rank: Sequence[int]) -> "Topology":
        """Arrange the topology relative to a ranking of the vertices.

        Args:
            rank: Rank of every vertex, indexed by vertex.

        Returns:
            A new topology with the neighbors sorted by rank.
        """

    @abstractmethod
    def transform(self, mapping: Sequence[int]) -> "Topology":
        """Relabel the vertices of the topology.

        Args:
            mapping: New index of every old vertex index.

        Returns:
            A new topology with mapped vertices.
        """


class UnknownTopology(Topology):
    """No stereo information. Use :func:`unknown` for the instance."""

    __slots__ = ()

    _instance: "UnknownTopology | None" = None

    def __new__(cls) -> "UnknownTopology":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def atom(self) -> int:
        raise UndefinedTopologyError("unknown topology has no atom")

    @property
    def configuration(self) -> Configuration:
        return Configuration.UNKNOWN

    @property
    def is_defined(self) -> bool:
        return False

    def order_by(self, rank: Sequence[int]) -> "Topology":
        return self

    def transform(self, mapping: Sequence[int]) -> "Topology":
        return self

    def __repr__(self) -> str:
        return "UnknownTopology()"


@dataclass(frozen=True, slots=True)
class Tetrahedral(Topology):
    """Four ligand center.

    With three neighbors the fourth ligand (an implicit hydrogen or a lone
    pair) is implied and sits at the position of the focus atom when the
    neighbors are ranked.

    Attributes:
        focus: The central vertex.
        neighbors: Surrounding vertices, the first is the one looked from.
        sign: -1 anticlockwise, +1 clockwise.
    """

    focus: int
    neighbors: tuple[int, ...]
    sign: int

    @property
    def atom(self) -> int:
        return self.focus

    @property
    def configuration(self) -> Configuration:
        return Configuration.TH1 if self.sign < 0 else Configuration.TH2

    def order_by(self, rank: Sequence[int]) -> "Tetrahedral":
        sign = self.sign * parity(self.neighbors, rank)

        # implicit neighbor moves to where the focus atom ranks
        if len(self.neighbors) == 3:
            count = sum(1 for v in self.neighbors if rank[v] > rank[self.focus])
            if count & 1:
                sign = -sign

        return Tetrahedral(self.focus, sort(self.neighbors, rank), sign)

    def transform(self, mapping: Sequence[int]) -> "Tetrahedral":
        return Tetrahedral(
            mapping[self.focus],
            tuple(mapping[v] for v in self.neighbors),
            self.sign,
        )


@dataclass(frozen=True, slots=True)
class Trigonal(Topology):
    """Double bond endpoint.

    The first neighbor is the double bond partner. A degree two endpoint
    lists the focus atom itself in the third slot.

    Attributes:
        focus: The double bond atom.
        neighbors: Partner followed by the two other ligands.
        sign: -1 for ``DB1``, +1 for ``DB2``.
    """

    focus: int
    neighbors: tuple[int, ...]
    sign: int

    @property
    def atom(self) -> int:
        return self.focus

    @property
    def configuration(self) -> Configuration:
        return Configuration.DB1 if self.sign < 0 else Configuration.DB2

    def order_by(self, rank: Sequence[int]) -> "Trigonal":
        return Trigonal(
            self.focus,
            sort(self.neighbors, rank),
            self.sign * parity(self.neighbors, rank),
        )

    def transform(self, mapping: Sequence[int]) -> "Trigonal":
        return Trigonal(
            mapping[self.focus],
            tuple(mapping[v] for v in self.neighbors),
            self.sign,
        )


_UNKNOWN = UnknownTopology()


def unknown() -> Topology:
    """The unknown topology, there is no vertex data stored."""
    return _UNKNOWN


def tetrahedral(
    u: int,
    vs: Sequence[int],
    configuration: Configuration,
) -> Tetrahedral:
    """Define a tetrahedral topology.

    Args:
        u: Central atom.
        vs: Three or four vertices around ``u``, the first is the vertex
            we are looking from.
        configuration: ``@``, ``@@``, ``@TH1`` or ``@TH2``.

    Returns:
        Topology for the configuration.

    Raises:
        InvalidStereoError: For a non tetrahedral configuration or a
            neighbor list of the wrong size.
    """
    if configuration.kind not in (
        ConfigurationType.IMPLICIT,
        ConfigurationType.TETRAHEDRAL,
    ):
        raise InvalidStereoError(
            f"{configuration.name} is not a tetrahedral configuration"
        )
    if len(vs) not in (3, 4):
        raise InvalidStereoError(
            f"tetrahedral center {u} needs 3 or 4 neighbors, got {len(vs)}"
        )
    return Tetrahedral(u, tuple(vs), _sign_of(configuration))


def trigonal(
    u: int,
    vs: Sequence[int],
    configuration: Configuration,
) -> Trigonal:
    """Define a trigonal (double bond endpoint) topology.

    Args:
        u: Double bond atom.
        vs: The partner atom followed by two ligands, ``u`` itself standing
            in for a missing ligand.
        configuration: ``@``, ``@@``, ``DB1`` or ``DB2``.

    Raises:
        InvalidStereoError: For a configuration outside the double bond
            family or a neighbor list that is not three long.
    """
    if configuration.kind not in (
        ConfigurationType.IMPLICIT,
        ConfigurationType.DOUBLE_BOND,
    ):
        raise InvalidStereoError(
            f"{configuration.name} is not a double bond configuration"
        )
    if len(vs) != 3:
        raise InvalidStereoError(
            f"trigonal center {u} needs 3 neighbors, got {len(vs)}"
        )
    return Trigonal(u, tuple(vs), _sign_of(configuration))
