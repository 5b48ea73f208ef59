"""
Stereo configuration catalog.

Every stereo descriptor belongs to a geometry family (``ConfigurationType``)
and has a base handedness, its ``shorthand``: the implicit ``@`` or ``@@``
mark it abbreviates. The handedness is the root of the sign convention used
by topologies.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Final


class ConfigurationType(Enum):
    """Geometry family of a configuration."""

    NONE = auto()
    IMPLICIT = auto()
    TETRAHEDRAL = auto()
    ALLENE = auto()
    SQUARE_PLANAR = auto()
    TRIGONAL_BIPYRAMIDAL = auto()
    OCTAHEDRAL = auto()
    DOUBLE_BOND = auto()


_ANTI: Final = "@"
_CLOCK: Final = "@@"


class Configuration(Enum):
    """Stereo descriptor codes.

    Values are ``(kind, token, handedness)``; ``token`` is the bracket atom
    form (``None`` when there is none) and ``handedness`` the implicit mark
    the code abbreviates.
    """

    UNKNOWN = (ConfigurationType.NONE, None, None)

    ANTI_CLOCKWISE = (ConfigurationType.IMPLICIT, "@", _ANTI)
    CLOCKWISE = (ConfigurationType.IMPLICIT, "@@", _CLOCK)

    TH1 = (ConfigurationType.TETRAHEDRAL, "@TH1", _ANTI)
    TH2 = (ConfigurationType.TETRAHEDRAL, "@TH2", _CLOCK)

    AL1 = (ConfigurationType.ALLENE, "@AL1", _ANTI)
    AL2 = (ConfigurationType.ALLENE, "@AL2", _CLOCK)

    SP1 = (ConfigurationType.SQUARE_PLANAR, "@SP1", None)
    SP2 = (ConfigurationType.SQUARE_PLANAR, "@SP2", None)
    SP3 = (ConfigurationType.SQUARE_PLANAR, "@SP3", None)

    TB1 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB1", _ANTI)
    TB2 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB2", _CLOCK)
    TB3 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB3", None)
    TB4 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB4", None)
    TB5 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB5", None)
    TB6 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB6", None)
    TB7 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB7", None)
    TB8 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB8", None)
    TB9 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB9", None)
    TB10 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB10", None)
    TB11 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB11", None)
    TB12 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB12", None)
    TB13 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB13", None)
    TB14 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB14", None)
    TB15 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB15", None)
    TB16 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB16", None)
    TB17 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB17", None)
    TB18 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB18", None)
    TB19 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB19", None)
    TB20 = (ConfigurationType.TRIGONAL_BIPYRAMIDAL, "@TB20", None)

    OH1 = (ConfigurationType.OCTAHEDRAL, "@OH1", _ANTI)
    OH2 = (ConfigurationType.OCTAHEDRAL, "@OH2", _CLOCK)
    OH3 = (ConfigurationType.OCTAHEDRAL, "@OH3", None)
    OH4 = (ConfigurationType.OCTAHEDRAL, "@OH4", None)
    OH5 = (ConfigurationType.OCTAHEDRAL, "@OH5", None)
    OH6 = (ConfigurationType.OCTAHEDRAL, "@OH6", None)
    OH7 = (ConfigurationType.OCTAHEDRAL, "@OH7", None)
    OH8 = (ConfigurationType.OCTAHEDRAL, "@OH8", None)
    OH9 = (ConfigurationType.OCTAHEDRAL, "@OH9", None)
    OH10 = (ConfigurationType.OCTAHEDRAL, "@OH10", None)
    OH11 = (ConfigurationType.OCTAHEDRAL, "@OH11", None)
    OH12 = (ConfigurationType.OCTAHEDRAL, "@OH12", None)
    OH13 = (ConfigurationType.OCTAHEDRAL, "@OH13", None)
    OH14 = (ConfigurationType.OCTAHEDRAL, "@OH14", None)
    OH15 = (ConfigurationType.OCTAHEDRAL, "@OH15", None)
    OH16 = (ConfigurationType.OCTAHEDRAL, "@OH16", None)
    OH17 = (ConfigurationType.OCTAHEDRAL, "@OH17", None)
    OH18 = (ConfigurationType.OCTAHEDRAL, "@OH18", None)
    OH19 = (ConfigurationType.OCTAHEDRAL, "@OH19", None)
    OH20 = (ConfigurationType.OCTAHEDRAL, "@OH20", None)
    OH21 = (ConfigurationType.OCTAHEDRAL, "@OH21", None)
    OH22 = (ConfigurationType.OCTAHEDRAL, "@OH22", None)
    OH23 = (ConfigurationType.OCTAHEDRAL, "@OH23", None)
    OH24 = (ConfigurationType.OCTAHEDRAL, "@OH24", None)
    OH25 = (ConfigurationType.OCTAHEDRAL, "@OH25", None)
    OH26 = (ConfigurationType.OCTAHEDRAL, "@OH26", None)
    OH27 = (ConfigurationType.OCTAHEDRAL, "@OH27", None)
    OH28 = (ConfigurationType.OCTAHEDRAL, "@OH28", None)
    OH29 = (ConfigurationType.OCTAHEDRAL, "@OH29", None)
    OH30 = (ConfigurationType.OCTAHEDRAL, "@OH30", None)

    # Double bond atom centric, no bracket token
    DB1 = (ConfigurationType.DOUBLE_BOND, None, _ANTI)
    DB2 = (ConfigurationType.DOUBLE_BOND, None, _CLOCK)

    def __init__(
        self,
        kind: ConfigurationType,
        token: str | None,
        handedness: str | None,
    ) -> None:
        self.kind = kind
        self.token = token
        self._handedness = handedness

    def __str__(self) -> str:
        return self.token or self.name

    @property
    def shorthand(self) -> "Configuration":
        """The implicit configuration this one abbreviates.

        ``TH1``, ``AL1``, ``TB1``, ``OH1`` and ``DB1`` are anticlockwise,
        their ``2`` counterparts clockwise. Codes with no handedness
        report themselves.
        """
        if self._handedness == _ANTI:
            return Configuration.ANTI_CLOCKWISE
        if self._handedness == _CLOCK:
            return Configuration.CLOCKWISE
        return self

    @property
    def is_implicit(self) -> bool:
        """Whether this is the bare ``@`` or ``@@`` mark."""
        return self.kind is ConfigurationType.IMPLICIT

    @classmethod
    def from_token(cls, token: str) -> "Configuration":
        """Resolve a bracket atom chirality token such as ``@@`` or ``@TB5``.

        Raises:
            ValueError: If the token is not a known configuration.
        """
        try:
            return _BY_TOKEN[token]
        except KeyError:
            raise ValueError(f"Unknown configuration: {token!r}") from None


_BY_TOKEN: Final[dict[str, Configuration]] = {
    c.token: c for c in Configuration if c.token is not None
}


class DoubleBond(Enum):
    """Relative placement of two substituents across a double bond."""

    UNSPECIFIED = auto()
    TOGETHER = auto()
    OPPOSITE = auto()
