"""
Exceptions raised by stereopy.

Syntax problems in the input string are ParseError (or RingError for ring
closures); misuse of the stereo API is a StereoError.
"""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for all stereopy errors."""

    pass


class ParseError(ChemError):
    """Malformed SMILES input.

    Attributes:
        message: Description of what went wrong.
        smiles: The string being parsed, if known.
        position: Offset of the offending character, if known.
    """

    def __init__(
        self,
        message: str,
        smiles: str | None = None,
        position: int | None = None,
    ) -> None:
        self.message = message
        self.smiles = smiles
        self.position = position
        super().__init__(self._render())

    def _render(self) -> str:
        if self.smiles is None:
            return self.message
        if self.position is None:
            return f"{self.message} in: {self.smiles}"
        # point at the offending character
        return f"{self.message}\n  {self.smiles}\n  {' ' * self.position}^"


class RingError(ParseError):
    """Unclosed, conflicting or impossible ring closure.

    Attributes:
        ring_index: The ring closure number involved.
    """

    def __init__(self, message: str, ring_index: int | None = None) -> None:
        self.ring_index = ring_index
        super().__init__(message)


class StereoError(ChemError):
    """Base exception for stereochemistry errors."""

    pass


class InvalidStereoError(StereoError, ValueError):
    """Structurally impossible stereo input.

    Raised when a topology factory gets a configuration from the wrong
    family or a neighbor list of the wrong size, and when a double bond
    classifier is pointed at a bond that is not a double bond.
    """

    pass


class UndefinedTopologyError(StereoError):
    """The focus atom of the unknown topology was requested."""

    pass
