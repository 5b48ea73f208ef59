"""
Stereopy - Pure Python stereochemistry perception for SMILES graphs.

A zero-dependency library for reading SMILES into chemical graphs and
reasoning about their stereo centres: atom centric topologies, resolution
of implicit ``@``/``@@`` marks and conversion of up/down bonds into double
bond topologies.

    >>> from stereopy import parse
    >>> from stereopy.stereo import to_trigonal_topology
    >>> g = to_trigonal_topology(parse("F/C=C/F"))
    >>> g.topology_of(1).configuration.name
    'DB1'

Submodules:
    stereopy.stereo - Mark resolution, up/down conversion, cis/trans
"""

__version__ = "0.1.0"

# Core types
from stereopy.types import Atom, Edge, ChemicalGraph

# Parsing
from stereopy.parser import parse, SmilesParser

# Stereo descriptors and topologies
from stereopy.configuration import Configuration, ConfigurationType, DoubleBond
from stereopy.topology import (
    Topology,
    Tetrahedral,
    Trigonal,
    parity,
    sort,
    unknown,
    tetrahedral,
    trigonal,
)

# Exceptions
from stereopy.exceptions import (
    ChemError,
    ParseError,
    RingError,
    StereoError,
    InvalidStereoError,
    UndefinedTopologyError,
)

# Element data
from stereopy.elements import Element, Bond, ORGANIC_SUBSET, AROMATIC_SUBSET

# Submodules
from stereopy import stereo

__all__ = [
    # Types
    "Atom", "Edge", "ChemicalGraph",
    # Parsing
    "parse", "SmilesParser",
    # Stereo
    "Configuration", "ConfigurationType", "DoubleBond",
    "Topology", "Tetrahedral", "Trigonal",
    "parity", "sort", "unknown", "tetrahedral", "trigonal",
    # Exceptions
    "ChemError", "ParseError", "RingError",
    "StereoError", "InvalidStereoError", "UndefinedTopologyError",
    # Elements
    "Element", "Bond", "ORGANIC_SUBSET", "AROMATIC_SUBSET",
    # Submodules
    "stereo",
]
