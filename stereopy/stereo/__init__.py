"""Stereo perception: implicit mark resolution, up/down bond conversion, cis/trans."""

from stereopy.stereo.explicit import to_explicit
from stereopy.stereo.trigonal import ToTrigonalTopology, to_trigonal_topology
from stereopy.stereo.bond_based import configuration_of, trigonal_configuration_of

__all__ = [
    "to_explicit",
    "ToTrigonalTopology",
    "to_trigonal_topology",
    "configuration_of",
    "trigonal_configuration_of",
]
