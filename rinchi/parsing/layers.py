"""
Layer splitting for RInChI and RAuxInfo strings.

Public API:
    split_layer(layer)            → List[str]
    decompose_rauxinfo(rauxinfo)  → List[List[str]]  (always three layers)
"""

from __future__ import annotations

from typing import List, Optional

from rinchi.common.constants import RInChIConstants
from rinchi.common.errors import AuxInfoHeaderError, AuxInfoLayerError


def split_layer(layer: Optional[str]) -> List[str]:
    """Split a component layer into its molecule fragments.

    Fragments are separated by ``!``.  Empty fragments, including those
    produced by a leading or trailing delimiter, are dropped.

    Example::

        >>> split_layer("C2H6O/c1-2-3!H2O/h1H2!")
        ['C2H6O/c1-2-3', 'H2O/h1H2']
    """
    if not layer:
        return []
    return [frag for frag in layer.split(RInChIConstants.COMPONENT_DELIMITER) if frag]


def decompose_rauxinfo(rauxinfo: str) -> List[List[str]]:
    """Split a RAuxInfo string into three layers of per-molecule fragments.

    Trailing layers omitted from the string come back as empty lists.

    Raises:
        AuxInfoHeaderError: if *rauxinfo* does not start with the
            RAuxInfo header.
        AuxInfoLayerError: if *rauxinfo* has more than three layers.
    """
    header = RInChIConstants.RINCHI_AUXINFO_HEADER
    if not rauxinfo.startswith(header):
        raise AuxInfoHeaderError(
            "Invalid/unsupported RInChI auxiliary information string. "
            "First layer must be equal to '{}'.".format(header)
        )

    body = rauxinfo[len(header):]
    layer_count = RInChIConstants.COMPONENT_LAYER_COUNT
    raw_layers = body.split(RInChIConstants.LAYER_DELIMITER)
    if len(raw_layers) > layer_count:
        raise AuxInfoLayerError(
            "Invalid RInChI auxiliary information string. Found {} component layers, "
            "at most {} are allowed.".format(len(raw_layers), layer_count)
        )

    layers = [split_layer(layer) for layer in raw_layers]
    while len(layers) < layer_count:
        layers.append([])
    return layers
