"""
Centralized Configuration Registry
====================================

Single source of truth for the literal prefixes, tags and delimiters of
the RInChI and RAuxInfo formats.

Usage::

    from rinchi.common.constants import RInChIConstants

    if rauxinfo.startswith(RInChIConstants.RINCHI_AUXINFO_HEADER):
        ...
"""


class RInChIConstants:
    """Literal building blocks of RInChI version 1.00.

    Layer 1 is the mandatory header; layers 2-4 hold the component
    InChIs separated by ``LAYER_DELIMITER``; layer 5 is the direction tag
    and layer 6 the no-structure counts.
    """

    RINCHI_STD_HEADER: str = "RInChI=1.00.1S/"
    RINCHI_AUXINFO_HEADER: str = "RAuxInfo=1.00.1/"

    # prepended to every decomposed fragment
    INCHI_STD_HEADER: str = "InChI=1S/"
    INCHI_AUXINFO_HEADER: str = "AuxInfo=1/"

    LAYER_DELIMITER: str = "<>"
    COMPONENT_DELIMITER: str = "!"

    DIRECTION_TAG: str = "/d"
    DIRECTION_FORWARD: str = "+"
    DIRECTION_REVERSE: str = "-"
    DIRECTION_EQUILIBRIUM: str = "="

    NOSTRUCT_TAG: str = "/u"
    NOSTRUCT_DELIMITER: str = "-"

    # number of component layers (2, 3, 4) carried by RInChI and RAuxInfo
    COMPONENT_LAYER_COUNT: int = 3


class KeyLimits:
    """Value ranges of the Base-26 encoder."""

    TRIPLET_COUNT: int = 1 << 14          # 14-bit windows
    DOUBLET_COUNT: int = 26 * 26          # every two-letter string is valid
    BYTE_MAX: int = 255
    HASH_BLOCK_MIN_BYTES: int = 9         # bits 0..64 feed a 14-letter block
