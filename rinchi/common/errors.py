"""
Unified Error Hierarchy
=======================
Exception-based error system for the RInChI toolkit.

Domain errors (malformed RInChI / RAuxInfo input) are raised inside the
parsing modules and caught once by :func:`rinchi.parsing.decomposition.decompose`,
which records their ``code`` and ``message`` as ERROR entries of the
result's status log.
"""


class RInChIError(Exception):
    """Unified error base class for all RInChI errors.

    Attributes:
        code: Machine-readable error code (e.g. "GRAMMAR_MISMATCH").
        message: Human-readable error description.
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class GrammarMismatchError(RInChIError):
    """Raised when a RInChI string does not match the layer grammar."""

    def __init__(self, message: str):
        super().__init__("GRAMMAR_MISMATCH", message)


class AuxInfoHeaderError(RInChIError):
    """Raised when a RAuxInfo string lacks the expected header."""

    def __init__(self, message: str):
        super().__init__("AUXINFO_HEADER_MISMATCH", message)


class AuxInfoLayerError(RInChIError):
    """Raised when a RAuxInfo string carries more component layers than a RInChI."""

    def __init__(self, message: str):
        super().__init__("AUXINFO_LAYER_OVERFLOW", message)


class LayerCountError(RInChIError):
    """Raised when RInChI and RAuxInfo disagree on molecules per layer."""

    def __init__(self, message: str):
        super().__init__("LAYER_COUNT_MISMATCH", message)


class ChemistryError(RInChIError):
    """Raised when an RDKit or chemistry operation fails."""
    pass
