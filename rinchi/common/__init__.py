"""
Common infrastructure — constants, errors, status log.
"""

from .constants import RInChIConstants
from .errors import (
    RInChIError,
    GrammarMismatchError,
    AuxInfoHeaderError,
    AuxInfoLayerError,
    LayerCountError,
    ChemistryError,
)
from .status import (
    Status,
    StatusMessage,
    StatusSink,
    NullStatusSink,
    LoggingStatusSink,
    StatusLog,
    worst_status,
)
