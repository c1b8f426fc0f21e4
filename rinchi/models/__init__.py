"""
Typed dataclass definitions shared across all toolkit modules.

Re-exports every model so callers can do::

    from rinchi.models import Component, DecompositionResult, ReactionRole
"""

from .rinchi_models import (
    Component,
    DecompositionResult,
    NoStructCounts,
    ReactionDirection,
    ReactionRole,
)
