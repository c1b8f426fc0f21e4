"""Reaction direction from the ``/d`` layer character."""

from __future__ import annotations

from typing import Dict, Optional

from rinchi.common.constants import RInChIConstants
from rinchi.models import ReactionDirection

_DIRECTIONS: Dict[str, ReactionDirection] = {
    RInChIConstants.DIRECTION_EQUILIBRIUM: ReactionDirection.BIDIRECTIONAL,
    RInChIConstants.DIRECTION_FORWARD: ReactionDirection.FORWARD,
    RInChIConstants.DIRECTION_REVERSE: ReactionDirection.BACKWARD,
}


def resolve_direction(character: Optional[str]) -> ReactionDirection:
    """Map a direction character to a :class:`ReactionDirection`.

    A missing or unknown character yields UNDIRECTED rather than an
    error.
    """
    if not character:
        return ReactionDirection.UNDIRECTED
    return _DIRECTIONS.get(character, ReactionDirection.UNDIRECTED)
