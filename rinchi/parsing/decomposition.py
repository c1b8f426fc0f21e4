"""
RInChI Decomposition
====================

Decomposes a RInChI and, if available, its RAuxInfo into the InChI and
AuxInfo of each reaction component together with the component's role
(reactant, product, agent) and the reaction direction.

Malformed input never raises: every problem is recorded as an ERROR in
the returned result, whose component tuple is then empty.  Check
``result.status`` before using the components.

Usage::

    from rinchi import decompose

    result = decompose(rinchi, rauxinfo)
    if result.is_successful:
        for component in result.components:
            print(component.role, component.inchi)
"""

from __future__ import annotations

import logging
from typing import List, Optional

from rinchi.common.errors import GrammarMismatchError, RInChIError
from rinchi.common.status import NullStatusSink, Status, StatusLog, StatusSink
from rinchi.models import Component, DecompositionResult, NoStructCounts, ReactionDirection
from rinchi.parsing.assembler import assemble_components
from rinchi.parsing.direction import resolve_direction
from rinchi.parsing.grammar import match_rinchi
from rinchi.parsing.layers import decompose_rauxinfo, split_layer

__all__ = ["decompose"]

logger = logging.getLogger(__name__)

NULL_INPUT = "NULL_INPUT"


def decompose(
    rinchi: Optional[str],
    rauxinfo: Optional[str] = "",
    sink: Optional[StatusSink] = None,
) -> DecompositionResult:
    """Decompose *rinchi* (and *rauxinfo*) into reaction components.

    Args:
        rinchi: RInChI string.
        rauxinfo: RAuxInfo string; ``""`` means no auxiliary information.
        sink: Receives every status message in addition to the result's
              own log.  Defaults to a no-op sink.

    Returns:
        A new, immutable :class:`DecompositionResult`.
    """
    log = StatusLog(relay=sink if sink is not None else NullStatusSink())

    if rinchi is None:
        log.add_message("RInChI string provided as input is 'None'.", Status.ERROR, NULL_INPUT)
    if rauxinfo is None:
        log.add_message(
            "RInChI auxiliary info string provided as input is 'None'.", Status.ERROR, NULL_INPUT
        )
    if rinchi is None or rauxinfo is None:
        return DecompositionResult(messages=log.messages)

    try:
        components, direction, counts = _decompose(rinchi, rauxinfo)
    except RInChIError as exc:
        logger.debug("Decomposition failed [%s]: %s", exc.code, exc.message)
        log.add_message(exc.message, Status.ERROR, exc.code)
        return DecompositionResult(messages=log.messages)

    logger.debug("Decomposed RInChI into %d components (%s)", len(components), direction.value)
    return DecompositionResult(
        components=tuple(components),
        direction=direction,
        no_struct_counts=counts,
        messages=log.messages,
    )


def _decompose(rinchi: str, rauxinfo: str):
    match = match_rinchi(rinchi)
    if match is None:
        raise GrammarMismatchError("Cannot decompose invalid RInChI string '{}'.".format(rinchi))

    layers = [split_layer(layer) for layer in match.component_layers]
    direction: ReactionDirection = resolve_direction(match.direction)
    counts = NoStructCounts(*match.no_struct_counts())

    aux_layers = decompose_rauxinfo(rauxinfo) if rauxinfo else None
    components: List[Component] = assemble_components(layers, aux_layers, direction)
    return components, direction, counts
