"""
Component assembly — turns split layers into role-tagged components.

If the reaction direction is BACKWARD the molecules of layer 2 are
products and those of layer 3 reactants; for every other direction
(forward, bidirectional, undirected) layer 2 holds the reactants.
Layer 4 always holds agents.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from rinchi.common.constants import RInChIConstants
from rinchi.common.errors import LayerCountError
from rinchi.models import Component, ReactionDirection, ReactionRole


def layer_roles(direction: ReactionDirection) -> List[ReactionRole]:
    """Roles of layers 2, 3 and 4 for the given *direction*."""
    if direction == ReactionDirection.BACKWARD:
        return [ReactionRole.PRODUCT, ReactionRole.REACTANT, ReactionRole.AGENT]
    return [ReactionRole.REACTANT, ReactionRole.PRODUCT, ReactionRole.AGENT]


def check_layer_counts(
    layers: Sequence[Sequence[str]],
    aux_layers: Sequence[Sequence[str]],
) -> None:
    """Raise :class:`LayerCountError` unless every layer pair has equal size."""
    main_counts = [len(layer) for layer in layers]
    aux_counts = [len(layer) for layer in aux_layers]
    if main_counts != aux_counts:
        raise LayerCountError(
            "Different number of molecules in RInChI ({}) and Auxiliary Information ({}).".format(
                ", ".join(str(n) for n in main_counts),
                ", ".join(str(n) for n in aux_counts),
            )
        )


def components_for_layer(
    fragments: Sequence[str],
    aux_fragments: Optional[Sequence[str]],
    role: ReactionRole,
) -> List[Component]:
    """Build one :class:`Component` per fragment of a single layer."""
    components = []
    for i, fragment in enumerate(fragments):
        aux_info = ""
        if aux_fragments is not None:
            aux_info = RInChIConstants.INCHI_AUXINFO_HEADER + aux_fragments[i]
        components.append(Component(
            inchi=RInChIConstants.INCHI_STD_HEADER + fragment,
            aux_info=aux_info,
            role=role,
        ))
    return components


def assemble_components(
    layers: Sequence[Sequence[str]],
    aux_layers: Optional[Sequence[Sequence[str]]],
    direction: ReactionDirection,
) -> List[Component]:
    """Combine layers 2-4 (and their RAuxInfo counterparts) into components.

    Args:
        layers: Fragments of RInChI layers 2, 3 and 4.
        aux_layers: The three RAuxInfo layers, or ``None`` when no
            auxiliary information was supplied.
        direction: Resolved reaction direction.

    Returns:
        A new list ordered layer 2, layer 3, layer 4.

    Raises:
        LayerCountError: if *aux_layers* disagrees with *layers* on the
            number of molecules in any layer.
    """
    if aux_layers is not None:
        check_layer_counts(layers, aux_layers)

    components: List[Component] = []
    for i, role in enumerate(layer_roles(direction)):
        components.extend(components_for_layer(
            layers[i],
            aux_layers[i] if aux_layers is not None else None,
            role,
        ))
    return components
