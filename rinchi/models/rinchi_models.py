"""
RInChI data models — reaction components and decomposition results.

Provides enums for reaction role and direction plus typed dataclasses for
a decomposed component, the no-structure counts and the full
decomposition result.  Every class implements ``to_dict()``; components
also implement ``from_dict()`` with round-trip consistency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from rinchi.common.status import Status, StatusMessage, worst_status


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ReactionRole(Enum):
    """Role of a component within a reaction."""

    REACTANT = "reactant"
    PRODUCT = "product"
    AGENT = "agent"


class ReactionDirection(Enum):
    """Reaction direction as encoded by the ``/d`` layer.

    Only BACKWARD swaps the meaning of layers 2 and 3.
    """

    FORWARD = "forward"
    BACKWARD = "backward"
    BIDIRECTIONAL = "bidirectional"
    UNDIRECTED = "undirected"


# ---------------------------------------------------------------------------
# Component
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Component:
    """A single reaction component: InChI, AuxInfo and role.

    ``aux_info`` is ``""`` when no auxiliary information was given.
    """

    inchi: str
    aux_info: str
    role: ReactionRole

    @property
    def has_aux_info(self) -> bool:
        return self.aux_info != ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "inchi": self.inchi,
            "aux_info": self.aux_info,
            "role": self.role.value,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Component":
        return cls(
            inchi=d["inchi"],
            aux_info=d.get("aux_info", ""),
            role=ReactionRole(d["role"]),
        )


# ---------------------------------------------------------------------------
# NoStructCounts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NoStructCounts:
    """Number of structure-less components in layers 2, 3 and 4."""

    layer2: int = 0
    layer3: int = 0
    layer4: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "layer2": self.layer2,
            "layer3": self.layer3,
            "layer4": self.layer4,
        }


# ---------------------------------------------------------------------------
# DecompositionResult
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DecompositionResult:
    """Outcome of decomposing a RInChI (and optionally its RAuxInfo).

    Check :attr:`status` before using :attr:`components`: on ERROR the
    component tuple is empty and :attr:`direction` is ``None``.
    """

    components: Tuple[Component, ...] = ()
    direction: Optional[ReactionDirection] = None
    no_struct_counts: NoStructCounts = field(default_factory=NoStructCounts)
    messages: Tuple[StatusMessage, ...] = ()

    @property
    def status(self) -> Status:
        return worst_status(self.messages)

    @property
    def is_successful(self) -> bool:
        return self.status != Status.ERROR

    @property
    def reactants(self) -> Tuple[Component, ...]:
        return self._with_role(ReactionRole.REACTANT)

    @property
    def products(self) -> Tuple[Component, ...]:
        return self._with_role(ReactionRole.PRODUCT)

    @property
    def agents(self) -> Tuple[Component, ...]:
        return self._with_role(ReactionRole.AGENT)

    def _with_role(self, role: ReactionRole) -> Tuple[Component, ...]:
        return tuple(c for c in self.components if c.role == role)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "direction": self.direction.value if self.direction else None,
            "no_struct_counts": self.no_struct_counts.to_dict(),
            "components": [c.to_dict() for c in self.components],
            "messages": [m.to_dict() for m in self.messages],
        }
