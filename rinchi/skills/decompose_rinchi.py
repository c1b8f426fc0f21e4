"""
Decompose RInChI Skill
======================

Thin skill wrapper around :func:`rinchi.parsing.decomposition.decompose`.
Accepts a RInChI (and optional RAuxInfo), delegates to the parser, and
returns a :class:`SkillResult` envelope.  With ``include_smiles`` set the
reaction SMILES built by RDKit is added to the payload.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from rinchi.common.errors import ChemistryError
from rinchi.common.status import LoggingStatusSink
from rinchi.parsing.decomposition import decompose
from rinchi.skills.base import BaseSkill, SkillResult, string_arg

logger = logging.getLogger(__name__)


class DecomposeRInChISkill(BaseSkill):
    """Split a RInChI into role-tagged component InChIs."""

    name = "decompose_rinchi"
    description = "Decompose a RInChI (and RAuxInfo) into reaction components"

    def run(self, args: Dict[str, Any]) -> SkillResult:
        """Decompose ``args["rinchi"]``.

        Optional keys: ``rauxinfo`` (string) and ``include_smiles``.
        """
        rinchi = string_arg(args, "rinchi")
        rauxinfo = string_arg(args, "rauxinfo", "")
        include_smiles = bool(args.get("include_smiles", False))

        if not rinchi.strip():
            return SkillResult.failure("Empty RInChI string")

        result = decompose(rinchi, rauxinfo, sink=LoggingStatusSink(logger))
        data = result.to_dict()
        if not result.is_successful:
            error = "; ".join(m.text for m in result.messages) or "Decomposition failed"
            return SkillResult.failure(error, data)

        if include_smiles:
            from rinchi.chem.inchi_parser import reaction_smiles_from_decomposition

            try:
                data["reaction_smiles"] = reaction_smiles_from_decomposition(result)
            except ChemistryError as exc:
                logger.exception("reaction SMILES construction failed for %s", rinchi)
                return SkillResult.failure(exc.message, data)

        return SkillResult(success=True, data=data)
