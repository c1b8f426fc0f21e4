"""
InChI Parsing & Reaction Construction
=====================================
Builds RDKit molecules from the component InChIs of a decomposed RInChI
and assembles them into an RDKit reaction.

Public API:
    parse_inchi(inchi)                          → Optional[Mol]  (LRU-cached)
    inchi_to_smiles(inchi)                      → str
    reaction_from_decomposition(result)         → ChemicalReaction
    reaction_smiles_from_decomposition(result)  → str
    clear_cache()                               → None
"""

import logging
from functools import lru_cache
from typing import Optional

from rdkit import Chem
from rdkit.Chem import rdChemReactions

from rinchi.common.errors import ChemistryError
from rinchi.models import DecompositionResult, ReactionRole

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Molecules
# ---------------------------------------------------------------------------

@lru_cache(maxsize=512)
def parse_inchi(inchi: str) -> Optional[Chem.Mol]:
    """Parse an InChI string into a sanitized RDKit Mol.

    Results are LRU-cached (maxsize=512) so repeated calls with the same
    InChI return the *same* object without re-parsing.

    Returns ``None`` for invalid or empty InChI.
    """
    if not inchi:
        return None
    mol = Chem.MolFromInchi(inchi)
    if mol is None:
        logger.debug("RDKit cannot parse InChI %s", inchi)
    return mol


def inchi_to_smiles(inchi: str) -> str:
    """Canonical SMILES for *inchi*, or ``""`` if it cannot be parsed."""
    mol = parse_inchi(inchi)
    if mol is None:
        return ""
    return Chem.MolToSmiles(mol)


# ---------------------------------------------------------------------------
# Reactions
# ---------------------------------------------------------------------------

def reaction_from_decomposition(result: DecompositionResult) -> rdChemReactions.ChemicalReaction:
    """Build an RDKit reaction from a successful decomposition.

    Reactants, products and agents are added as templates in component
    order.

    Raises:
        ChemistryError: if *result* carries ERROR status or a component
            InChI cannot be parsed.
    """
    if not result.is_successful:
        raise ChemistryError(
            "INVALID_DECOMPOSITION",
            "Cannot build a reaction from a failed decomposition",
        )

    rxn = rdChemReactions.ChemicalReaction()
    for component in result.components:
        mol = parse_inchi(component.inchi)
        if mol is None:
            raise ChemistryError(
                "INVALID_INCHI",
                f"RDKit cannot parse InChI '{component.inchi}'",
            )
        if component.role == ReactionRole.REACTANT:
            rxn.AddReactantTemplate(mol)
        elif component.role == ReactionRole.PRODUCT:
            rxn.AddProductTemplate(mol)
        else:
            rxn.AddAgentTemplate(mol)
    return rxn


def reaction_smiles_from_decomposition(result: DecompositionResult) -> str:
    """Reaction SMILES (``reactants>agents>products``) of a decomposition."""
    rxn = reaction_from_decomposition(result)
    return rdChemReactions.ReactionToSmiles(rxn)


# ---------------------------------------------------------------------------
# Cache management
# ---------------------------------------------------------------------------

def clear_cache() -> None:
    """Clear the LRU caches (useful for testing or memory management)."""
    parse_inchi.cache_clear()
