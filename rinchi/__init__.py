"""
RInChI toolkit — decomposition of reaction InChIs and Base-26 key encoding.

Organized into:
- common/   : shared constants, errors, status log
- models/   : typed dataclass definitions (components, results)
- parsing/  : RInChI grammar, layer splitting, RAuxInfo, decomposition
- key/      : Base-26 encoding of hash digests
- chem/     : RDKit molecule / reaction construction from InChIs
- skills/   : skill wrappers returning JSON-serializable envelopes
"""

from rinchi.parsing.decomposition import decompose

__all__ = ["decompose"]
