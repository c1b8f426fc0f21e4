"""
RInChI parsing — grammar, layer splitting, RAuxInfo and decomposition.

- grammar:        anchored RInChI grammar with named layer captures
- layers:         component-layer splitting and RAuxInfo layer extraction
- direction:      direction character → ReactionDirection
- assembler:      role assignment and component construction
- decomposition:  decompose() entry point recording status instead of raising
"""

from .decomposition import decompose
from .direction import resolve_direction
from .grammar import RINCHI_PATTERN, RInChIMatch, match_rinchi
from .layers import decompose_rauxinfo, split_layer
from .assembler import assemble_components
