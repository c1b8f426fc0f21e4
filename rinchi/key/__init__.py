"""
Key encoding — Base-26 letter codes for bit windows of hash digests.
"""

from .base26 import (
    BitWindow,
    bits_to_base26,
    base26_triplet,
    base26_doublet,
    base26_triplet_1,
    base26_triplet_2,
    base26_triplet_3,
    base26_triplet_4,
    base26_doublet_1,
    base26_doublet_for_bits_28_to_36,
    base26_doublet_for_bits_56_to_64,
    encode_hash_block,
)
