"""
Base-26 Key Encoding
====================
Converts bit windows of a hash digest into upper-case letter codes, the
way InChIKey-style keys are built.

Bits are numbered little-endian across the digest: bit *k* is bit
``k % 8`` of byte ``k // 8``.  A window of 14 bits becomes a triplet, a
window of at most 9 bits a doublet.  The windows cross byte boundaries,
so every variant reads the whole integer value of the bytes it spans and
shifts / masks it rather than encoding byte by byte.

Triplets come from a 16384-entry table: all three-letter strings in
lexicographic order, without those starting with ``E`` and without
``TAA`` … ``TTV``.  Doublets are plain two-digit base-26 numbers.

Public API:
    BitWindow                                  window descriptor
    bits_to_base26(digest, window)           → str
    base26_triplet(n) / base26_doublet(n)    → str
    base26_triplet_1 … base26_triplet_4      → str  (3 letters)
    base26_doublet_1                         → str  (2 letters, bits 0-8)
    base26_doublet_for_bits_28_to_36         → str
    base26_doublet_for_bits_56_to_64         → str
    encode_hash_block(digest)                → str  (14 letters)
"""

from __future__ import annotations

import itertools
import string
from dataclasses import dataclass
from typing import Sequence, Tuple

from rinchi.common.constants import KeyLimits

_ALPHABET = string.ascii_uppercase


def _build_triplet_table() -> Tuple[str, ...]:
    table = []
    for letters in itertools.product(_ALPHABET, repeat=3):
        triplet = "".join(letters)
        if triplet[0] == "E" or "TAA" <= triplet <= "TTV":
            continue
        table.append(triplet)
    return tuple(table)


_TRIPLETS: Tuple[str, ...] = _build_triplet_table()


# ---------------------------------------------------------------------------
# Integer → letters
# ---------------------------------------------------------------------------

def to_base26(value: int, width: int) -> str:
    """Plain base-26 digits of *value*, most significant first.

    ``A`` is 0 and ``Z`` is 25; the result is left-padded with ``A`` to
    *width* letters.
    """
    letters = []
    for _ in range(width):
        value, digit = divmod(value, 26)
        letters.append(_ALPHABET[digit])
    return "".join(reversed(letters))


def base26_triplet(value: int) -> str:
    """Triplet for a 14-bit *value* (0 … 16383)."""
    if not 0 <= value < KeyLimits.TRIPLET_COUNT:
        raise ValueError(
            f"Triplet index out of range: {value} (expected 0..{KeyLimits.TRIPLET_COUNT - 1})"
        )
    return _TRIPLETS[value]


def base26_doublet(value: int) -> str:
    """Doublet for *value* (0 … 675)."""
    if not 0 <= value < KeyLimits.DOUBLET_COUNT:
        raise ValueError(
            f"Doublet index out of range: {value} (expected 0..{KeyLimits.DOUBLET_COUNT - 1})"
        )
    return to_base26(value, 2)


# ---------------------------------------------------------------------------
# Bit windows
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BitWindow:
    """A run of *width* bits starting at bit *start* of a digest."""

    start: int
    width: int

    @property
    def byte_length(self) -> int:
        """Number of leading digest bytes the window reaches into."""
        return (self.start + self.width + 7) // 8

    @property
    def letters(self) -> int:
        return 3 if self.width > 9 else 2


TRIPLET_1 = BitWindow(start=0, width=14)
TRIPLET_2 = BitWindow(start=14, width=14)
TRIPLET_3 = BitWindow(start=28, width=14)
TRIPLET_4 = BitWindow(start=42, width=14)
DOUBLET_1 = BitWindow(start=0, width=9)
DOUBLET_28_TO_36 = BitWindow(start=28, width=9)
DOUBLET_56_TO_64 = BitWindow(start=56, width=9)


def _check_digest(digest: Sequence[int], length: int) -> None:
    if len(digest) != length:
        raise ValueError(f"Expected {length} bytes, got {len(digest)}")
    for byte in digest:
        if not 0 <= byte <= KeyLimits.BYTE_MAX:
            raise ValueError(f"Byte value out of range: {byte}")


def extract_bits(digest: Sequence[int], window: BitWindow) -> int:
    """Integer value of the bits of *digest* covered by *window*."""
    _check_digest(digest, window.byte_length)
    value = 0
    for offset, byte in enumerate(digest):
        value |= byte << (8 * offset)
    return (value >> window.start) & ((1 << window.width) - 1)


def bits_to_base26(digest: Sequence[int], window: BitWindow) -> str:
    """Encode the *window* of *digest* as a triplet or doublet.

    Raises:
        ValueError: if *digest* does not have exactly
            ``window.byte_length`` entries, or an entry is not a byte.
    """
    value = extract_bits(digest, window)
    if window.letters == 3:
        return base26_triplet(value)
    return base26_doublet(value)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

def base26_triplet_1(digest: Sequence[int]) -> str:
    """Bits 0-13 of a 2-byte sequence."""
    return bits_to_base26(digest, TRIPLET_1)


def base26_triplet_2(digest: Sequence[int]) -> str:
    """Bits 14-27 of a 4-byte sequence."""
    return bits_to_base26(digest, TRIPLET_2)


def base26_triplet_3(digest: Sequence[int]) -> str:
    """Bits 28-41 of a 6-byte sequence."""
    return bits_to_base26(digest, TRIPLET_3)


def base26_triplet_4(digest: Sequence[int]) -> str:
    """Bits 42-55 of a 7-byte sequence."""
    return bits_to_base26(digest, TRIPLET_4)


def base26_doublet_1(digest: Sequence[int]) -> str:
    """Bits 0-8 of a 2-byte sequence."""
    return bits_to_base26(digest, DOUBLET_1)


def base26_doublet_for_bits_28_to_36(digest: Sequence[int]) -> str:
    return bits_to_base26(digest, DOUBLET_28_TO_36)


def base26_doublet_for_bits_56_to_64(digest: Sequence[int]) -> str:
    return bits_to_base26(digest, DOUBLET_56_TO_64)


def encode_hash_block(digest: Sequence[int]) -> str:
    """Fourteen-letter block from the first 65 bits of *digest*.

    Four triplets over bits 0-55 followed by the doublet over bits 56-64.
    """
    digest = list(digest)
    if len(digest) < KeyLimits.HASH_BLOCK_MIN_BYTES:
        raise ValueError(
            f"Digest too short: {len(digest)} bytes (need at least {KeyLimits.HASH_BLOCK_MIN_BYTES})"
        )
    return "".join((
        base26_triplet_1(digest[:TRIPLET_1.byte_length]),
        base26_triplet_2(digest[:TRIPLET_2.byte_length]),
        base26_triplet_3(digest[:TRIPLET_3.byte_length]),
        base26_triplet_4(digest[:TRIPLET_4.byte_length]),
        base26_doublet_for_bits_56_to_64(digest[:DOUBLET_56_TO_64.byte_length]),
    ))
