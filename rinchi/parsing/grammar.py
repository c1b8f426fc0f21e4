"""
RInChI Grammar
==============
Anchored recognition of a complete RInChI string::

    RInChI=1.00.1S/<layer2><><layer3><><layer4>/d<dir>/u<n2>-<n3>-<n4>

Layers 2-6 are optional.  Layer content is matched non-greedily and may
not contain a layer delimiter or a direction / no-structure tag, so a
later optional layer is never absorbed by an earlier one.

Public API:
    RINCHI_PATTERN            compiled pattern (named groups)
    RInChIMatch               captured raw text of layers 2-6
    match_rinchi(rinchi)    → Optional[RInChIMatch]
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from rinchi.common.constants import RInChIConstants as C

GROUP_LAYER_2 = "layer2"
GROUP_LAYER_3 = "layer3"
GROUP_LAYER_4 = "layer4"
GROUP_DIRECTION = "direction"
GROUP_NOSTRUCT_1 = "nostruct1"
GROUP_NOSTRUCT_2 = "nostruct2"
GROUP_NOSTRUCT_3 = "nostruct3"

_LAYER_DELIM = re.escape(C.LAYER_DELIMITER)
_DIRECTION_TAG = re.escape(C.DIRECTION_TAG)
_NOSTRUCT_TAG = re.escape(C.NOSTRUCT_TAG)
_NOSTRUCT_DELIM = re.escape(C.NOSTRUCT_DELIMITER)

# shortest run of characters not containing "<>", "/d" or "/u"
_LAYER_BODY = "(?:(?!{}|{}|{}).)*?".format(_LAYER_DELIM, _DIRECTION_TAG, _NOSTRUCT_TAG)

_DIRECTION_CHARS = "".join(
    re.escape(ch) for ch in (
        C.DIRECTION_EQUILIBRIUM, C.DIRECTION_FORWARD, C.DIRECTION_REVERSE,
    )
)

RINCHI_PATTERN = re.compile(
    # header
    re.escape(C.RINCHI_STD_HEADER)
    # reactants (products if reversed)
    + "(?P<{}>{})?".format(GROUP_LAYER_2, _LAYER_BODY)
    # products (reactants if reversed)
    + "(?:{}(?P<{}>{}))?".format(_LAYER_DELIM, GROUP_LAYER_3, _LAYER_BODY)
    # agents
    + "(?:{}(?P<{}>{}))?".format(_LAYER_DELIM, GROUP_LAYER_4, _LAYER_BODY)
    # direction
    + "(?:{}(?P<{}>[{}]))?".format(_DIRECTION_TAG, GROUP_DIRECTION, _DIRECTION_CHARS)
    # no-structure counts, one to three
    + "(?:{tag}(?P<{g1}>[0-9]+)(?:{d}(?P<{g2}>[0-9]+)(?:{d}(?P<{g3}>[0-9]+))?)?)?".format(
        tag=_NOSTRUCT_TAG, d=_NOSTRUCT_DELIM,
        g1=GROUP_NOSTRUCT_1, g2=GROUP_NOSTRUCT_2, g3=GROUP_NOSTRUCT_3,
    )
)


@dataclass(frozen=True)
class RInChIMatch:
    """Raw captures of a matched RInChI; absent layers are ``None``."""

    layer2: Optional[str] = None
    layer3: Optional[str] = None
    layer4: Optional[str] = None
    direction: Optional[str] = None
    no_struct: Tuple[Optional[str], Optional[str], Optional[str]] = (None, None, None)

    @property
    def component_layers(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        return self.layer2, self.layer3, self.layer4

    def no_struct_counts(self) -> Tuple[int, int, int]:
        """No-structure counts as integers, 0 where absent."""
        counts = [int(n) if n else 0 for n in self.no_struct]
        return counts[0], counts[1], counts[2]


def match_rinchi(rinchi: str) -> Optional[RInChIMatch]:
    """Match *rinchi* against the full grammar.

    Returns ``None`` unless the entire string matches.
    """
    m = RINCHI_PATTERN.fullmatch(rinchi)
    if m is None:
        return None
    return RInChIMatch(
        layer2=m.group(GROUP_LAYER_2),
        layer3=m.group(GROUP_LAYER_3),
        layer4=m.group(GROUP_LAYER_4),
        direction=m.group(GROUP_DIRECTION),
        no_struct=(
            m.group(GROUP_NOSTRUCT_1),
            m.group(GROUP_NOSTRUCT_2),
            m.group(GROUP_NOSTRUCT_3),
        ),
    )
