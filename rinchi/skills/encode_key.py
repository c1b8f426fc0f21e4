"""
Encode Key Skill
================

Thin skill wrapper around :func:`rinchi.key.base26.encode_hash_block`.
The digest is supplied by the caller, either as a hex string or as a
list of byte values.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from rinchi.key.base26 import encode_hash_block
from rinchi.skills.base import BaseSkill, SkillArgumentError, SkillResult

logger = logging.getLogger(__name__)


def _digest_bytes(digest: Any) -> List[int]:
    try:
        if isinstance(digest, str):
            return list(bytes.fromhex(digest))
        if isinstance(digest, list):
            return [int(b) for b in digest]
    except (TypeError, ValueError) as exc:
        raise SkillArgumentError("Invalid digest: {}".format(exc)) from exc
    raise SkillArgumentError(
        "Argument 'digest' must be a hex string or a list of bytes, got {}".format(
            type(digest).__name__
        )
    )


class EncodeKeySkill(BaseSkill):
    """Encode the first 65 bits of a digest as a 14-letter Base-26 block."""

    name = "encode_key"
    description = "Encode a hash digest as a 14-letter Base-26 key block"

    def run(self, args: Dict[str, Any]) -> SkillResult:
        if "digest" not in args:
            raise SkillArgumentError("Missing argument 'digest'")

        digest = _digest_bytes(args["digest"])
        try:
            block = encode_hash_block(digest)
        except ValueError as exc:
            logger.warning("encode_key rejected digest: %s", exc)
            return SkillResult.failure(str(exc))

        return SkillResult(success=True, data={"key": block})
