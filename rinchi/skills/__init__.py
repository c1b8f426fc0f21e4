"""
Skills — JSON-in / JSON-out wrappers around the toolkit modules.

Each skill extends :class:`BaseSkill`, implements ``run(args) -> SkillResult``
and is called through ``execute(args) -> dict``.
"""

from rinchi.skills.base import BaseSkill, SkillArgumentError, SkillResult, string_arg
from rinchi.skills.decompose_rinchi import DecomposeRInChISkill
from rinchi.skills.encode_key import EncodeKeySkill

__all__ = [
    "BaseSkill",
    "SkillResult",
    "SkillArgumentError",
    "string_arg",
    "DecomposeRInChISkill",
    "EncodeKeySkill",
]
