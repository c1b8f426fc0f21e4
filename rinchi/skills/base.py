"""
Skill Base Class
================

A skill takes a JSON object of arguments and answers with the
``SkillResult.to_dict()`` envelope, so it can be driven from the CLI,
a batch file or any host that speaks JSON.

Subclasses implement :meth:`BaseSkill.run`.  :meth:`BaseSkill.execute`
rejects non-object arguments and converts :class:`SkillArgumentError`
and toolkit errors into a failed envelope: a skill never raises.

Usage::

    from rinchi.skills.base import BaseSkill, SkillResult, string_arg

    class EchoSkill(BaseSkill):
        name = "echo"
        description = "Return the RInChI unchanged."

        def run(self, args):
            return SkillResult(success=True, data={"rinchi": string_arg(args, "rinchi")})
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from rinchi.common.errors import RInChIError

logger = logging.getLogger(__name__)


class SkillArgumentError(ValueError):
    """Raised when a skill argument is missing or has the wrong type."""


@dataclass
class SkillResult:
    """Result envelope returned by every skill.

    Attributes:
        success: Whether the skill execution succeeded.
        data: JSON-serializable payload (a decomposition, a key block).
        error: Human-readable error string (empty on success).
    """

    success: bool
    data: Dict[str, Any] = field(default_factory=dict)
    error: str = ""

    @classmethod
    def failure(cls, error: str, data: Optional[Dict[str, Any]] = None) -> "SkillResult":
        return cls(success=False, data=data or {}, error=error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "data": self.data,
            "error": self.error,
        }


def string_arg(args: Dict[str, Any], key: str, default: Optional[str] = None) -> str:
    """Return ``args[key]`` as a string.

    A missing key falls back to *default*; without a default it is an
    error, as is a value of any other type.
    """
    if key not in args:
        if default is None:
            raise SkillArgumentError("Missing argument '{}'".format(key))
        return default
    value = args[key]
    if not isinstance(value, str):
        raise SkillArgumentError(
            "Argument '{}' must be a string, got {}".format(key, type(value).__name__)
        )
    return value


class BaseSkill(ABC):
    """Skill base class.

    Subclasses must set ``name`` and ``description`` and implement
    :meth:`run`.
    """

    name: str = ""
    description: str = ""

    def execute(self, args: Any) -> Dict[str, Any]:
        """Run the skill on *args* and return ``SkillResult.to_dict()``."""
        if not isinstance(args, dict):
            return SkillResult.failure(
                "Invalid args for {}: expected a JSON object".format(self.name)
            ).to_dict()

        try:
            result = self.run(args)
        except SkillArgumentError as exc:
            return SkillResult.failure(str(exc)).to_dict()
        except RInChIError as exc:
            logger.exception("%s failed [%s]", self.name, exc.code)
            return SkillResult.failure(exc.message).to_dict()
        return result.to_dict()

    @abstractmethod
    def run(self, args: Dict[str, Any]) -> SkillResult:
        """Skill body; may raise :class:`SkillArgumentError`."""
        raise NotImplementedError
