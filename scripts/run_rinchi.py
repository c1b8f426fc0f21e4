#!/usr/bin/env python
"""
RInChI toolkit CLI
==================

Subcommands
-----------
  decompose — Decompose a RInChI (and RAuxInfo) into reaction components
  key       — Encode a hex digest as a 14-letter Base-26 block
  skill     — Call a single skill by name with JSON args
  batch     — Batch execution from a JSON task file

Usage::

    python scripts/run_rinchi.py decompose --rinchi "RInChI=1.00.1S/CH4/h1H4<>H2O/h1H2/d+"
    python scripts/run_rinchi.py key --digest 0123456789abcdef01
    python scripts/run_rinchi.py skill decompose_rinchi --args '{"rinchi": "..."}'
    python scripts/run_rinchi.py batch tasks.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

# ---------------------------------------------------------------------------
# Path setup — ensure project root is importable
# ---------------------------------------------------------------------------
_HERE = Path(__file__).resolve().parent
_ROOT = _HERE.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

logger = logging.getLogger("run_rinchi")


# ---------------------------------------------------------------------------
# Output helper
# ---------------------------------------------------------------------------

def _json_output(data: Dict[str, Any]) -> None:
    """Write *data* as UTF-8 JSON to stdout (Windows-safe)."""
    output = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    sys.stdout.buffer.write(output.encode("utf-8", errors="replace"))
    sys.stdout.buffer.write(b"\n")
    sys.stdout.buffer.flush()


# ---------------------------------------------------------------------------
# Skill registry
# ---------------------------------------------------------------------------

def _get_skill_registry() -> Dict[str, Dict[str, Any]]:
    """Return the skill name → {skill_cls, description} mapping."""
    from rinchi.skills import DecomposeRInChISkill, EncodeKeySkill

    return {
        skill_cls.name: {"skill_cls": skill_cls, "description": skill_cls.description}
        for skill_cls in (DecomposeRInChISkill, EncodeKeySkill)
    }


def _run_skill(skill_name: str, skill_args: Dict[str, Any]) -> Dict[str, Any]:
    config = _get_skill_registry().get(skill_name)
    if config is None:
        return {"success": False, "error": f"Unknown skill: {skill_name}"}
    return config["skill_cls"]().execute(skill_args)


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------

def _cmd_decompose(args: argparse.Namespace) -> int:
    """Decompose a RInChI string."""
    result = _run_skill("decompose_rinchi", {
        "rinchi": args.rinchi,
        "rauxinfo": args.rauxinfo,
        "include_smiles": args.smiles,
    })
    _json_output(result)
    return 0 if result.get("success", False) else 1


def _cmd_key(args: argparse.Namespace) -> int:
    """Encode a hex digest."""
    result = _run_skill("encode_key", {"digest": args.digest})
    _json_output(result)
    return 0 if result.get("success", False) else 1


def _cmd_skill(args: argparse.Namespace) -> int:
    """Call a single skill by name with JSON args."""
    if args.skill_name == "list":
        skills = {k: v["description"] for k, v in _get_skill_registry().items()}
        _json_output({"success": True, "skills": skills})
        return 0

    try:
        skill_args = json.loads(args.args) if args.args else {}
    except json.JSONDecodeError as e:
        _json_output({"success": False, "error": f"Invalid JSON args: {e}"})
        return 1

    result = _run_skill(args.skill_name, skill_args)
    _json_output(result)
    return 0 if result.get("success", False) else 1


def _cmd_batch(args: argparse.Namespace) -> int:
    """Run every ``{"skill": ..., "args": ...}`` entry of a JSON task file."""
    task_file = Path(args.task_file)
    if not task_file.exists():
        _json_output({"success": False, "error": f"Task file not found: {task_file}"})
        return 1

    try:
        tasks = json.loads(task_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        _json_output({"success": False, "error": f"Invalid task file JSON: {e}"})
        return 1
    if not isinstance(tasks, list):
        _json_output({"success": False, "error": "Task file must contain a JSON list"})
        return 1

    results = []
    has_failure = False
    for i, task_spec in enumerate(tasks, 1):
        if not isinstance(task_spec, dict):
            has_failure = True
            results.append({
                "task_index": i,
                "skill": "",
                "result": {"success": False, "error": "Task must be a JSON object"},
            })
            continue

        skill_name = task_spec.get("skill", "")
        try:
            result = _run_skill(skill_name, task_spec.get("args", {}))
        except Exception as exc:
            logger.exception("batch task %d (%s) failed", i, skill_name)
            result = {"success": False, "error": str(exc)}
        if not result.get("success", False):
            has_failure = True
        results.append({"task_index": i, "skill": skill_name, "result": result})

    _json_output({
        "success": not has_failure,
        "total": len(tasks),
        "results": results,
    })
    return 1 if has_failure else 0


# ---------------------------------------------------------------------------
# CLI setup
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser (exposed for testing)."""
    parser = argparse.ArgumentParser(
        prog="run_rinchi",
        description="RInChI decomposition and Base-26 key encoding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (messages go to stderr)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # -- decompose --
    decompose_p = subparsers.add_parser("decompose", help="Decompose a RInChI")
    decompose_p.add_argument("--rinchi", required=True, help="RInChI string")
    decompose_p.add_argument("--rauxinfo", default="", help="RAuxInfo string")
    decompose_p.add_argument(
        "--smiles", action="store_true", help="Add the reaction SMILES built with RDKit",
    )

    # -- key --
    key_p = subparsers.add_parser("key", help="Encode a hex digest as a Base-26 block")
    key_p.add_argument("--digest", required=True, help="Digest as hex string (>= 9 bytes)")

    # -- skill --
    skill_p = subparsers.add_parser(
        "skill",
        help="Call a single skill by name (use 'list' to see available skills)",
    )
    skill_p.add_argument("skill_name", help="Skill name or 'list'")
    skill_p.add_argument("--args", default=None, help="JSON string of skill arguments")

    # -- batch --
    batch_p = subparsers.add_parser("batch", help="Batch execution from a JSON task file")
    batch_p.add_argument("task_file", help="Path to JSON task file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Parameters
    ----------
    argv:
        Argument list to parse.  Defaults to ``sys.argv[1:]``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    handlers = {
        "decompose": _cmd_decompose,
        "key": _cmd_key,
        "skill": _cmd_skill,
        "batch": _cmd_batch,
    }

    handler = handlers.get(args.command)
    if handler is None:
        _json_output({"success": False, "error": f"Unknown command: {args.command}"})
        return 1

    try:
        return handler(args)
    except Exception as exc:
        _json_output({"success": False, "error": str(exc)})
        return 1


if __name__ == "__main__":
    sys.exit(main())
