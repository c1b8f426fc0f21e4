"""
Tests for skill wrappers and the run_rinchi CLI
"""

import json
import logging
import subprocess
import tempfile
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SCRIPT = ROOT / "scripts" / "run_rinchi.py"

# Add project root to path
sys.path.insert(0, str(ROOT))

from rinchi.common.status import LoggingStatusSink, Status
from rinchi.skills import DecomposeRInChISkill, EncodeKeySkill, SkillResult, string_arg


RINCHI = "RInChI=1.00.1S/CH4/h1H4<>H2O/h1H2/d+"


class TestDecomposeRInChISkill(unittest.TestCase):
    """Test the decomposition skill envelope"""

    def test_success(self):
        result = DecomposeRInChISkill().execute({"rinchi": RINCHI})
        self.assertTrue(result["success"])
        self.assertEqual(result["error"], "")
        self.assertEqual(result["data"]["direction"], "forward")
        self.assertEqual(len(result["data"]["components"]), 2)

    def test_invalid_rinchi(self):
        result = DecomposeRInChISkill().execute({"rinchi": "RInChI=garbage"})
        self.assertFalse(result["success"])
        self.assertIn("Cannot decompose invalid RInChI string", result["error"])
        self.assertEqual(result["data"]["status"], "error")

    def test_empty_rinchi(self):
        result = DecomposeRInChISkill().execute({"rinchi": "  "})
        self.assertFalse(result["success"])

    def test_bad_args(self):
        result = DecomposeRInChISkill().execute(42)
        self.assertFalse(result["success"])

    def test_include_smiles(self):
        result = DecomposeRInChISkill().execute({"rinchi": RINCHI, "include_smiles": True})
        self.assertTrue(result["success"])
        self.assertIn(">", result["data"]["reaction_smiles"])

    def test_non_string_rinchi(self):
        result = DecomposeRInChISkill().execute({"rinchi": 123})
        self.assertFalse(result["success"])
        self.assertIn("'rinchi' must be a string", result["error"])

    def test_non_string_rauxinfo(self):
        result = DecomposeRInChISkill().execute({"rinchi": RINCHI, "rauxinfo": 5})
        self.assertFalse(result["success"])
        self.assertIn("'rauxinfo'", result["error"])

    def test_missing_rinchi(self):
        result = DecomposeRInChISkill().execute({})
        self.assertFalse(result["success"])
        self.assertIn("Missing argument 'rinchi'", result["error"])

    def test_extra_rauxinfo_layer(self):
        result = DecomposeRInChISkill().execute({
            "rinchi": "RInChI=1.00.1S/A<>B<>C",
            "rauxinfo": "RAuxInfo=1.00.1/a<>b<>c<>d",
        })
        self.assertFalse(result["success"])
        self.assertEqual(result["data"]["messages"][0]["code"], "AUXINFO_LAYER_OVERFLOW")


class TestEncodeKeySkill(unittest.TestCase):
    """Test the key encoding skill envelope"""

    def test_hex_digest(self):
        result = EncodeKeySkill().execute({"digest": "00" * 9})
        self.assertTrue(result["success"])
        self.assertEqual(result["data"]["key"], "AAAAAAAAAAAAAA")

    def test_list_digest(self):
        result = EncodeKeySkill().execute({"digest": [255] * 9})
        self.assertEqual(result["data"]["key"], "ZZZZZZZZZZZZTR")

    def test_short_digest(self):
        result = EncodeKeySkill().execute({"digest": "00"})
        self.assertFalse(result["success"])

    def test_invalid_hex(self):
        result = EncodeKeySkill().execute({"digest": "zz"})
        self.assertFalse(result["success"])

    def test_missing_digest(self):
        self.assertFalse(EncodeKeySkill().execute({})["success"])

    def test_digest_of_wrong_type(self):
        result = EncodeKeySkill().execute({"digest": 12})
        self.assertFalse(result["success"])
        self.assertIn("hex string or a list", result["error"])

    def test_byte_out_of_range(self):
        self.assertFalse(EncodeKeySkill().execute({"digest": [256] * 9})["success"])


class TestSkillEnvelope(unittest.TestCase):
    """Test the shared result envelope and argument helper"""

    def test_failure_envelope(self):
        self.assertEqual(
            SkillResult.failure("bad").to_dict(),
            {"success": False, "data": {}, "error": "bad"},
        )

    def test_string_arg_default(self):
        self.assertEqual(string_arg({}, "rauxinfo", ""), "")
        self.assertEqual(string_arg({"rauxinfo": "x"}, "rauxinfo", ""), "x")


class TestLoggingStatusSink(unittest.TestCase):
    """Test forwarding of status messages to logging"""

    def test_error_logged(self):
        logger = logging.getLogger("rinchi.tests.sink")
        with self.assertLogs(logger, level="ERROR") as captured:
            LoggingStatusSink(logger).add_message("boom", Status.ERROR)
        self.assertIn("boom", captured.output[0])

    def test_warning_logged(self):
        logger = logging.getLogger("rinchi.tests.sink")
        with self.assertLogs(logger, level="WARNING") as captured:
            LoggingStatusSink(logger).add_message("careful", Status.WARNING)
        self.assertTrue(captured.output[0].startswith("WARNING"))


class TestRunRInChICli(unittest.TestCase):
    """Test the command line entry point"""

    def _run(self, args):
        return subprocess.run(
            [sys.executable, str(SCRIPT)] + args,
            cwd=str(ROOT),
            capture_output=True,
            text=True,
            check=False,
        )

    def test_decompose(self):
        proc = self._run(["decompose", "--rinchi", RINCHI])
        self.assertEqual(proc.returncode, 0, msg=proc.stdout + "\n" + proc.stderr)
        payload = json.loads(proc.stdout)
        self.assertTrue(payload["success"])
        self.assertEqual(payload["data"]["components"][0]["inchi"], "InChI=1S/CH4/h1H4")

    def test_decompose_invalid(self):
        proc = self._run(["decompose", "--rinchi", "nope"])
        self.assertEqual(proc.returncode, 1)
        self.assertFalse(json.loads(proc.stdout)["success"])

    def test_key(self):
        proc = self._run(["key", "--digest", "ff" * 9])
        self.assertEqual(proc.returncode, 0, msg=proc.stdout + "\n" + proc.stderr)
        self.assertEqual(json.loads(proc.stdout)["data"]["key"], "ZZZZZZZZZZZZTR")

    def test_skill_list(self):
        proc = self._run(["skill", "list"])
        skills = json.loads(proc.stdout)["skills"]
        self.assertIn("decompose_rinchi", skills)
        self.assertIn("encode_key", skills)

    def test_unknown_skill(self):
        proc = self._run(["skill", "does_not_exist"])
        self.assertEqual(proc.returncode, 1)

    def test_batch_keeps_results_of_good_tasks(self):
        tasks = [
            {"skill": "encode_key", "args": {"digest": "00" * 9}},
            {"skill": "decompose_rinchi", "args": {"rinchi": 123}},
            "not a task",
            {"skill": "decompose_rinchi", "args": {"rinchi": RINCHI}},
        ]
        with tempfile.TemporaryDirectory() as tmp:
            task_file = Path(tmp) / "tasks.json"
            task_file.write_text(json.dumps(tasks), encoding="utf-8")
            proc = self._run(["batch", str(task_file)])

        self.assertEqual(proc.returncode, 1)
        payload = json.loads(proc.stdout)
        self.assertFalse(payload["success"])
        self.assertEqual(payload["total"], 4)
        outcomes = [r["result"]["success"] for r in payload["results"]]
        self.assertEqual(outcomes, [True, False, False, True])
        self.assertEqual(payload["results"][0]["result"]["data"]["key"], "AAAAAAAAAAAAAA")


if __name__ == "__main__":
    unittest.main()
