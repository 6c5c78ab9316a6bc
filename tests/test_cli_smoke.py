import io
import json
import shutil
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from nbdoc.cli import main

EXAMPLE = Path(__file__).resolve().parents[1] / "examples" / "minimal.ipynb"


class TestCLISmoke(unittest.TestCase):
    def _run(self, argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            rc = main(argv)
        return rc, buf.getvalue()

    def test_cli_ids_smoke(self):
        rc, out = self._run(["ids", str(EXAMPLE)])
        self.assertEqual(rc, 0)
        ids = [line.split("\t")[0] for line in out.strip().splitlines()]
        self.assertEqual(ids, ["intro", "compute", "notes"])

    def test_cli_lint_smoke(self):
        rc, out = self._run(["lint", str(EXAMPLE)])
        self.assertEqual(rc, 0)
        self.assertIn("OK", out)

    def test_cli_fmt_output(self):
        with tempfile.TemporaryDirectory() as td:
            src = Path(td) / "nb.ipynb"
            dst = Path(td) / "out.ipynb"
            shutil.copy(EXAMPLE, src)
            rc, _ = self._run(["fmt", str(src), "--minor", "4", "-o", str(dst)])
            self.assertEqual(rc, 0)
            data = json.loads(dst.read_text(encoding="utf-8"))
            self.assertEqual(data["nbformat_minor"], 4)

    def test_cli_reports_format_errors(self):
        with tempfile.TemporaryDirectory() as td:
            bad = Path(td) / "bad.ipynb"
            bad.write_text('{"cells": {}}', encoding="utf-8")
            rc, out = self._run(["ids", str(bad)])
        self.assertEqual(rc, 1)
        self.assertIn("ERROR", out)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
