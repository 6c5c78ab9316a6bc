import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from nbdoc.config import NbdocConfig, load_config


class TestConfig(unittest.TestCase):
    def _write(self, td, text):
        p = Path(td) / "cfg.yaml"
        p.write_text(text, encoding="utf-8")
        return str(p)

    def test_load_values(self):
        with tempfile.TemporaryDirectory() as td:
            cfg = load_config(self._write(td, "indent: 2\nvalidate: true\ndefault_nbformat_minor: 5\n"))
        self.assertEqual(cfg, NbdocConfig(indent=2, validate=True, default_nbformat_minor=5))

    def test_missing_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            with self.assertLogs("nbdoc.config", level="ERROR"):
                cfg = load_config(str(Path(td) / "absent.yaml"))
        self.assertEqual(cfg, NbdocConfig())

    def test_bad_yaml_gives_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            path = self._write(td, "indent: [1, 2\n")
            with self.assertLogs("nbdoc.config", level="ERROR"):
                cfg = load_config(path)
        self.assertEqual(cfg, NbdocConfig())

    def test_non_mapping_gives_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            path = self._write(td, "- a\n- b\n")
            with self.assertLogs("nbdoc.config", level="ERROR"):
                cfg = load_config(path)
        self.assertEqual(cfg, NbdocConfig())

    def test_unknown_keys_ignored(self):
        with tempfile.TemporaryDirectory() as td:
            path = self._write(td, "indent: 4\ncolor: blue\n")
            with self.assertLogs("nbdoc.config", level="WARNING"):
                cfg = load_config(path)
        self.assertEqual(cfg.indent, 4)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
