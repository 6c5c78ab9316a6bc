import json
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from nbdoc.cells import create_code_cell, create_markdown_cell
from nbdoc.errors import NotebookFormatError, NotebookValidationError
from nbdoc.io import parse_file, parse_text, serialize, write_file
from nbdoc.model import make_notebook
from nbdoc.outputs import make_stream_output

EXAMPLE = Path(__file__).resolve().parents[1] / "examples" / "minimal.ipynb"


class TestParseSerialize(unittest.TestCase):
    def test_parse_example(self):
        nb = parse_file(str(EXAMPLE))
        self.assertEqual(nb.cell_order, ("intro", "compute", "notes"))
        self.assertEqual(nb.get_cell("intro").source, "# Minimal\nA tiny notebook.")
        compute = nb.get_cell("compute")
        self.assertEqual(compute.execution_count, 1)
        self.assertEqual(compute.outputs[0].text, "hello\n")
        self.assertEqual(compute.outputs[1].data["application/json"]["a"], (1, 2))
        self.assertEqual(compute.metadata["tags"], ("demo",))

    def test_roundtrip_example(self):
        nb1 = parse_file(str(EXAMPLE))
        nb2 = parse_text(serialize(nb1))
        self.assertEqual(nb1, nb2)

    def test_serialize_layout(self):
        nb = make_notebook(cells=[create_code_cell(id="a", source="é")], nbformat_minor=5)
        text = serialize(nb)
        self.assertTrue(text.endswith("\n"))
        self.assertIn('"é"', text)
        self.assertTrue(text.startswith('{\n "cells": ['))
        data = json.loads(text)
        self.assertEqual(list(data), sorted(data))

    def test_invalid_json(self):
        with self.assertRaises(NotebookFormatError):
            parse_text("{not json")

    def test_write_file(self):
        nb = make_notebook(cells=[create_markdown_cell(id="m", source="hi")])
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "out.ipynb"
            write_file(nb, str(p))
            self.assertEqual(parse_file(str(p)), nb)


class TestValidation(unittest.TestCase):
    def test_written_notebooks_validate(self):
        cells = [
            create_code_cell(
                id="c",
                source="print(1)",
                outputs=[make_stream_output(text="1\n")],
            ),
            create_markdown_cell(id="m", source="# t"),
        ]
        for minor in (4, 5):
            with self.subTest(minor=minor):
                nb = make_notebook(cells=cells, nbformat_minor=minor)
                text = serialize(nb, validate=True)
                parse_text(text, validate=True)

    def test_validation_failure_is_wrapped(self):
        bad = {
            "cells": [{"cell_type": "code", "source": "", "metadata": {}}],
            "metadata": {},
            "nbformat": 4,
            "nbformat_minor": 4,
        }
        with self.assertRaises(NotebookValidationError):
            parse_text(json.dumps(bad), validate=True)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
