"""nbdoc – immutable Jupyter notebook documents.

Read nbformat v4 JSON into frozen Notebook values and write them back.
"""

__all__ = [
    "Notebook",
    "CodeCell",
    "MarkdownCell",
    "RawCell",
    "create_code_cell",
    "create_markdown_cell",
    "create_raw_cell",
    "create_cell_id",
    "read_notebook",
    "write_notebook",
    "parse_text",
    "parse_file",
    "serialize",
]

__version__ = "0.1.0"

from .cells import CodeCell, MarkdownCell, RawCell  # noqa: E402
from .cells import create_code_cell, create_markdown_cell, create_raw_cell  # noqa: E402
from .ids import create_cell_id  # noqa: E402
from .io import parse_file, parse_text, serialize  # noqa: E402
from .model import Notebook  # noqa: E402
from .v4 import read_notebook, write_notebook  # noqa: E402
