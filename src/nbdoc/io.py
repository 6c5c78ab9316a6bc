from __future__ import annotations

import copy
import json
import logging
from typing import Any, Dict

import nbformat

from .errors import NotebookFormatError, NotebookValidationError
from .ids import IdFactory, create_cell_id
from .model import Notebook
from .v4 import read_notebook, write_notebook

logger = logging.getLogger(__name__)


def validate_dict(d: Dict[str, Any]) -> None:
    """Check an on-disk notebook dict against nbformat's JSON schema.

    ``d`` is not modified; nbformat may repair what it validates, so it sees
    a copy.
    """
    try:
        nbformat.validate(nbformat.from_dict(copy.deepcopy(d)))
    except nbformat.ValidationError as e:
        message = getattr(e, "message", e)
        raise NotebookValidationError(f"Notebook failed schema validation: {message}") from e


def parse_text(
    text: str, *, id_factory: IdFactory = create_cell_id, validate: bool = False
) -> Notebook:
    # nbformat.reads would fill in missing 4.5 ids itself; decode directly so
    # the id rules stay ours.
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise NotebookFormatError(f"Notebook is not valid JSON: {e}") from e
    if validate:
        if not isinstance(data, dict):
            raise NotebookFormatError(f"Notebook must be an object, got {type(data).__name__}")
        validate_dict(data)
    return read_notebook(data, id_factory=id_factory)


def parse_file(path: str, **kwargs: Any) -> Notebook:
    with open(path, "r", encoding="utf-8") as f:
        return parse_text(f.read(), **kwargs)


def serialize(nb: Notebook, *, indent: int = 1, validate: bool = False) -> str:
    """Render a notebook the way nbformat lays out .ipynb files."""
    d = write_notebook(nb)
    if validate:
        validate_dict(d)
    s = json.dumps(d, indent=indent, sort_keys=True, ensure_ascii=False)
    if not s.endswith("\n"):
        s += "\n"
    return s


def write_file(nb: Notebook, path: str, **kwargs: Any) -> None:
    text = serialize(nb, **kwargs)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.debug(f"Wrote {len(nb)} cells to {path}")
