from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .ids import IdFactory, create_cell_id
from .io import parse_text, serialize

logger = logging.getLogger(__name__)


def format_text(
    text: str,
    *,
    nbformat_minor: Optional[int] = None,
    id_factory: IdFactory = create_cell_id,
    indent: int = 1,
    validate: bool = False,
) -> str:
    """Re-serialize notebook text in canonical, diff-friendly form.

    Text fields are split into line fragments and keys are sorted. If
    ``nbformat_minor`` is given the notebook is retargeted to that version:
    moving to 4.5+ writes cell ids, moving below drops them.
    """
    nb = parse_text(text, id_factory=id_factory, validate=validate)
    if nbformat_minor is not None and nbformat_minor != nb.nbformat_minor:
        logger.debug(f"Retargeting notebook from 4.{nb.nbformat_minor} to 4.{nbformat_minor}")
        nb = replace(nb, nbformat_minor=nbformat_minor)
    return serialize(nb, indent=indent, validate=validate)
