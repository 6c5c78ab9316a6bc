"""Conversion between on-disk nbformat v4 dicts and :class:`Notebook`.

Cell ids entered the format in 4.5. On read, an id on disk is reused only
when the notebook is 4.5 or later; on write, ids are emitted only for 4.5 or
later, since older schemas reject the field.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from .cells import cell_from_json, cell_to_json
from .errors import NotebookFormatError, UnsupportedVersionError
from .frozen import thaw
from .ids import CellId, IdFactory, create_cell_id
from .model import Notebook

logger = logging.getLogger(__name__)

NBFORMAT = 4
CELL_ID_MINOR = 5


def has_cell_ids(nbformat: int, nbformat_minor: int) -> bool:
    return (nbformat, nbformat_minor) >= (NBFORMAT, CELL_ID_MINOR)


def read_notebook(data: Any, *, id_factory: IdFactory = create_cell_id) -> Notebook:
    """Build an immutable Notebook from an on-disk nbformat v4 dict.

    Raises NotebookFormatError if ``data`` is not an object with a ``cells``
    list. Nothing is returned on failure.
    """
    if not isinstance(data, Mapping):
        raise NotebookFormatError(f"Notebook must be an object, got {type(data).__name__}")
    cells_in = data.get("cells")
    if not isinstance(cells_in, list):
        raise NotebookFormatError("Notebook 'cells' must be a list")

    nbformat = data.get("nbformat", NBFORMAT)
    nbformat_minor = data.get("nbformat_minor", 0)
    if nbformat != NBFORMAT:
        raise UnsupportedVersionError(f"Unsupported nbformat version: {nbformat!r}")
    if not isinstance(nbformat_minor, int):
        raise NotebookFormatError(f"Invalid nbformat_minor: {nbformat_minor!r}")
    reuse_ids = nbformat_minor >= CELL_ID_MINOR

    order: List[CellId] = []
    cell_map: Dict[CellId, Any] = {}
    for index, jc in enumerate(cells_in):
        disk_id = jc.get("id") if reuse_ids and isinstance(jc, Mapping) else None
        if disk_id is not None and not isinstance(disk_id, str):
            logger.warning(f"Cell {index} has non-string id {disk_id!r}; generating a new one")
            disk_id = None
        elif disk_id is not None and disk_id in cell_map:
            logger.warning(f"Duplicate cell id {disk_id!r} at cell {index}; generating a new one")
            disk_id = None
        cell_id = disk_id if disk_id is not None else id_factory()
        if disk_id is None:
            logger.debug(f"Generated cell id {cell_id!r} for cell {index}")
        cell_map[cell_id] = cell_from_json(jc, cell_id)
        order.append(cell_id)

    return Notebook(
        cell_order=tuple(order),
        cell_map=cell_map,
        metadata=data.get("metadata") or {},
        nbformat=nbformat,
        nbformat_minor=nbformat_minor,
    )


def write_notebook(nb: Notebook) -> Dict[str, Any]:
    """Convert a Notebook to an on-disk nbformat v4 dict, cells in cell_order."""
    emit_ids = has_cell_ids(nb.nbformat, nb.nbformat_minor)
    if not emit_ids:
        logger.debug(f"Omitting cell ids for nbformat {nb.nbformat}.{nb.nbformat_minor}")
    cells = []
    for cell_id in nb.cell_order:
        jc = cell_to_json(nb.cell_map[cell_id])
        if emit_ids:
            jc["id"] = cell_id
        cells.append(jc)
    return {
        "cells": cells,
        "metadata": thaw(nb.metadata),
        "nbformat": nb.nbformat,
        "nbformat_minor": nb.nbformat_minor,
    }
