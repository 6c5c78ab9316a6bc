from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple

from .cells import Cell
from .errors import CellNotFoundError, NotebookInvariantError
from .frozen import freeze
from .ids import CellId


@dataclass(frozen=True)
class Notebook:
    """An immutable notebook document.

    cell_order: ids in display/execution order, no duplicates.
    cell_map: id -> Cell; its keys are exactly the ids in cell_order.
    metadata: top-level notebook metadata, frozen.
    nbformat, nbformat_minor: on-disk format version the document targets.

    Edits go through the module-level functions below, which return new
    notebooks that share the unchanged Cell objects.
    """

    cell_order: Tuple[CellId, ...] = ()
    cell_map: Mapping[CellId, Cell] = field(default_factory=dict)
    metadata: Mapping[str, Any] = field(default_factory=dict)
    nbformat: int = 4
    nbformat_minor: int = 5

    def __post_init__(self):
        order = tuple(self.cell_order)
        # own copy of the caller's mapping
        cell_map = dict(self.cell_map)
        if len(set(order)) != len(order):
            raise NotebookInvariantError("Duplicate cell id in cell_order")
        if set(order) != set(cell_map):
            raise NotebookInvariantError("cell_order and cell_map keys differ")
        object.__setattr__(self, "cell_order", order)
        object.__setattr__(self, "cell_map", MappingProxyType(cell_map))
        object.__setattr__(self, "metadata", freeze(self.metadata))

    @property
    def version(self) -> Tuple[int, int]:
        return (self.nbformat, self.nbformat_minor)

    def __len__(self) -> int:
        return len(self.cell_order)

    def __contains__(self, cell_id: object) -> bool:
        return cell_id in self.cell_map

    def get_cell(self, cell_id: CellId) -> Cell:
        try:
            return self.cell_map[cell_id]
        except KeyError:
            raise CellNotFoundError(cell_id) from None

    def cells(self) -> Iterator[Tuple[CellId, Cell]]:
        for cell_id in self.cell_order:
            yield cell_id, self.cell_map[cell_id]


def make_notebook(
    *,
    cells: Iterable[Cell] = (),
    metadata: Optional[Mapping[str, Any]] = None,
    nbformat: int = 4,
    nbformat_minor: int = 5,
) -> Notebook:
    """Build a notebook from cells, each keyed by its own id."""
    cells = list(cells)
    return Notebook(
        cell_order=tuple(c.id for c in cells),
        cell_map={c.id: c for c in cells},
        metadata=metadata or {},
        nbformat=nbformat,
        nbformat_minor=nbformat_minor,
    )


def _require(nb: Notebook, cell_id: CellId) -> int:
    if cell_id not in nb.cell_map:
        raise CellNotFoundError(cell_id)
    return nb.cell_order.index(cell_id)


def _with_cells(nb: Notebook, order: Tuple[CellId, ...], cell_map: dict) -> Notebook:
    return replace(nb, cell_order=order, cell_map=cell_map)


def insert_cell_at(nb: Notebook, index: int, cell: Cell) -> Notebook:
    if cell.id in nb.cell_map:
        raise NotebookInvariantError(f"Cell id already present: {cell.id!r}")
    order = list(nb.cell_order)
    order.insert(index, cell.id)
    cell_map = dict(nb.cell_map)
    cell_map[cell.id] = cell
    return _with_cells(nb, tuple(order), cell_map)


def append_cell(nb: Notebook, cell: Cell) -> Notebook:
    return insert_cell_at(nb, len(nb.cell_order), cell)


def insert_cell_after(nb: Notebook, after_id: CellId, cell: Cell) -> Notebook:
    return insert_cell_at(nb, _require(nb, after_id) + 1, cell)


def remove_cell(nb: Notebook, cell_id: CellId) -> Notebook:
    _require(nb, cell_id)
    cell_map = dict(nb.cell_map)
    del cell_map[cell_id]
    return _with_cells(nb, tuple(i for i in nb.cell_order if i != cell_id), cell_map)


def replace_cell(nb: Notebook, cell_id: CellId, cell: Cell) -> Notebook:
    """Store ``cell`` under ``cell_id``, keeping its position."""
    _require(nb, cell_id)
    cell_map = dict(nb.cell_map)
    cell_map[cell_id] = cell
    return _with_cells(nb, nb.cell_order, cell_map)


def move_cell(nb: Notebook, cell_id: CellId, index: int) -> Notebook:
    _require(nb, cell_id)
    order = [i for i in nb.cell_order if i != cell_id]
    order.insert(index, cell_id)
    return replace(nb, cell_order=tuple(order))
