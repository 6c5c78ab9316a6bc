"""Cell variants: code, markdown and raw.

Cells are frozen dataclasses tagged by their ``cell_type`` class attribute.
Constructors assign a fresh id from the given factory unless ``id`` is passed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple, Union

from .errors import NotebookFormatError, UnknownCellTypeError
from .frozen import freeze, thaw
from .ids import CellId, IdFactory, create_cell_id
from .media import MediaBundle, demultiline, remultiline, to_in_memory_bundle, to_on_disk_bundle
from .outputs import OUTPUT_TYPES, Output, output_from_json, output_to_json


def _set(obj: object, name: str, value: Any) -> None:
    object.__setattr__(obj, name, value)


@dataclass(frozen=True)
class CodeCell:
    cell_type: ClassVar[str] = "code"

    id: CellId
    source: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)
    execution_count: Optional[int] = None
    outputs: Tuple[Output, ...] = field(default_factory=tuple)

    def __post_init__(self):
        _set(self, "source", demultiline(self.source))
        _set(self, "metadata", freeze(self.metadata))
        _set(
            self,
            "outputs",
            tuple(o if isinstance(o, OUTPUT_TYPES) else output_from_json(o) for o in self.outputs),
        )


@dataclass(frozen=True)
class MarkdownCell:
    """Markdown cell. ``attachments`` maps a filename to its media bundle."""

    cell_type: ClassVar[str] = "markdown"

    id: CellId
    source: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)
    attachments: Optional[Mapping[str, MediaBundle]] = None

    def __post_init__(self):
        _set(self, "source", demultiline(self.source))
        _set(self, "metadata", freeze(self.metadata))
        if self.attachments is not None:
            _set(
                self,
                "attachments",
                MappingProxyType(
                    {name: to_in_memory_bundle(b) for name, b in self.attachments.items()}
                ),
            )


@dataclass(frozen=True)
class RawCell:
    cell_type: ClassVar[str] = "raw"

    id: CellId
    source: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        _set(self, "source", demultiline(self.source))
        _set(self, "metadata", freeze(self.metadata))


Cell = Union[CodeCell, MarkdownCell, RawCell]

CELL_TYPES = (CodeCell, MarkdownCell, RawCell)


def _with_id(fields: Dict[str, Any], id_factory: IdFactory) -> Dict[str, Any]:
    if fields.get("id") is None:
        fields["id"] = id_factory()
    return fields


def create_code_cell(*, id_factory: IdFactory = create_cell_id, **fields: Any) -> CodeCell:
    return CodeCell(**_with_id(fields, id_factory))


def create_markdown_cell(*, id_factory: IdFactory = create_cell_id, **fields: Any) -> MarkdownCell:
    return MarkdownCell(**_with_id(fields, id_factory))


def create_raw_cell(*, id_factory: IdFactory = create_cell_id, **fields: Any) -> RawCell:
    return RawCell(**_with_id(fields, id_factory))


# ---------- to disk ----------


def _code_cell_to_json(cell: CodeCell) -> Dict[str, Any]:
    return {
        "cell_type": "code",
        "metadata": thaw(cell.metadata),
        "source": remultiline(cell.source),
        "execution_count": cell.execution_count,
        "outputs": [output_to_json(o) for o in cell.outputs],
    }


def _markdown_cell_to_json(cell: MarkdownCell) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "cell_type": "markdown",
        "metadata": thaw(cell.metadata),
        "source": remultiline(cell.source),
    }
    if cell.attachments is not None:
        out["attachments"] = {
            name: to_on_disk_bundle(bundle) for name, bundle in cell.attachments.items()
        }
    return out


def _raw_cell_to_json(cell: RawCell) -> Dict[str, Any]:
    return {
        "cell_type": "raw",
        "metadata": thaw(cell.metadata),
        "source": remultiline(cell.source),
    }


_TO_JSON: Dict[str, Callable[[Any], Dict[str, Any]]] = {
    "code": _code_cell_to_json,
    "markdown": _markdown_cell_to_json,
    "raw": _raw_cell_to_json,
}


def cell_to_json(cell: Cell) -> Dict[str, Any]:
    """Convert a cell to its on-disk form, without the ``id`` field.

    Whether an id belongs on disk depends on the notebook's format version,
    so the notebook converter adds it.
    """
    cell_type = getattr(cell, "cell_type", None)
    writer = _TO_JSON.get(cell_type)  # type: ignore[arg-type]
    if writer is None:
        raise UnknownCellTypeError(cell_type)
    return writer(cell)


# ---------- from disk ----------


def _code_cell_from_json(d: Mapping[str, Any], cell_id: CellId) -> CodeCell:
    outputs = d.get("outputs") or []
    if not isinstance(outputs, list):
        raise NotebookFormatError("Code cell 'outputs' must be a list")
    return CodeCell(
        id=cell_id,
        source=demultiline(d.get("source", "")),
        metadata=d.get("metadata") or {},
        execution_count=d.get("execution_count"),
        outputs=tuple(output_from_json(o) for o in outputs),
    )


def _markdown_cell_from_json(d: Mapping[str, Any], cell_id: CellId) -> MarkdownCell:
    return MarkdownCell(
        id=cell_id,
        source=demultiline(d.get("source", "")),
        metadata=d.get("metadata") or {},
        attachments=d.get("attachments"),
    )


def _raw_cell_from_json(d: Mapping[str, Any], cell_id: CellId) -> RawCell:
    return RawCell(
        id=cell_id,
        source=demultiline(d.get("source", "")),
        metadata=d.get("metadata") or {},
    )


_FROM_JSON: Dict[str, Callable[[Mapping[str, Any], CellId], Cell]] = {
    "code": _code_cell_from_json,
    "markdown": _markdown_cell_from_json,
    "raw": _raw_cell_from_json,
}


def cell_from_json(d: Mapping[str, Any], cell_id: CellId) -> Cell:
    """Build a cell from its on-disk form, stored under ``cell_id``.

    Any ``id`` field on ``d`` is ignored; choosing the id is the notebook
    converter's job.
    """
    if not isinstance(d, Mapping):
        raise NotebookFormatError(f"Cell must be an object, got {type(d).__name__}")
    cell_type = d.get("cell_type")
    reader = _FROM_JSON.get(cell_type)  # type: ignore[arg-type]
    if reader is None:
        raise UnknownCellTypeError(cell_type)
    return reader(d, cell_id)
