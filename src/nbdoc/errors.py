from __future__ import annotations


class NbdocError(Exception):
    """Base class for errors raised by nbdoc."""


class NotebookFormatError(NbdocError, ValueError):
    """The on-disk notebook does not have the expected shape."""


class UnsupportedVersionError(NotebookFormatError):
    pass


class NotebookValidationError(NotebookFormatError):
    """Raised when nbformat's JSON schema rejects a notebook."""


class UnknownCellTypeError(NbdocError, ValueError):
    def __init__(self, cell_type: object):
        super().__init__(f"Cell type unknown at runtime: {cell_type!r}")
        self.cell_type = cell_type


class UnknownOutputTypeError(NbdocError, ValueError):
    def __init__(self, output_type: object):
        super().__init__(f"Output type unknown at runtime: {output_type!r}")
        self.output_type = output_type


class NotebookInvariantError(NbdocError, ValueError):
    """cell_order and cell_map disagree, or an id would be duplicated."""


class CellNotFoundError(NbdocError, KeyError):
    def __init__(self, cell_id: str):
        super().__init__(cell_id)
        self.cell_id = cell_id

    def __str__(self) -> str:
        return f"No cell with id {self.cell_id!r}"
