from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Tuple

from .ids import is_valid_cell_id
from .v4 import CELL_ID_MINOR

_CELL_TYPES = {"code", "markdown", "raw"}
_OUTPUT_TYPES = {"execute_result", "display_data", "stream", "error"}


@dataclass
class LintIssue:
    level: str  # "ERROR" | "WARN"
    message: str


def lint_notebook(data: Any) -> Tuple[List[LintIssue], List[LintIssue]]:
    """Check an on-disk notebook dict for problems that affect reading it."""
    errors: List[LintIssue] = []
    warns: List[LintIssue] = []

    if not isinstance(data, Mapping) or not isinstance(data.get("cells"), list):
        errors.append(LintIssue("ERROR", "Notebook must be an object with a 'cells' list"))
        return errors, warns
    if data.get("nbformat", 4) != 4:
        errors.append(LintIssue("ERROR", f"Unsupported nbformat version: {data.get('nbformat')!r}"))
    minor = data.get("nbformat_minor", 0)
    with_ids = isinstance(minor, int) and minor >= CELL_ID_MINOR

    seen = set()
    for i, jc in enumerate(data["cells"]):
        if not isinstance(jc, Mapping):
            errors.append(LintIssue("ERROR", f"Cell {i} is not an object"))
            continue
        ctype = jc.get("cell_type")
        if ctype not in _CELL_TYPES:
            errors.append(LintIssue("ERROR", f"Cell {i} has unknown cell_type: {ctype!r}"))
        if ctype == "code":
            for j, out in enumerate(jc.get("outputs") or []):
                otype = out.get("output_type") if isinstance(out, Mapping) else None
                if otype not in _OUTPUT_TYPES:
                    errors.append(
                        LintIssue("ERROR", f"Cell {i} output {j} has unknown output_type: {otype!r}")
                    )

        cid = jc.get("id")
        if not with_ids:
            if cid is not None:
                warns.append(
                    LintIssue("WARN", f"Cell {i} has an id but nbformat_minor {minor} < 5; it will be dropped")
                )
            continue
        if cid is None:
            warns.append(LintIssue("WARN", f"Cell {i} missing id; one will be generated"))
            continue
        if not is_valid_cell_id(cid):
            errors.append(LintIssue("ERROR", f"Cell {i} has invalid id: {cid!r}"))
        if cid in seen:
            errors.append(LintIssue("ERROR", f"Duplicate cell id: {cid}"))
        seen.add(cid)

    return errors, warns
