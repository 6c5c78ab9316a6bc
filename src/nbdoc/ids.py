from __future__ import annotations

import itertools
import re
import uuid
from typing import Callable

CellId = str
IdFactory = Callable[[], CellId]

# nbformat 4.5 cell id schema
_CELL_ID_RE = re.compile(r"^[a-zA-Z0-9-_]+$")
MAX_CELL_ID_LENGTH = 64


def create_cell_id() -> CellId:
    return str(uuid.uuid4())


def counter_id_factory(prefix: str = "cell") -> IdFactory:
    """Return a deterministic id factory yielding <prefix>-1, <prefix>-2, ...

    Useful wherever reproducible ids matter more than global uniqueness.
    """
    counter = itertools.count(1)

    def _next_id() -> CellId:
        return f"{prefix}-{next(counter)}"

    return _next_id


def is_valid_cell_id(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return 0 < len(value) <= MAX_CELL_ID_LENGTH and bool(_CELL_ID_RE.match(value))
