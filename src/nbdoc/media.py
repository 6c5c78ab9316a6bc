"""Media bundles and multiline strings.

On disk, text in notebooks may be stored as a list of line fragments so that
line-oriented diff tools (git, GitHub) produce readable diffs. In memory,
text is always one flattened string.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Union

from .frozen import freeze, thaw

MultilineString = Union[str, Sequence[str]]
MediaBundle = Mapping[str, Any]
OnDiskMediaBundle = Dict[str, Any]

_JSON_MIMETYPE_RE = re.compile(r"^application/(.+\+)?json$")


def demultiline(value: MultilineString) -> str:
    """Join on-disk line fragments into a single string."""
    if isinstance(value, str):
        return value
    return "".join(value)


def remultiline(value: MultilineString) -> List[str]:
    """Split a string into fragments, each ending with its newline.

    Splits only after "\\n"; a "\\r\\n" pair stays together and a lone "\\r"
    never starts a new fragment. An unterminated remainder becomes the last
    fragment. Already-split input is returned as is.
    """
    if isinstance(value, list):
        return value
    if not isinstance(value, str):
        return list(value)
    lines = value.split("\n")
    fragments = [line + "\n" for line in lines[:-1]]
    if lines[-1]:
        fragments.append(lines[-1])
    return fragments


def is_json_mimetype(mimetype: str) -> bool:
    return bool(_JSON_MIMETYPE_RE.match(mimetype))


def _is_text(mimetype: str, value: Any) -> bool:
    return not is_json_mimetype(mimetype) and isinstance(value, (str, list, tuple))


def to_in_memory_bundle(bundle: Mapping[str, Any]) -> MediaBundle:
    out: Dict[str, Any] = {}
    for mimetype, value in bundle.items():
        if _is_text(mimetype, value):
            out[mimetype] = demultiline(value)
        else:
            out[mimetype] = freeze(value)
    return MappingProxyType(out)


def to_on_disk_bundle(bundle: Mapping[str, Any]) -> OnDiskMediaBundle:
    out: OnDiskMediaBundle = {}
    for mimetype, value in bundle.items():
        if _is_text(mimetype, value):
            out[mimetype] = remultiline(value)
        else:
            out[mimetype] = thaw(value)
    return out
