"""Deeply immutable JSON values.

JSON objects become read-only mappings and arrays become tuples; scalars are
already immutable. ``thaw`` turns a frozen value back into plain JSON.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


def freeze(value: Any) -> Any:
    if isinstance(value, MappingProxyType):
        if all(_is_frozen(v) for v in value.values()):
            return value
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(v) for v in value]
    return value


def _is_frozen(value: Any) -> bool:
    if isinstance(value, MappingProxyType):
        return all(_is_frozen(v) for v in value.values())
    if isinstance(value, tuple):
        return all(_is_frozen(v) for v in value)
    return not isinstance(value, (dict, list, Mapping))
