"""Output variants of a code cell.

Each variant is a frozen dataclass tagged by its ``output_type`` class
attribute. Conversion in either direction dispatches on the tag and refuses
tags outside the closed set.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple, Union

from .errors import NotebookFormatError, UnknownOutputTypeError
from .frozen import freeze, thaw
from .media import MediaBundle, demultiline, to_in_memory_bundle, to_on_disk_bundle


def _set(obj: object, name: str, value: Any) -> None:
    object.__setattr__(obj, name, value)


@dataclass(frozen=True)
class ExecuteResult:
    output_type: ClassVar[str] = "execute_result"

    data: MediaBundle = field(default_factory=dict)
    metadata: Mapping[str, Any] = field(default_factory=dict)
    execution_count: Optional[int] = None

    def __post_init__(self):
        _set(self, "data", to_in_memory_bundle(self.data))
        _set(self, "metadata", freeze(self.metadata))


@dataclass(frozen=True)
class DisplayData:
    output_type: ClassVar[str] = "display_data"

    data: MediaBundle = field(default_factory=dict)
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        _set(self, "data", to_in_memory_bundle(self.data))
        _set(self, "metadata", freeze(self.metadata))


@dataclass(frozen=True)
class StreamOutput:
    """Console output. ``text`` is kept literally, never split into lines."""

    output_type: ClassVar[str] = "stream"

    name: str = "stdout"
    text: str = ""

    def __post_init__(self):
        _set(self, "text", demultiline(self.text))


@dataclass(frozen=True)
class ErrorOutput:
    output_type: ClassVar[str] = "error"

    ename: str = ""
    evalue: str = ""
    traceback: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        _set(self, "traceback", tuple(self.traceback))


Output = Union[ExecuteResult, DisplayData, StreamOutput, ErrorOutput]

OUTPUT_TYPES = (ExecuteResult, DisplayData, StreamOutput, ErrorOutput)


def make_execute_result(**fields: Any) -> ExecuteResult:
    return ExecuteResult(**fields)


def make_display_data(**fields: Any) -> DisplayData:
    return DisplayData(**fields)


def make_stream_output(**fields: Any) -> StreamOutput:
    return StreamOutput(**fields)


def make_error_output(**fields: Any) -> ErrorOutput:
    return ErrorOutput(**fields)


# ---------- to disk ----------


def _execute_result_to_json(output: ExecuteResult) -> Dict[str, Any]:
    return {
        "output_type": "execute_result",
        "execution_count": output.execution_count,
        "data": to_on_disk_bundle(output.data),
        "metadata": thaw(output.metadata),
    }


def _display_data_to_json(output: DisplayData) -> Dict[str, Any]:
    return {
        "output_type": "display_data",
        "data": to_on_disk_bundle(output.data),
        "metadata": thaw(output.metadata),
    }


def _stream_to_json(output: StreamOutput) -> Dict[str, Any]:
    return {"output_type": "stream", "name": output.name, "text": output.text}


def _error_to_json(output: ErrorOutput) -> Dict[str, Any]:
    return {
        "output_type": "error",
        "ename": output.ename,
        "evalue": output.evalue,
        "traceback": list(output.traceback),
    }


_TO_JSON: Dict[str, Callable[[Any], Dict[str, Any]]] = {
    "execute_result": _execute_result_to_json,
    "display_data": _display_data_to_json,
    "stream": _stream_to_json,
    "error": _error_to_json,
}


def output_to_json(output: Output) -> Dict[str, Any]:
    output_type = getattr(output, "output_type", None)
    writer = _TO_JSON.get(output_type)  # type: ignore[arg-type]
    if writer is None:
        raise UnknownOutputTypeError(output_type)
    return writer(output)


# ---------- from disk ----------


def _execute_result_from_json(d: Mapping[str, Any]) -> ExecuteResult:
    return ExecuteResult(
        data=d.get("data") or {},
        metadata=d.get("metadata") or {},
        execution_count=d.get("execution_count"),
    )


def _display_data_from_json(d: Mapping[str, Any]) -> DisplayData:
    return DisplayData(data=d.get("data") or {}, metadata=d.get("metadata") or {})


def _stream_from_json(d: Mapping[str, Any]) -> StreamOutput:
    return StreamOutput(name=d.get("name", "stdout"), text=demultiline(d.get("text", "")))


def _error_from_json(d: Mapping[str, Any]) -> ErrorOutput:
    return ErrorOutput(
        ename=d.get("ename", ""),
        evalue=d.get("evalue", ""),
        traceback=tuple(d.get("traceback") or ()),
    )


_FROM_JSON: Dict[str, Callable[[Mapping[str, Any]], Output]] = {
    "execute_result": _execute_result_from_json,
    "display_data": _display_data_from_json,
    "stream": _stream_from_json,
    "error": _error_from_json,
}


def output_from_json(d: Mapping[str, Any]) -> Output:
    if not isinstance(d, Mapping):
        raise NotebookFormatError(f"Output must be an object, got {type(d).__name__}")
    output_type = d.get("output_type")
    reader = _FROM_JSON.get(output_type)  # type: ignore[arg-type]
    if reader is None:
        raise UnknownOutputTypeError(output_type)
    return reader(d)
