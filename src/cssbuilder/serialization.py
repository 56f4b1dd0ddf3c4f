"""JSON helpers: compact serialization and prototype-style restoration."""

from __future__ import annotations

import dataclasses
import json
import math
from typing import Any, TypeVar

from cssbuilder.errors import SerializationError

T = TypeVar("T")


def _plain(value: Any) -> Any:
    """Dataclasses become dicts; NaN and infinities become None."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _plain(dataclasses.asdict(value))
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def to_json(value: Any) -> str:
    """Return the compact JSON representation of *value*.

    ``[1, 2, 3]`` becomes ``'[1,2,3]'``; mapping keys keep insertion order and
    non-ASCII text is written as-is. NaN and infinities are written as
    ``null``, so the output is always valid JSON.
    """
    return json.dumps(
        _plain(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* and return it as an instance of *cls*.

    The instance is created without calling ``__init__``; the parsed fields
    are attached directly so the methods of *cls* operate on them::

        from_json(Rectangle, '{"width":10,"height":20}').area()  # 200
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    obj = cls.__new__(cls)
    vars(obj).update(data)
    return obj
