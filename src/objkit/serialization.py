"""JSON helpers: compact serialization and shape-aware deserialization."""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from typing import Any

logger = logging.getLogger("objkit.serialization")

__all__ = ["serialize", "deserialize"]

_COMPACT_SEPARATORS = (",", ":")


def _finite(value: Any) -> Any:
    """Return *value* with NaN and infinite floats replaced by None."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def _public_fields(obj: Any) -> dict[str, Any]:
    """Return the data attributes of *obj* that would be emitted as JSON.

    Raises TypeError for values that carry no attribute mapping, matching the
    error ``json`` itself raises for unsupported types.
    """
    if callable(obj):
        raise TypeError(
            f"Object of type {type(obj).__name__} is not JSON serializable"
        )
    if dataclasses.is_dataclass(obj):
        names = [f.name for f in dataclasses.fields(obj)]
        return _finite({n: getattr(obj, n) for n in names if not n.startswith("_")})
    if hasattr(obj, "__dict__"):
        return _finite({k: v for k, v in vars(obj).items() if not k.startswith("_")})
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any, *, indent: int | None = None) -> str:
    """Return the JSON text of *value*.

    Output is compact unless *indent* is given. Mapping keys keep their
    insertion order. Dataclass instances and plain objects are emitted as
    objects of their public data attributes. NaN and infinities become null.
    """
    separators = _COMPACT_SEPARATORS if indent is None else None
    return json.dumps(
        _finite(value),
        indent=indent,
        separators=separators,
        ensure_ascii=False,
        allow_nan=False,
        default=_public_fields,
    )


def deserialize(shape: Any, text: str) -> Any:
    """Parse *text* and give the result the behavior of *shape*.

    *shape* is a class, or an instance whose class is used. When the document
    is a JSON object, the result is an instance of that class built without
    calling its initializer; its attributes are exactly the keys of the
    object, so none of *shape*'s own data is carried over. Arrays and scalars
    have no attributes to carry and are returned as parsed.

    Raises json.JSONDecodeError for invalid JSON.
    """
    data = json.loads(text)
    cls = shape if isinstance(shape, type) else type(shape)
    if not isinstance(data, dict):
        return data

    obj = cls.__new__(cls)
    if hasattr(obj, "__dict__"):
        vars(obj).update(data)
    else:
        # __slots__ classes; object.__setattr__ also bypasses frozen checks
        for key, value in data.items():
            object.__setattr__(obj, key, value)
    logger.debug("Deserialized %d field(s) onto %s", len(data), cls.__qualname__)
    return obj
