"""JSON bridge: canonical record serialization and constructor-driven decoding.

Records are encoded compactly, in their own field order.  Decoding hands
the decoded values to a target class' constructor, either positionally
(the default, relying on JSON field order matching parameter order) or by
keyword when ``by_name=True``.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

from objkit.codec.errors import ConstructionError, ParseError, SerializationError

__all__ = ["serialize", "deserialize"]

log = logging.getLogger(__name__)

_SEPARATORS = (",", ":")

# bool is checked before int/float since it is a subclass of int.
_JSON_KINDS: list[tuple[type | tuple[type, ...], str]] = [
    (dict, "object"),
    (list, "array"),
    (str, "string"),
    (bool, "boolean"),
    ((int, float), "number"),
]


def _json_kind(value: Any) -> str:
    for types, name in _JSON_KINDS:
        if isinstance(value, types):
            return name
    return "null"


def _encode_record(value: Any) -> dict[str, Any]:
    """``json.dumps`` fallback for values that are not JSON-native."""
    if isinstance(value, type):
        raise TypeError(f"Class {value.__name__} is not JSON serializable")
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    attrs = getattr(value, "__dict__", None)
    if attrs is None:
        raise TypeError(
            f"Object of type {type(value).__name__} is not JSON serializable"
        )
    return {name: attr for name, attr in attrs.items() if not callable(attr)}


def serialize(record: Any) -> str:
    """Return the canonical JSON text for *record*.

    No indentation and no key sorting: fields appear in the order the
    record itself enumerates them.
    """
    try:
        return json.dumps(
            record,
            default=_encode_record,
            separators=_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc


def _constructor_of(shape: Any) -> type:
    return shape if isinstance(shape, type) else type(shape)


def deserialize(shape: Any, text: str | bytes, by_name: bool = False) -> Any:
    """Rebuild a record of *shape* from JSON *text*.

    *shape* is a class, or an instance whose class is used.  In positional
    mode the values of a JSON object are passed in document order; field
    names are not compared with parameter names.  A top-level array is
    passed item by item.  With ``by_name=True`` the object's keys become
    keyword arguments.

    Raises:
        ParseError: *text* is not well-formed JSON, or is not text at all.
        ConstructionError: the decoded document cannot supply arguments, or
            the constructor rejected them.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Malformed JSON: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc
    except (UnicodeDecodeError, TypeError) as exc:
        raise ParseError(f"Unreadable JSON text: {exc}") from exc

    constructor = _constructor_of(shape)
    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    if isinstance(data, dict):
        if by_name:
            kwargs = data
        else:
            args = list(data.values())
    elif isinstance(data, list) and not by_name:
        args = data
    else:
        raise ConstructionError(
            f"Cannot build {constructor.__name__} from a top-level JSON "
            f"{_json_kind(data)}",
            shape=constructor,
        )

    log.debug(
        "Building %s from %d positional and %d keyword value(s)",
        constructor.__name__,
        len(args),
        len(kwargs),
    )
    try:
        return constructor(*args, **kwargs)
    except (TypeError, ValueError) as exc:
        raise ConstructionError(
            f"Cannot build {constructor.__name__}: {exc}",
            shape=constructor,
            arguments=tuple(args),
            keywords=dict(kwargs),
        ) from exc
