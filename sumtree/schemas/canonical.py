"""
Schemas - Canonical Serialization
File: canonical.py

Purpose: One JSON form for roots, nodes, proofs and proof bundles, used by
the CLI and the HTTP API. Two equal objects always
produce byte-identical text.

Rules:
- bytes / bytearray -> "0x"-prefixed lowercase hex
- dataclasses (Node, SumRoot, SumProof) and pydantic models -> objects
- tuples -> arrays
- keys sorted, no whitespace, None-valued keys dropped
- ints written exactly at any size; floats are refused
"""

import dataclasses
import json
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .errors import CanonicalizationException

CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")

_PASSTHROUGH = (bool, int, str)


def _child_path(parent: str, key: Any) -> str:
    return f"{parent}.{key}" if parent else str(key)


def canonicalize_value(value: Any, path: str = "") -> Any:
    """
    Convert a value into plain JSON types following the rules above.

    Args:
        value: Object to convert.
        path: Dotted location of value inside the outer object, reported
            in errors (e.g. "bundle.node_sums[1]").

    Raises:
        CanonicalizationException: On a float or an unsupported type.
    """
    if isinstance(value, Enum):
        return canonicalize_value(value.value, path)

    if value is None or isinstance(value, _PASSTHROUGH):
        return value

    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()

    if isinstance(value, float):
        # Sums are exact integers
        raise CanonicalizationException(
            message=f"Float value encountered at '{path}': {value}",
            details={"path": path, "value": repr(value)},
        )

    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_none=True)
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}

    if isinstance(value, dict):
        out: dict[str, Any] = {}
        for key, item in value.items():
            if item is None:
                continue
            out[str(key)] = canonicalize_value(item, _child_path(path, key))
        return out

    if isinstance(value, (list, tuple)):
        return [canonicalize_value(item, f"{path}[{i}]") for i, item in enumerate(value)]

    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def dumps_canonical(obj: Any) -> str:
    """
    Serialize obj to its canonical JSON text.

    Example:
        >>> dumps_canonical({"sum": 10, "hash": b"\\x01"})
        '{"hash":"0x01","sum":10}'
    """
    plain = canonicalize_value(obj)
    try:
        return json.dumps(
            plain,
            sort_keys=True,
            separators=CANONICAL_JSON_SEPARATORS,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise CanonicalizationException(
            message=f"Failed to serialize to canonical JSON: {e}",
            details={"type": type(obj).__name__},
        ) from e
