"""
Schemas - Leaf Documents
File: leaves.py

Purpose: Parse leaf (sum, data) pairs from JSON-shaped documents, as used
by the CLI input files and the HTTP request bodies.

Accepted layouts:
    {"sums": [1, 2], "data": ["0x00", "0x01"]}
    {"leaves": [{"sum": 1, "data": "0x00"}, ...]}
    [{"sum": 1, "data": "0x00"}, ...]

Sums may be integers, decimal strings, or 0x-prefixed hex strings
(large values survive JSON tooling as strings). Data is always a 0x hex
string; in YAML it must be quoted ('0x00'), since YAML reads a bare 0x00
as an integer.
Lengths are not checked here: a sums/data mismatch is reported by the
tree builder.
"""

from typing import Any, Sequence

from sumtree.crypto.hashing import from_hex
from sumtree.schemas.errors import InvalidLeafDataException


def parse_sum(raw: Any, leaf_index: int | None = None) -> int:
    """Parse a leaf sum from an int, decimal string or 0x hex string."""
    if isinstance(raw, bool):
        raise InvalidLeafDataException("Sum must be an integer, got bool", leaf_index=leaf_index)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        try:
            if text.lower().startswith("0x"):
                return int(text, 16)
            return int(text, 10)
        except ValueError as e:
            raise InvalidLeafDataException(
                f"Cannot parse sum {raw!r}", leaf_index=leaf_index
            ) from e
    raise InvalidLeafDataException(
        f"Sum must be an integer or string, got {type(raw).__name__}",
        leaf_index=leaf_index,
    )


def parse_data(raw: Any, leaf_index: int | None = None) -> bytes:
    """Parse leaf data from a 0x hex string."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        # Unquoted 0x00 in YAML loads as an int
        raise InvalidLeafDataException(
            f"Leaf data must be a 0x hex string, got int {raw}; "
            f"quote hex values in YAML files (data: '0x00')",
            leaf_index=leaf_index,
        )
    if not isinstance(raw, str):
        raise InvalidLeafDataException(
            f"Leaf data must be a 0x hex string, got {type(raw).__name__}",
            leaf_index=leaf_index,
        )
    try:
        return from_hex(raw)
    except InvalidLeafDataException as e:
        raise InvalidLeafDataException(e.message, leaf_index=leaf_index) from e


def parse_leaves(
    raw_sums: Sequence[Any],
    raw_data: Sequence[Any],
) -> tuple[list[int], list[bytes]]:
    """Parse parallel raw sums and raw data lists."""
    sums = [parse_sum(s, i) for i, s in enumerate(raw_sums)]
    data = [parse_data(d, i) for i, d in enumerate(raw_data)]
    return sums, data


def leaves_from_document(doc: Any) -> tuple[list[int], list[bytes]]:
    """Parse leaves from any of the accepted document layouts."""
    if isinstance(doc, dict) and "sums" in doc:
        raw_sums = doc.get("sums") or []
        raw_data = doc.get("data") or []
        if not isinstance(raw_sums, list) or not isinstance(raw_data, list):
            raise InvalidLeafDataException("'sums' and 'data' must be lists")
        return parse_leaves(raw_sums, raw_data)

    if isinstance(doc, dict) and "leaves" in doc:
        doc = doc["leaves"]

    if not isinstance(doc, list):
        raise InvalidLeafDataException(
            "Leaf document must be a list of leaves or contain 'sums'/'data' or 'leaves'"
        )

    raw_sums: list[Any] = []
    raw_data: list[Any] = []
    for i, leaf in enumerate(doc):
        if not isinstance(leaf, dict) or "sum" not in leaf or "data" not in leaf:
            raise InvalidLeafDataException(
                "Each leaf must be an object with 'sum' and 'data'", leaf_index=i
            )
        raw_sums.append(leaf["sum"])
        raw_data.append(leaf["data"])
    return parse_leaves(raw_sums, raw_data)
