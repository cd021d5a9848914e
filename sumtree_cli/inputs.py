"""
CLI Leaf Input Loading

Reads leaf (sum, data) pairs from JSON/YAML files or --leaf arguments.
Document layouts are described in sumtree.schemas.leaves.

YAML data values must be quoted:

    leaves:
      - {sum: 1, data: '0x00'}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

import yaml

from sumtree.schemas.errors import InvalidLeafDataException
from sumtree.schemas.leaves import leaves_from_document, parse_data, parse_sum


logger = logging.getLogger(__name__)


def parse_leaf_arg(raw: str) -> tuple[int, bytes]:
    """
    Parse a --leaf argument of the form SUM:0xHEX.

    Example:
        >>> parse_leaf_arg("5:0xdead")
        (5, b'\\xde\\xad')
    """
    value, sep, payload = raw.partition(":")
    if not sep:
        raise InvalidLeafDataException(f"Leaf must be SUM:0xHEX, got {raw!r}")
    return parse_sum(value), parse_data(payload)


def load_leaves_file(path: Path) -> tuple[list[int], list[bytes]]:
    """Load leaves from a JSON (.json) or YAML (anything else) file."""
    if not path.exists():
        raise FileNotFoundError(f"Leaves file not found: {path}")

    with open(path) as f:
        if path.suffix.lower() == ".json":
            doc = json.load(f)
        else:
            doc = yaml.safe_load(f)

    sums, data = leaves_from_document(doc)
    logger.info(f"Loaded {len(sums)} sums and {len(data)} data items from {path}")
    return sums, data


def resolve_leaves(
    leaves_path: Path | None,
    leaf_args: Sequence[str] | None,
) -> tuple[list[int], list[bytes]]:
    """Collect leaves from a file followed by any --leaf arguments."""
    sums: list[int] = []
    data: list[bytes] = []

    if leaves_path is not None:
        sums, data = load_leaves_file(leaves_path)

    for raw in leaf_args or []:
        value, payload = parse_leaf_arg(raw)
        sums.append(value)
        data.append(payload)

    return sums, data
