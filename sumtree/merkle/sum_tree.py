"""
Merkle Sum Tree Implementation
Deterministic sum tree construction, root computation and proof extraction.

This module provides:
- Domain-separated leaf and node digests
- Index-addressed node list construction (leaves first, then each level)
- Root-only computation that keeps just the current level
- Leaf-to-root proof extraction by walking parent indices

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = H(0x00 || uint256(sum) || data)
2. Node hashing: node = H(0x01 || uint256(lsum) || lhash || uint256(rsum) || rhash)
3. Node sum: exact integer sum of both children, never wrapped
4. Odd levels: the trailing node is carried forward unchanged into the
   last slot of the next level. It is not duplicated and not rehashed.
5. Single leaf: root = leaf, proof is empty

Determinism Notes:
- No randomness or non-deterministic ordering
- Leaf ordering is defined by the caller and never sorted
- The node list is not modified once construct_tree returns
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from sumtree.config.runtime import DEFAULT_DIGEST_CONFIG, DigestConfig
from sumtree.crypto.hashing import encode_uint, hash_bytes
from sumtree.schemas.errors import (
    EmptyInputException,
    IndexOutOfBoundsException,
    InvalidLeafDataException,
    LengthMismatchException,
)


logger = logging.getLogger(__name__)


# Domain separation tags
LEAF_PREFIX: bytes = b"\x00"
NODE_PREFIX: bytes = b"\x01"


@dataclass(frozen=True)
class Node:
    """
    One vertex of a sum tree, addressed by its position in the node list.

    Attributes:
        index: Position in the flattened node list
        hash: Leaf digest or node digest
        sum: Leaf value, or the exact sum of both children
        left: Index of the left child, None for leaves
        right: Index of the right child, None for leaves
        parent: Index of the parent, None for the root
        data: Raw leaf payload, empty for internal nodes
    """
    index: int
    hash: bytes
    sum: int
    left: Optional[int] = None
    right: Optional[int] = None
    parent: Optional[int] = None
    data: bytes = b""

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def attach_parent(self, parent_index: int) -> None:
        """
        Record the parent index once the parent has been created.

        This is the only mutation a node ever sees: a child exists before
        its parent, so the link is set after the fact, exactly once.

        Raises:
            ValueError: If the node already has a parent
        """
        if self.parent is not None:
            raise ValueError(
                f"Node {self.index} already has parent {self.parent}, "
                f"cannot attach {parent_index}"
            )
        object.__setattr__(self, "parent", parent_index)


@dataclass(frozen=True)
class SumRoot:
    """Root commitment of a sum tree: digest plus total sum."""
    hash: bytes
    sum: int


@dataclass(frozen=True)
class SumProof:
    """
    Inclusion proof for a single leaf.

    Attributes:
        side_nodes: Sibling digests from the leaf's sibling up to the
            sibling of the root's child (bottom-up)
        node_sums: Sibling sums, same order as side_nodes
    """
    side_nodes: tuple[bytes, ...] = ()
    node_sums: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Validate proof structure."""
        if len(self.side_nodes) != len(self.node_sums):
            raise ValueError(
                f"Proof has {len(self.side_nodes)} side nodes "
                f"but {len(self.node_sums)} sums"
            )

    def __len__(self) -> int:
        return len(self.side_nodes)


def leaf_digest(
    value: int,
    data: bytes,
    config: DigestConfig | None = None,
) -> bytes:
    """
    Compute the digest of a leaf.

    leaf = H(0x00 || uint(value) || data)

    Args:
        value: Leaf sum
        data: Raw leaf payload
        config: Digest parameters, defaults to SHA-256 with 32-byte sums

    Returns:
        32-byte digest

    Raises:
        SumOutOfRangeException: If value does not fit the sum field
    """
    cfg = config or DEFAULT_DIGEST_CONFIG
    return hash_bytes(
        LEAF_PREFIX + encode_uint(value, cfg.sum_width) + bytes(data),
        cfg.algorithm,
    )


def node_digest(
    left_value: int,
    left: bytes,
    right_value: int,
    right: bytes,
    config: DigestConfig | None = None,
) -> bytes:
    """
    Compute the digest of an internal node from its two children.

    node = H(0x01 || uint(left_value) || left || uint(right_value) || right)

    Order matters: node_digest(a, x, b, y) != node_digest(b, y, a, x).

    Args:
        left_value: Left child's sum
        left: Left child's digest
        right_value: Right child's sum
        right: Right child's digest
        config: Digest parameters, defaults to SHA-256 with 32-byte sums

    Returns:
        32-byte digest
    """
    cfg = config or DEFAULT_DIGEST_CONFIG
    return hash_bytes(
        NODE_PREFIX
        + encode_uint(left_value, cfg.sum_width)
        + left
        + encode_uint(right_value, cfg.sum_width)
        + right,
        cfg.algorithm,
    )


def _validate_leaves(sums: Sequence[int], data: Sequence[bytes]) -> None:
    if len(sums) != len(data):
        raise LengthMismatchException(len(sums), len(data))
    if len(sums) == 0:
        raise EmptyInputException()
    for i, payload in enumerate(data):
        if not isinstance(payload, (bytes, bytearray)):
            raise InvalidLeafDataException(
                f"Leaf data must be bytes, got {type(payload).__name__}",
                leaf_index=i,
            )


def construct_tree(
    sums: Sequence[int],
    data: Sequence[bytes],
    config: DigestConfig | None = None,
) -> list[Node]:
    """
    Build the full node list of a sum tree.

    Algorithm:
    1. Create one leaf per (sum, data) pair at indices 0..n-1
    2. While the current level has more than one node:
       - Pair nodes (0,1), (2,3), ... and append one parent per pair
       - If the level is odd, carry its last node into the next level
    3. The last remaining node is the root

    Example: 3 leaves [a, b, c]
        Level 0: [a, b, c]      -> ab = parent(a, b), c carried
        Level 1: [ab, c]        -> root = parent(ab, c)
        Node list: [a, b, c, ab, root]

    Args:
        sums: Leaf sums, in leaf order
        data: Leaf payloads, same length as sums
        config: Digest parameters

    Returns:
        2n - 1 nodes; leaves first in input order, root last

    Raises:
        LengthMismatchException: If sums and data differ in length
        EmptyInputException: If there are no leaves
    """
    _validate_leaves(sums, data)

    nodes: list[Node] = [
        Node(
            index=i,
            hash=leaf_digest(value, payload, config),
            sum=value,
            data=bytes(payload),
        )
        for i, (value, payload) in enumerate(zip(sums, data))
    ]
    logger.debug(f"Constructing sum tree over {len(nodes)} leaves")

    current_level: list[Node] = list(nodes)
    height = 0

    while len(current_level) > 1:
        next_level: list[Node] = []
        for i in range(0, len(current_level) - 1, 2):
            left = current_level[i]
            right = current_level[i + 1]
            parent = Node(
                index=len(nodes),
                hash=node_digest(left.sum, left.hash, right.sum, right.hash, config),
                sum=left.sum + right.sum,
                left=left.index,
                right=right.index,
            )
            left.attach_parent(parent.index)
            right.attach_parent(parent.index)
            nodes.append(parent)
            next_level.append(parent)

        if len(current_level) % 2 == 1:
            carried = current_level[-1]
            logger.debug(f"Level {height}: carrying node {carried.index} forward")
            next_level.append(carried)

        current_level = next_level
        height += 1

    logger.debug(
        f"Sum tree built: {len(nodes)} nodes, height {height}, "
        f"root sum {current_level[0].sum}"
    )
    return nodes


def calc_root(
    sums: Sequence[int],
    data: Sequence[bytes],
    config: DigestConfig | None = None,
) -> SumRoot:
    """
    Compute only the root commitment of a sum tree.

    Uses the same level reduction as construct_tree but keeps just the
    (hash, sum) pairs of the level being reduced. The result always equals
    the root of construct_tree for the same input.

    Raises:
        LengthMismatchException: If sums and data differ in length
        EmptyInputException: If there are no leaves
    """
    _validate_leaves(sums, data)

    current_level: list[tuple[bytes, int]] = [
        (leaf_digest(value, payload, config), value)
        for value, payload in zip(sums, data)
    ]

    while len(current_level) > 1:
        next_level = [
            (node_digest(lsum, lhash, rsum, rhash, config), lsum + rsum)
            for (lhash, lsum), (rhash, rsum) in zip(current_level[0::2], current_level[1::2])
        ]
        if len(current_level) % 2 == 1:
            next_level.append(current_level[-1])
        current_level = next_level

    root_hash, root_sum = current_level[0]
    return SumRoot(hash=root_hash, sum=root_sum)


def leaf_count(nodes: Sequence[Node]) -> int:
    """Number of leaves in a node list built by construct_tree."""
    return (len(nodes) + 1) // 2


def tree_root(nodes: Sequence[Node]) -> SumRoot:
    """Return the root commitment of a constructed node list."""
    if len(nodes) == 0:
        raise EmptyInputException("Cannot take the root of an empty node list")
    root = nodes[-1]
    return SumRoot(hash=root.hash, sum=root.sum)


def get_proof(nodes: Sequence[Node], index: int) -> SumProof:
    """
    Extract the inclusion proof for the leaf at the given index.

    Walks parent indices from the leaf to the root. At each step the
    child of the current parent that is not on the path contributes its
    hash and sum. Carried-forward levels add nothing, since the node's
    parent index already skips them.

    Args:
        nodes: Node list from construct_tree
        index: 0-based leaf index

    Returns:
        SumProof with siblings ordered bottom-up (empty for a single leaf)

    Raises:
        EmptyInputException: If nodes is empty
        IndexOutOfBoundsException: If index is not a leaf index
    """
    if len(nodes) == 0:
        raise EmptyInputException("Cannot extract a proof from an empty node list")

    count = leaf_count(nodes)
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < count:
        raise IndexOutOfBoundsException(index, count)

    side_nodes: list[bytes] = []
    node_sums: list[int] = []

    prev = index
    cur = nodes[index].parent
    while cur is not None:
        parent = nodes[cur]
        if parent.left == prev:
            sibling = nodes[parent.right]
        else:
            sibling = nodes[parent.left]
        side_nodes.append(sibling.hash)
        node_sums.append(sibling.sum)
        prev, cur = cur, parent.parent

    return SumProof(side_nodes=tuple(side_nodes), node_sums=tuple(node_sums))


def compute_tree_depth(num_leaves: int) -> int:
    """
    Compute the number of levels of a sum tree with the given leaf count.

    Depth counts levels from leaves to root inclusive. Each level halves,
    rounding up for the carried node: 1 leaf -> 1, 2 -> 2, 3 -> 3, 4 -> 3.

    Returns:
        Tree depth (0 for empty tree)
    """
    if num_leaves <= 0:
        return 0

    depth = 1
    n = num_leaves
    while n > 1:
        n = (n + 1) // 2
        depth += 1

    return depth


def max_proof_length(num_leaves: int) -> int:
    """Upper bound on proof length, ceil(log2(n)); 0 for n <= 1."""
    return max(compute_tree_depth(num_leaves) - 1, 0)


__all__ = [
    "LEAF_PREFIX",
    "NODE_PREFIX",
    "Node",
    "SumRoot",
    "SumProof",
    "leaf_digest",
    "node_digest",
    "construct_tree",
    "calc_root",
    "leaf_count",
    "tree_root",
    "get_proof",
    "compute_tree_depth",
    "max_proof_length",
]
