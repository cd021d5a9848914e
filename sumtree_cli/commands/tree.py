"""
CLI Tree Command

Print the full node list of a sum tree: leaves first, root last.

Usage:
    sumtree tree --leaves leaves.yaml [--json]
"""

from __future__ import annotations

from argparse import Namespace

from sumtree.crypto.hashing import to_hex
from sumtree.merkle.sum_tree import Node, construct_tree
from sumtree.schemas.errors import SumTreeException
from sumtree_cli.commands.common import (
    EXIT_SUCCESS,
    digest_config,
    load_inputs,
    print_json,
    report_error,
    wants_json,
)


def _format_ref(ref: int | None) -> str:
    return "-" if ref is None else str(ref)


def format_node(node: Node) -> str:
    """One human-readable line per node."""
    kind = "leaf" if node.is_leaf else "node"
    line = (
        f"[{node.index}] {kind} sum={node.sum} hash={to_hex(node.hash)} "
        f"left={_format_ref(node.left)} right={_format_ref(node.right)} "
        f"parent={_format_ref(node.parent)}"
    )
    if node.is_leaf:
        line += f" data={to_hex(node.data)}"
    return line


def tree_cmd(args: Namespace) -> int:
    """
    Execute the tree command.

    Returns:
        Exit code
    """
    output_json = wants_json(args)
    try:
        sums, data = load_inputs(args)
        nodes = construct_tree(sums, data, digest_config(args))
    except (SumTreeException, FileNotFoundError) as e:
        return report_error(e, output_json)

    if output_json:
        print_json({"leaf_count": len(sums), "nodes": nodes})
    else:
        for node in nodes:
            print(format_node(node))

    return EXIT_SUCCESS
