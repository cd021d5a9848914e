"""
CLI Root Command

Compute the root commitment (hash and sum) of a set of leaves.

Usage:
    sumtree root --leaves leaves.json [--json]
    sumtree root --leaf 1:0x00 --leaf 2:0x01
"""

from __future__ import annotations

import logging
from argparse import Namespace

from sumtree.crypto.hashing import to_hex
from sumtree.merkle.sum_tree import calc_root
from sumtree.schemas.errors import SumTreeException
from sumtree_cli.commands.common import (
    EXIT_SUCCESS,
    digest_config,
    load_inputs,
    print_json,
    report_error,
    wants_json,
)


logger = logging.getLogger(__name__)


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

    Returns:
        Exit code
    """
    output_json = wants_json(args)
    try:
        sums, data = load_inputs(args)
        root = calc_root(sums, data, digest_config(args))
    except (SumTreeException, FileNotFoundError) as e:
        return report_error(e, output_json)

    logger.info(f"Computed root over {len(sums)} leaves")

    if output_json:
        print_json({
            "root_hash": root.hash,
            "root_sum": root.sum,
            "leaf_count": len(sums),
        })
    else:
        print(f"root_hash: {to_hex(root.hash)}")
        print(f"root_sum: {root.sum}")
        print(f"leaf_count: {len(sums)}")

    return EXIT_SUCCESS
