"""
CLI Proof Commands

Extract the inclusion proof for one leaf, or the full verifier bundle
(root, leaf, proof, position, leaf count).

Usage:
    sumtree proof 2 --leaves leaves.json [--json]
    sumtree bundle 2 --leaves leaves.json [--json]
"""

from __future__ import annotations

import logging
from argparse import Namespace

from sumtree.crypto.hashing import to_hex
from sumtree.merkle.sum_proofs import SumProofBundle
from sumtree.merkle.sum_tree import construct_tree, get_proof
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


def proof_cmd(args: Namespace) -> int:
    """
    Execute the proof command.

    Returns:
        Exit code
    """
    output_json = wants_json(args)
    try:
        sums, data = load_inputs(args)
        nodes = construct_tree(sums, data, digest_config(args))
        proof = get_proof(nodes, args.index)
    except (SumTreeException, FileNotFoundError) as e:
        return report_error(e, output_json)

    logger.info(f"Extracted proof of length {len(proof)} for leaf {args.index}")

    if output_json:
        print_json({
            "leaf_index": args.index,
            "side_nodes": list(proof.side_nodes),
            "node_sums": list(proof.node_sums),
        })
    else:
        print(f"leaf_index: {args.index}")
        print(f"length: {len(proof)}")
        for level, (side, value) in enumerate(zip(proof.side_nodes, proof.node_sums)):
            print(f"  {level}: sum={value} hash={to_hex(side)}")

    return EXIT_SUCCESS


def bundle_cmd(args: Namespace) -> int:
    """
    Execute the bundle command.

    The bundle is always printed as JSON: indented by default, the compact
    canonical form with --json.

    Returns:
        Exit code
    """
    output_json = wants_json(args)
    try:
        sums, data = load_inputs(args)
        nodes = construct_tree(sums, data, digest_config(args))
        bundle = SumProofBundle.from_tree(nodes, args.index)
    except (SumTreeException, FileNotFoundError) as e:
        return report_error(e, output_json)

    if output_json:
        print(bundle.to_canonical_json())
    else:
        print_json(bundle)
    return EXIT_SUCCESS
