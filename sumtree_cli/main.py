"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m sumtree_cli root --leaves leaves.json [--json]
    python -m sumtree_cli tree --leaf 1:0x00 --leaf 2:0x01
    python -m sumtree_cli proof <index> --leaves leaves.yaml [--json]
    python -m sumtree_cli bundle <index> --leaves leaves.yaml
    python -m sumtree_cli config --init

Environment Variables:
    SUMTREE_HASH_ALGORITHM      Digest algorithm (default: sha256)
    SUMTREE_SUM_WIDTH           Packed sum width in bytes (default: 32)
    SUMTREE_LOG_LEVEL           Log level (default: INFO)
    SUMTREE_LOG_FILE            Optional log file
    SUMTREE_OUTPUT_FORMAT       human or json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from sumtree import __version__
from sumtree.config.runtime import SUPPORTED_HASH_ALGORITHMS
from sumtree_cli.commands import proof, root, tree
from sumtree_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS
from sumtree_cli.config import get_default_config_template, load_config


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _add_leaf_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every command that builds a tree."""
    parser.add_argument(
        "--leaves", "-f",
        type=str,
        default=None,
        help="JSON or YAML file with leaves ({'sums': [...], 'data': [...]} or a list of {sum, data}); quote hex data in YAML ('0x00')",
    )
    parser.add_argument(
        "--leaf",
        action="append",
        default=None,
        metavar="SUM:0xHEX",
        help="Add a leaf (repeatable, appended after --leaves)",
    )
    parser.add_argument(
        "--hash-algorithm",
        type=str,
        choices=list(SUPPORTED_HASH_ALGORITHMS),
        default=None,
        help="Digest algorithm (overrides config)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on unexpected errors",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="sumtree",
        description="Merkle sum tree CLI - compute roots, dump trees, and extract proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./sumtree.yaml, ./sumtree.json or ~/.config/sumtree/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Compute the root hash and sum",
        description="Compute only the root commitment of the tree.",
    )
    _add_leaf_arguments(root_parser)
    root_parser.set_defaults(func=root.root_cmd)

    # --- tree command ---
    tree_parser = subparsers.add_parser(
        "tree",
        help="Print every node of the tree",
        description="Build the full node list: leaves in input order, then each level, root last.",
    )
    _add_leaf_arguments(tree_parser)
    tree_parser.set_defaults(func=tree.tree_cmd)

    # --- proof command ---
    proof_parser = subparsers.add_parser(
        "proof",
        help="Extract the inclusion proof for a leaf",
        description="Print sibling hashes and sums from the leaf up to the root.",
    )
    proof_parser.add_argument("index", type=int, help="0-based leaf index")
    _add_leaf_arguments(proof_parser)
    proof_parser.set_defaults(func=proof.proof_cmd)

    # --- bundle command ---
    bundle_parser = subparsers.add_parser(
        "bundle",
        help="Print the verifier input bundle for a leaf",
        description="Root hash/sum, leaf data/sum, proof, leaf index and leaf count as JSON.",
    )
    bundle_parser.add_argument("index", type=int, help="0-based leaf index")
    _add_leaf_arguments(bundle_parser)
    bundle_parser.set_defaults(func=proof.bundle_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="sumtree.yaml",
        help="Path for config file (default: sumtree.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (SUMTREE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: sumtree config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
