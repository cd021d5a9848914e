"""
Shared helpers for CLI commands.
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from sumtree.config.runtime import DigestConfig, RuntimeConfig
from sumtree.schemas.canonical import canonicalize_value
from sumtree.schemas.errors import SumTreeException
from sumtree_cli.inputs import resolve_leaves


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def wants_json(args: Namespace) -> bool:
    """JSON output if --json was passed or the config asks for it."""
    if getattr(args, "json", False):
        return True
    config: RuntimeConfig | None = getattr(args, "cli_config", None)
    return config is not None and config.output_format == "json"


def digest_config(args: Namespace) -> DigestConfig:
    """Digest parameters from config, with --hash-algorithm on top."""
    config: RuntimeConfig | None = getattr(args, "cli_config", None)
    base = config.digest if config is not None else DigestConfig()
    algorithm = getattr(args, "hash_algorithm", None)
    if algorithm and algorithm != base.algorithm:
        return DigestConfig(algorithm=algorithm, sum_width=base.sum_width)
    return base


def load_inputs(args: Namespace) -> tuple[list[int], list[bytes]]:
    """Resolve leaves from --leaves and --leaf arguments."""
    leaves_path = Path(args.leaves) if getattr(args, "leaves", None) else None
    return resolve_leaves(leaves_path, getattr(args, "leaf", None))


def print_json(payload: Any) -> None:
    """Print a payload as indented JSON (bytes as 0x hex)."""
    print(json.dumps(canonicalize_value(payload), indent=2, sort_keys=True))


def report_error(exc: Exception, output_json: bool) -> int:
    """Print an error and return the runtime error exit code."""
    if output_json and isinstance(exc, SumTreeException):
        print(exc.to_error_model().model_dump_json(indent=2), file=sys.stderr)
    else:
        print(f"Error: {exc}", file=sys.stderr)
    return EXIT_RUNTIME_ERROR
