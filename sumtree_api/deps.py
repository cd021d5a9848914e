"""
API Dependencies

Resolves runtime configuration and digest parameters for requests.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from sumtree.config.runtime import DigestConfig, RuntimeConfig
from sumtree.schemas.errors import ConfigurationException


logger = logging.getLogger(__name__)


def load_runtime_config() -> RuntimeConfig:
    """Load RuntimeConfig from a config file, then overlay environment variables.

    Search order for config file:
      1. ./sumtree.yaml
      2. ./sumtree.json
      3. ~/.config/sumtree/config.yaml

    Environment variables ALWAYS override config file values.
    """
    search_paths = [
        Path.cwd() / "sumtree.yaml",
        Path.cwd() / "sumtree.json",
        Path.home() / ".config" / "sumtree" / "config.yaml",
    ]

    config: RuntimeConfig | None = None

    for path in search_paths:
        if path.exists():
            try:
                config = RuntimeConfig.from_file(path)
                logger.info(f"Loaded config from {path}")
                break
            except (OSError, ValueError, yaml.YAMLError, ConfigurationException) as e:
                logger.warning(f"Failed to parse {path}: {e}")

    if config is None:
        config = RuntimeConfig()

    return config.with_env_overrides()


def resolve_digest_config(hash_algorithm: str | None) -> DigestConfig:
    """Server digest config, with the per-request algorithm on top."""
    base = load_runtime_config().digest
    if hash_algorithm is None or hash_algorithm == base.algorithm:
        return base
    return DigestConfig(algorithm=hash_algorithm, sum_width=base.sum_width)
