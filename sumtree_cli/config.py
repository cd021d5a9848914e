"""
CLI Configuration

Locates the configuration file for the sumtree CLI and overlays
environment variables.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sumtree.config.runtime import RuntimeConfig


logger = logging.getLogger(__name__)


def default_config_paths() -> list[Path]:
    """Config file search order when --config is not given."""
    return [
        Path.cwd() / "sumtree.yaml",
        Path.cwd() / "sumtree.yml",
        Path.cwd() / "sumtree.json",
        Path.home() / ".config" / "sumtree" / "config.yaml",
    ]


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration

    Raises:
        FileNotFoundError: If config_path is given but missing
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_file(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = RuntimeConfig.from_file(default_path)
                break

    return config.with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file (YAML)."""
    return """# sumtree configuration
digest:
  # sha256 | sha3_256 | blake2b (all 32-byte digests)
  algorithm: sha256
  # width of packed sums in bytes (32 = uint256)
  sum_width: 32
logging:
  level: INFO
  file: null
# human | json
output_format: human
"""
