"""
Runtime Configuration

Central configuration for digest parameters, logging and output format.
"""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from sumtree.schemas.errors import ConfigurationException

load_dotenv()


ENV_PREFIX = "SUMTREE_"

# hashlib constructors that yield a 32-byte digest
SUPPORTED_HASH_ALGORITHMS: tuple[str, ...] = ("sha256", "sha3_256", "blake2b")

OUTPUT_FORMATS: tuple[str, ...] = ("human", "json")


@dataclass(frozen=True)
class DigestConfig:
    """
    Configuration for leaf and node digests.

    The defaults (SHA-256, 32-byte sums) are the encoding external
    verifiers expect: sums are packed as big-endian uint256.
    """
    algorithm: str = "sha256"
    sum_width: int = 32

    def __post_init__(self) -> None:
        if self.algorithm not in SUPPORTED_HASH_ALGORITHMS:
            raise ConfigurationException(
                f"Unsupported hash algorithm: {self.algorithm!r} "
                f"(expected one of {', '.join(SUPPORTED_HASH_ALGORITHMS)})",
                field_path="digest.algorithm",
            )
        if isinstance(self.sum_width, bool) or not isinstance(self.sum_width, int) or self.sum_width <= 0:
            raise ConfigurationException(
                f"Sum width must be a positive number of bytes, got {self.sum_width!r}",
                field_path="digest.sum_width",
            )


DEFAULT_DIGEST_CONFIG = DigestConfig()


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML or JSON file
    - Programmatic construction
    """
    digest: DigestConfig = field(default_factory=DigestConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output_format: str = "human"
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationException(
                f"Unsupported output format: {self.output_format!r}",
                field_path="output_format",
            )

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SUMTREE_HASH_ALGORITHM: hashlib algorithm name
        - SUMTREE_SUM_WIDTH: sum field width in bytes
        - SUMTREE_LOG_LEVEL: log level
        - SUMTREE_LOG_FILE: optional log file path
        - SUMTREE_OUTPUT_FORMAT: human or json
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
            overrides.setdefault("digest", {})["algorithm"] = os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM")
        if os.getenv(f"{ENV_PREFIX}SUM_WIDTH"):
            raw = os.getenv(f"{ENV_PREFIX}SUM_WIDTH", "")
            try:
                overrides.setdefault("digest", {})["sum_width"] = int(raw)
            except ValueError as e:
                raise ConfigurationException(
                    f"{ENV_PREFIX}SUM_WIDTH must be an integer, got {raw!r}",
                    field_path="digest.sum_width",
                ) from e

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
            overrides["output_format"] = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_json(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a file, choosing the parser by suffix."""
        path = Path(path)
        if path.suffix.lower() == ".json":
            return cls.from_json(path)
        return cls.from_yaml(path)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        if not isinstance(data, dict):
            raise ConfigurationException(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )
        digest_data = data.get("digest") or {}
        logging_data = data.get("logging") or {}

        try:
            digest = DigestConfig(**digest_data)
            log_config = LoggingConfig(**logging_data)
        except TypeError as e:
            raise ConfigurationException(f"Invalid configuration: {e}") from e

        return cls(
            digest=digest,
            logging=log_config,
            output_format=data.get("output_format", "human"),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "digest" in overrides:
            merged = {
                "algorithm": new_config.digest.algorithm,
                "sum_width": new_config.digest.sum_width,
                **overrides["digest"],
            }
            new_config.digest = DigestConfig(**merged)

        if "logging" in overrides:
            for key, value in overrides["logging"].items():
                setattr(new_config.logging, key, value)

        if "output_format" in overrides:
            new_config.output_format = overrides["output_format"]
            new_config.__post_init__()

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "digest": {
                "algorithm": self.digest.algorithm,
                "sum_width": self.digest.sum_width,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "output_format": self.output_format,
            "extra": self.extra,
        }
