"""
Runtime Configuration Module

Provides configuration loading and management for sum tree tooling.
"""

from .runtime import (
    DEFAULT_DIGEST_CONFIG,
    SUPPORTED_HASH_ALGORITHMS,
    DigestConfig,
    LoggingConfig,
    RuntimeConfig,
)

__all__ = [
    "DEFAULT_DIGEST_CONFIG",
    "SUPPORTED_HASH_ALGORITHMS",
    "DigestConfig",
    "LoggingConfig",
    "RuntimeConfig",
]
