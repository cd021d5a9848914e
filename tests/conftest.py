"""
Pytest configuration and shared fixtures for sumtree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_sum_tree = importlib.import_module("fixtures.sum_tree_fixtures")

make_leaves = _sum_tree.make_leaves
make_four_leaf_tree = _sum_tree.make_four_leaf_tree
make_three_leaf_tree = _sum_tree.make_three_leaf_tree


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def four_leaf_tree():
    """Node list for sums [1, 2, 3, 4]."""
    return make_four_leaf_tree()


@pytest.fixture
def three_leaf_tree():
    """Node list for sums [1, 2, 3]."""
    return make_three_leaf_tree()


@pytest.fixture
def leaves_seven():
    """Seven leaves, sum i and data bytes(i)."""
    return make_leaves(7)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path):
    """Keep SUMTREE_* env vars and config files in the cwd out of tests."""
    for name in (
        "SUMTREE_HASH_ALGORITHM",
        "SUMTREE_SUM_WIDTH",
        "SUMTREE_LOG_LEVEL",
        "SUMTREE_LOG_FILE",
        "SUMTREE_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
