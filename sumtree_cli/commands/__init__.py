"""
CLI command modules.
"""

from sumtree_cli.commands import root, tree, proof

__all__ = ["root", "tree", "proof"]
