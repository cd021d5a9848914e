"""
sumtree CLI

Command-line interface for Merkle sum trees.

Usage:
    python -m sumtree_cli root --leaves leaves.json
    python -m sumtree_cli tree --leaf 1:0x00 --leaf 2:0x01
    python -m sumtree_cli proof 1 --leaves leaves.json
    python -m sumtree_cli bundle 1 --leaves leaves.json
"""
