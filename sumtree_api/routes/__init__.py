"""API route handlers."""

from sumtree_api.routes import health, tree

__all__ = ["health", "tree"]
