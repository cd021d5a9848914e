"""
FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn sumtree_api.app:app --reload

    # Or run directly
    python -m sumtree_api.app
"""

import logging

from fastapi import FastAPI

from sumtree import __version__
from sumtree.schemas.errors import SumTreeException
from sumtree_api.deps import load_runtime_config
from sumtree_api.errors import (
    generic_error_handler,
    sumtree_error_handler,
)
from sumtree_api.routes import health, tree


def _resolve_log_level() -> int:
    """Resolve log level from SUMTREE_LOG_LEVEL or the config file, defaulting to INFO."""
    level = load_runtime_config().logging.level
    return getattr(logging, (level or "INFO").upper(), logging.INFO)


logging.basicConfig(
    level=_resolve_log_level(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="sumtree API",
        description="""
HTTP API for Merkle sum trees.

## Endpoints

- **POST /root** - Root hash and sum
- **POST /tree** - Full node list (leaves first, root last)
- **POST /proof** - Sibling path for one leaf
- **POST /bundle** - Root, leaf, proof and leaf count for an external verifier
- **GET /health** - Health check

Leaf data is 0x-prefixed hex; sums are integers (or strings for very
large values).
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Register exception handlers
    app.add_exception_handler(SumTreeException, sumtree_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(tree.router)

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
