"""
sumtree HTTP API

FastAPI front-end for computing sum tree roots, node lists and proofs.

Usage:
    uvicorn sumtree_api.app:app --reload
"""
