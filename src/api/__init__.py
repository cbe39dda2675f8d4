# src/api/__init__.py - v1
"""HTTP surface (FastAPI)."""
