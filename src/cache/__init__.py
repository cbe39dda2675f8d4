# src/cache/__init__.py - v1
"""Content-addressed response cache: fingerprint and storage backends."""
