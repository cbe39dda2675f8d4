# src/config/__init__.py - v1
"""Typed configuration."""
