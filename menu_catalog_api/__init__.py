"""
Top‑level package for the Menu Catalog API.

The HTTP service lives in ``app``; ``client`` provides a small
``requests`` based client for talking to a running instance.
"""

__all__ = []
