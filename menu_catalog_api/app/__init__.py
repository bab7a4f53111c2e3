"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, error handlers),
``schemas`` (response models), ``services`` (validation and the
in‑memory catalog) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
