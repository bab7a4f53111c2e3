"""
API package containing versioned routes and shared dependencies.

Each version subpackage (currently only ``v1``) exposes a top‑level
``router``; ``main.create_app`` mounts it under ``Settings.api_prefix``.
"""
