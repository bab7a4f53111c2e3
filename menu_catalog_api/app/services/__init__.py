"""
Service layer abstraction.

``menu_validator`` decides whether a payload is acceptable and
``menu_service.CatalogStore`` applies accepted changes to the
in‑memory menu.  API handlers never touch the collection directly.
"""
