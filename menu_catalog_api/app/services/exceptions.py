"""
Catalog-level exceptions.

Every failure is scoped to a single request and leaves the collection
untouched.  ``main.create_app`` registers a handler that turns these
into JSON responses; rejected request bodies surface as FastAPI's
``RequestValidationError`` instead.
"""


class CatalogError(Exception):
    """Base class for all catalog errors."""


class MenuItemNotFoundError(CatalogError):
    """No entry in the catalog has the requested id."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"menu item {item_id} not found")
        self.item_id = item_id
