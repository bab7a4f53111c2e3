"""Shared FastAPI dependencies."""

from fastapi import Depends, Request

from menu_catalog_api.app.services.menu_service import CatalogStore


def get_catalog_store(request: Request) -> CatalogStore:
    """Return the catalog owned by the running application."""
    return request.app.state.catalog


def existing_item_id(item_id: int, store: CatalogStore = Depends(get_catalog_store)) -> int:
    """Resolve the ``item_id`` path parameter, raising not-found early.

    Dependencies are solved before the request body is validated, so an
    unknown id is reported as 404 even when the body is also invalid.
    """
    store.get_item(item_id)
    return item_id
