"""
Menu endpoints for API v1.

These routes expose a CRUD API over the menu catalog.  Request bodies
are parsed into ``MenuItemCreate``/``MenuItemUpdate`` before the store
is touched, so a rejected request never changes the catalog.  Missing
ids raise ``MenuItemNotFoundError`` from the store; both that and a
rejected body are turned into responses by the handlers registered in
``core.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from menu_catalog_api.app.api.deps import existing_item_id, get_catalog_store
from menu_catalog_api.app.schemas.menu import (
    MENU_CATEGORIES,
    DeleteResponse,
    MenuItem,
    MenuItemCreate,
    MenuItemUpdate,
    NotFoundResponse,
    ValidationErrorResponse,
)
from menu_catalog_api.app.services.menu_service import CatalogStore

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": NotFoundResponse}}
REJECTED = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}


@router.get("", response_model=List[MenuItem])
async def list_menu(store: CatalogStore = Depends(get_catalog_store)) -> List[MenuItem]:
    """Return every menu item in the order it was added."""
    return store.list_items()


@router.get("/categories", response_model=List[str])
async def list_categories() -> List[str]:
    """Return the allowed values of ``category``."""
    return list(MENU_CATEGORIES)


@router.get("/{item_id}", response_model=MenuItem, responses=NOT_FOUND)
async def get_menu_item(item_id: int, store: CatalogStore = Depends(get_catalog_store)) -> MenuItem:
    """Retrieve a single menu item by ID; 404 if it does not exist."""
    return store.get_item(item_id)


@router.post("", response_model=MenuItem, status_code=status.HTTP_201_CREATED, responses=REJECTED)
async def create_menu_item(
    item_in: MenuItemCreate,
    store: CatalogStore = Depends(get_catalog_store),
) -> MenuItem:
    """Add a menu item.

    ``id`` is assigned by the catalog; ``available`` defaults to true.
    """
    return store.create_item(item_in.model_dump())


@router.put("/{item_id}", response_model=MenuItem, responses={**NOT_FOUND, **REJECTED})
async def update_menu_item(
    item_in: MenuItemUpdate,
    item_id: int = Depends(existing_item_id),
    store: CatalogStore = Depends(get_catalog_store),
) -> MenuItem:
    """Apply a partial update to an existing item.

    An unknown id is reported before the body is validated.  Only the
    fields present in the body are changed.
    """
    return store.update_item(item_id, item_in.model_dump(exclude_unset=True))


@router.delete("/{item_id}", response_model=DeleteResponse, responses=NOT_FOUND)
async def delete_menu_item(item_id: int, store: CatalogStore = Depends(get_catalog_store)) -> DeleteResponse:
    """Delete a menu item and return it; 404 if it does not exist."""
    removed = store.delete_item(item_id)
    return DeleteResponse(item=removed)
