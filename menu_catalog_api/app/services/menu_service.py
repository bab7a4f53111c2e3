"""
Service layer for the menu catalog.

``CatalogStore`` is the only owner of the menu collection.  It keeps
entries in insertion order in memory and hands out deep copies, so a
caller can never change stored state except through ``create_item``,
``update_item`` and ``delete_item``.

Payloads are expected to have passed the request schemas already; the
store does not re-check field rules.  Identifiers come from a counter
that only moves forward, so an id freed by a deletion is never issued
again.

All operations take a single re-entrant lock.  The menu endpoints are
``async`` and run one at a time on the event loop, but the store is
also used directly and from sync dependencies that FastAPI runs in a
thread pool; the lock keeps the id counter and the ordering consistent
for any threaded caller.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Iterable, List, Mapping, Optional

from menu_catalog_api.app.schemas.menu import MenuItem
from menu_catalog_api.app.services.exceptions import MenuItemNotFoundError
from menu_catalog_api.app.services.menu_validator import UPDATABLE_FIELDS


logger = logging.getLogger(__name__)


class CatalogStore:
    """In-memory collection of menu items."""

    def __init__(self, items: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        self._lock = threading.RLock()
        self._items: List[MenuItem] = [MenuItem(**item) for item in (items or [])]
        ids = [item.id for item in self._items]
        if len(ids) != len(set(ids)):
            raise ValueError("seed items must have unique ids")
        self._next_id = max(ids, default=0) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _index_of(self, item_id: int) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise MenuItemNotFoundError(item_id)

    def list_items(self) -> List[MenuItem]:
        """Return every item in insertion order."""
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items]

    def get_item(self, item_id: int) -> MenuItem:
        """Return the item with ``item_id`` or raise ``MenuItemNotFoundError``."""
        with self._lock:
            return self._items[self._index_of(item_id)].model_copy(deep=True)

    def create_item(self, data: Mapping[str, Any]) -> MenuItem:
        """Append a new item built from a validated create payload.

        Missing optional fields get defaults: empty description and
        category, no ingredients, ``available=True``.
        """
        with self._lock:
            item = MenuItem(
                id=self._next_id,
                name=data["name"],
                description=data.get("description") or "",
                price=data["price"],
                category=data.get("category") or "",
                ingredients=list(data.get("ingredients") or []),
                available=bool(data.get("available", True)),
            )
            self._next_id += 1
            self._items.append(item)
            logger.info("Created menu item %s (%s)", item.id, item.name)
            return item.model_copy(deep=True)

    def update_item(self, item_id: int, data: Mapping[str, Any]) -> MenuItem:
        """Overwrite the fields present in ``data`` on an existing item.

        Keys outside the updatable fields are ignored here; the
        validator rejects them before the store is called.
        """
        with self._lock:
            index = self._index_of(item_id)
            changes = {
                key: copy.deepcopy(value) for key, value in data.items() if key in UPDATABLE_FIELDS
            }
            if changes:
                self._items[index] = self._items[index].model_copy(update=changes)
                logger.info("Updated menu item %s: %s", item_id, ", ".join(sorted(changes)))
            return self._items[index].model_copy(deep=True)

    def delete_item(self, item_id: int) -> MenuItem:
        """Remove an item and return it."""
        with self._lock:
            removed = self._items.pop(self._index_of(item_id))
            logger.info("Deleted menu item %s", item_id)
            return removed
