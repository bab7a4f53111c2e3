"""
Field rules for menu payloads.

The rules themselves live on ``MenuItemCreate`` and ``MenuItemUpdate``.
This module turns pydantic's error list into ``FieldError`` entries
with stable, human-readable messages.  The same mapping serves the
HTTP layer (``core.errors``) and direct callers of
``validate_for_create``/``validate_for_update``.

Update payloads are checked more leniently than create payloads: the
minimum lengths of ``name`` and ``description`` are only enforced on
create.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Sequence

from pydantic import ValidationError

from menu_catalog_api.app.schemas.menu import FieldError, MenuItemCreate, MenuItemUpdate


# Keys an update payload may carry.  ``id`` is intentionally absent.
UPDATABLE_FIELDS = ("name", "description", "price", "category", "ingredients", "available")

PRICE_MESSAGE = "Price must be a number greater than 0."
CATEGORY_MESSAGE = "Category must be one of: appetizer, entree, dessert, or beverage."
BODY_MESSAGE = "Request body must be a JSON object."
JSON_MESSAGE = "Request body must be valid JSON."


def _text_message(field: str, error_type: str, ctx: Mapping[str, Any]) -> str:
    label = field.capitalize()
    if error_type == "string_too_short":
        return f"{label} must have at least {ctx.get('min_length')} characters."
    return f"{label} must be a string."


def _ingredients_message(error_type: str, loc: Sequence[Any]) -> str:
    if len(loc) > 1:
        return "Ingredients must contain only strings."
    if error_type in {"too_short", "missing"}:
        return "Ingredients must be an array with at least 1 item."
    return "Ingredients must be an array."


def _message(field: str, error: Mapping[str, Any]) -> str:
    error_type = error["type"]
    if error_type == "extra_forbidden":
        return f"Invalid field: {field}"
    if field in {"name", "description"}:
        return _text_message(field, error_type, error.get("ctx") or {})
    if field == "price":
        return PRICE_MESSAGE
    if field == "category":
        return CATEGORY_MESSAGE
    if field == "ingredients":
        return _ingredients_message(error_type, error["loc"])
    if field == "available":
        return "Available must be a boolean."
    return error["msg"]


def field_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldError]:
    """Convert pydantic error dicts into ``FieldError`` entries.

    ``loc`` must be relative to the payload (no leading ``"body"``).
    One entry is kept per distinct field and message.
    """
    result: List[FieldError] = []
    seen = set()
    for error in errors:
        loc = tuple(error.get("loc") or ())
        if error["type"] == "json_invalid":
            entry = FieldError(field="body", message=JSON_MESSAGE)
        elif not loc:
            entry = FieldError(field="body", message=BODY_MESSAGE)
        else:
            field = str(loc[0])
            entry = FieldError(field=field, message=_message(field, dict(error, loc=loc)))
        key = (entry.field, entry.message)
        if key not in seen:
            seen.add(key)
            result.append(entry)
    return result


def validate_for_create(payload: Any) -> List[FieldError]:
    """Check a full menu item payload (without ``id``).

    Unknown keys are ignored; an empty list means the payload is
    acceptable.
    """
    try:
        MenuItemCreate.model_validate(payload)
    except ValidationError as exc:
        return field_errors(exc.errors())
    return []


def validate_for_update(payload: Any) -> List[FieldError]:
    """Check a partial payload used to update an existing item.

    Keys outside ``UPDATABLE_FIELDS`` are errors.  Only present fields
    are checked.
    """
    try:
        MenuItemUpdate.model_validate(payload)
    except ValidationError as exc:
        return field_errors(exc.errors())
    return []
