"""
Exception handlers translating catalog errors into HTTP responses.

The response bodies follow the format existing menu clients rely on:
``{"error": "item not found"}`` for a missing id and
``{"errors": [{"field": ..., "message": ...}, ...]}`` for a rejected
request body.  Validation errors that concern anything other than the
body (a non-integer path id) keep FastAPI's default 422 response.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from menu_catalog_api.app.services.exceptions import MenuItemNotFoundError
from menu_catalog_api.app.services.menu_validator import field_errors


logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "item not found"


def register_exception_handlers(app: FastAPI, validation_status: int) -> None:
    """Attach the catalog exception handlers to ``app``."""

    @app.exception_handler(MenuItemNotFoundError)
    async def handle_not_found(request: Request, exc: MenuItemNotFoundError) -> JSONResponse:
        logger.info("%s %s: menu item %s not found", request.method, request.url.path, exc.item_id)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": NOT_FOUND_MESSAGE})

    @app.exception_handler(RequestValidationError)
    async def handle_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        raw = exc.errors()
        if not raw or any(not error["loc"] or error["loc"][0] != "body" for error in raw):
            return await request_validation_exception_handler(request, exc)

        errors = field_errors(dict(error, loc=tuple(error["loc"][1:])) for error in raw)
        logger.info(
            "%s %s rejected: %s",
            request.method,
            request.url.path,
            "; ".join(error.message for error in errors),
        )
        return JSONResponse(
            status_code=validation_status,
            content={"errors": [error.model_dump() for error in errors]},
        )
