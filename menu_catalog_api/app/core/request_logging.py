"""
Request logging middleware.

Every inbound request is logged as ``METHOD path`` (query string
included).  For ``POST`` and ``PUT`` requests the JSON body is logged
as well, unless disabled via ``Settings.log_request_bodies``.  Reading
the body here does not consume it: Starlette caches it for the
downstream handler.
"""

import json
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


logger = logging.getLogger("menu_catalog_api.requests")

BODY_METHODS = {"POST", "PUT"}
MAX_RAW_BODY = 512


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, URL and (optionally) the body of each request."""

    def __init__(self, app, log_bodies: bool = True) -> None:
        super().__init__(app)
        self.log_bodies = log_bodies

    async def dispatch(self, request: Request, call_next):
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        logger.info("%s %s", request.method, url)

        if self.log_bodies and request.method in BODY_METHODS:
            body_bytes = await request.body()
            logger.info("Request body: %s", _describe_body(body_bytes))

        return await call_next(request)


def _describe_body(body_bytes: bytes) -> str:
    if not body_bytes:
        return "<empty>"
    try:
        return json.dumps(json.loads(body_bytes), ensure_ascii=False)
    except ValueError:
        text = body_bytes.decode("utf-8", errors="replace")
        return text[:MAX_RAW_BODY]
