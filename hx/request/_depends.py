"""
FastAPI dependency for HTMX request headers.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from hx._types import Some
from hx.request._extract import from_headers
from hx.request._middleware import get_request_headers
from hx.request._types import HTMXRequest


def htmx_request(request: Request) -> HTMXRequest:
    """Stored value when HTMXMiddleware ran, otherwise parsed from the request."""
    match get_request_headers(request):
        case Some(value):
            return value
        case _:
            return from_headers(request.headers)


HTMX = Annotated[HTMXRequest, Depends(htmx_request)]
"""
Handler parameter type.

Example:
    @app.get("/items")
    async def items(htmx: HTMX) -> HTMLResponse:
        template = "items_partial.html" if htmx.is_htmx_request else "items.html"
"""

__all__ = ("htmx_request", "HTMX")
