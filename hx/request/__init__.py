"""
Request — read HTMX request headers.

    from hx import request as Q

    app.add_middleware(Q.HTMXMiddleware)

    @app.get("/")
    async def index(htmx: Q.HTMX) -> ...:
        if htmx.is_boosted:
            ...
"""

from __future__ import annotations

from hx.request._types import HTMXRequest
from hx.request._extract import from_headers
from hx.request._middleware import HTMXMiddleware, get_request_headers
from hx.request._depends import htmx_request, HTMX

__all__ = (
    "HTMXRequest",
    "from_headers",
    "HTMXMiddleware",
    "get_request_headers",
    "htmx_request",
    "HTMX",
)
