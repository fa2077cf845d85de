"""
ASGI middleware — parse HTMX request headers once per request.
"""

from __future__ import annotations

from starlette.requests import HTTPConnection
from starlette.types import ASGIApp, Receive, Scope, Send

from hx._types import Option, Some, Nothing
from hx.request._extract import from_headers
from hx.request._types import HTMXRequest
from hx.settings import HXSettings, get_settings

# ═══════════════════════════════════════════════════════════════════════════════
# HTMXMiddleware
# ═══════════════════════════════════════════════════════════════════════════════


class HTMXMiddleware:
    """
    Store the parsed HTMX request headers in request.state.

    Non-HTMX requests get an HTMXRequest with all default values.

    Example:
        app = FastAPI()
        app.add_middleware(HTMXMiddleware)

        @app.get("/")
        async def index(request: Request) -> str:
            match get_request_headers(request):
                case Some(htmx) if htmx.is_htmx_request:
                    ...
    """

    def __init__(self, app: ASGIApp, settings: HXSettings | None = None) -> None:
        self.app = app
        self.settings = settings or get_settings()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            conn = HTTPConnection(scope)
            setattr(conn.state, self.settings.state_key, from_headers(conn.headers))
        await self.app(scope, receive, send)


# ═══════════════════════════════════════════════════════════════════════════════
# get_request_headers() — Request-Scoped Lookup
# ═══════════════════════════════════════════════════════════════════════════════


def get_request_headers(
    request: HTTPConnection,
    *,
    settings: HXSettings | None = None,
) -> Option[HTMXRequest]:
    """The HTMXRequest stored by HTMXMiddleware; Nothing() if it never ran."""
    key = (settings or get_settings()).state_key
    value = getattr(request.state, key, None)
    if isinstance(value, HTMXRequest):
        return Some(value)
    return Nothing()


__all__ = ("HTMXMiddleware", "get_request_headers")
