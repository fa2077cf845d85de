"""Unit tests for HTMX request header extraction."""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from kungfu import Some

from hx import HTMXRequest
from hx.request import HTMX, HTMXMiddleware, from_headers, get_request_headers
from hx.settings import HXSettings

HTMX_HEADERS = {
    "HX-Current-URL": "http://testserver/items",
    "HX-Boosted": "true",
    "HX-History-Restore-Request": "true",
    "HX-Request": "true",
    "HX-Target": "item-list",
    "HX-Trigger": "load-more",
    "HX-Trigger-Name": "page",
}


def test_from_headers_reads_every_field() -> None:
    assert from_headers(HTMX_HEADERS) == HTMXRequest(
        current_url="http://testserver/items",
        is_boosted=True,
        is_history_restore_request=True,
        is_htmx_request=True,
        target="item-list",
        trigger="load-more",
        trigger_name="page",
    )


def test_from_headers_defaults() -> None:
    assert from_headers({}) == HTMXRequest()


@pytest.mark.parametrize("value", ["True", "TRUE", "1", "yes", "", "false"])
def test_flags_require_exact_true(value: str) -> None:
    parsed = from_headers({"HX-Request": value, "HX-Boosted": value})

    assert parsed.is_htmx_request is False
    assert parsed.is_boosted is False


def _app(settings: HXSettings | None = None, *, middleware: bool = True) -> FastAPI:
    app = FastAPI()
    if middleware:
        app.add_middleware(HTMXMiddleware, settings=settings)

    @app.get("/state")
    async def state(request: Request) -> dict:
        match get_request_headers(request, settings=settings):
            case Some(htmx):
                return {"found": True, "htmx": htmx.is_htmx_request}
            case _:
                return {"found": False, "htmx": False}

    @app.get("/depends")
    async def depends(htmx: HTMX) -> dict:
        return {"htmx": htmx.is_htmx_request, "target": htmx.target, "url": htmx.current_url}

    return app


def test_middleware_stores_request_headers() -> None:
    client = TestClient(_app())

    body = client.get("/state", headers={"hx-request": "true"}).json()

    assert body == {"found": True, "htmx": True}


def test_middleware_stores_defaults_for_plain_requests() -> None:
    client = TestClient(_app())

    assert client.get("/state").json() == {"found": True, "htmx": False}


def test_lookup_is_absent_without_middleware() -> None:
    client = TestClient(_app(middleware=False))

    assert client.get("/state", headers={"HX-Request": "true"}).json() == {
        "found": False,
        "htmx": False,
    }


def test_custom_state_key(settings: HXSettings) -> None:
    custom = settings.model_copy(update={"state_key": "hx_headers"})
    client = TestClient(_app(custom))

    assert client.get("/state", headers={"HX-Request": "true"}).json() == {
        "found": True,
        "htmx": True,
    }


@pytest.mark.parametrize("middleware", [True, False])
def test_dependency_with_and_without_middleware(middleware: bool) -> None:
    client = TestClient(_app(middleware=middleware))

    body = client.get("/depends", headers=HTMX_HEADERS).json()

    assert body == {"htmx": True, "target": "item-list", "url": "http://testserver/items"}
