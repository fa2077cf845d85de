"""
Header decorators — one function per HTMX response header.

Every decorator except the trigger ones always returns Ok(None).
"""

from __future__ import annotations

from hx._types import Result, Ok, Error, HeaderSink, HeaderDecorator, HeaderError, HeaderErrorKind
from hx import headers as H
from hx.swap import Swap, encode
from hx.trigger import TriggerHeader, TriggerEvent, event, merge

# ═══════════════════════════════════════════════════════════════════════════════
# set_header() — Primary Constructor
# ═══════════════════════════════════════════════════════════════════════════════


def set_header(key: str, value: str) -> HeaderDecorator:
    """Set (overwrite) a single header. Never fails."""

    def decorate(sink: HeaderSink) -> Result[None, HeaderError]:
        sink.headers[key] = value
        return Ok(None)

    return decorate


# ═══════════════════════════════════════════════════════════════════════════════
# Navigation
# ═══════════════════════════════════════════════════════════════════════════════


def location(path: str) -> HeaderDecorator:
    """
    Client-side redirect without a full page reload.
    https://htmx.org/headers/hx-location/
    """
    return set_header(H.LOCATION, path)


def push_url(url: str) -> HeaderDecorator:
    """
    Push a new url into the history stack.
    https://htmx.org/headers/hx-push-url/
    """
    return set_header(H.PUSH_URL, url)


def prevent_push_url() -> HeaderDecorator:
    """Keep the browser history unchanged (HX-Push-Url: false)."""
    return push_url("false")


def redirect(path: str) -> HeaderDecorator:
    """Client-side redirect to a new location, with a full page load."""
    return set_header(H.REDIRECT, path)


def refresh() -> HeaderDecorator:
    """Force a full refresh of the page."""
    return set_header(H.REFRESH, "true")


def prevent_refresh() -> HeaderDecorator:
    return set_header(H.REFRESH, "false")


def replace_url(url: str) -> HeaderDecorator:
    """
    Replace the current URL in the location bar.
    https://htmx.org/headers/hx-replace-url/
    """
    return set_header(H.REPLACE_URL, url)


def prevent_replace_url() -> HeaderDecorator:
    return replace_url("false")


# ═══════════════════════════════════════════════════════════════════════════════
# Swapping
# ═══════════════════════════════════════════════════════════════════════════════


def reselect(selector: str) -> HeaderDecorator:
    """CSS selector choosing which part of the response is swapped in. Overrides hx-select."""
    return set_header(H.RESELECT, selector)


def reswap(swap: Swap) -> HeaderDecorator:
    """Override how the response is swapped."""
    return set_header(H.RESWAP, encode(swap))


def retarget(selector: str) -> HeaderDecorator:
    """CSS selector overriding the target of the content update."""
    return set_header(H.RETARGET, selector)


# ═══════════════════════════════════════════════════════════════════════════════
# Triggers
# ═══════════════════════════════════════════════════════════════════════════════


def _merge_into(header: str, events: tuple[TriggerEvent, ...]) -> HeaderDecorator:
    def decorate(sink: HeaderSink) -> Result[None, HeaderError]:
        match merge(sink.headers.get(header), events):
            case Ok(value):
                try:
                    sink.headers[header] = value
                except UnicodeEncodeError as e:
                    # Starlette encodes header values as latin-1.
                    return Error(HeaderError(
                        kind=HeaderErrorKind.SERIALIZATION,
                        message=f"{header}: value is not latin-1 encodable: {e.reason}",
                        header=header,
                    ))
                return Ok(None)
            case Error(e):
                return Error(HeaderError(
                    kind=e.kind,
                    message=f"{header}: {e.message}",
                    header=header,
                ))

    return decorate


def trigger(
    *names: str,
    when: TriggerHeader = TriggerHeader.IMMEDIATELY,
) -> HeaderDecorator:
    """
    Trigger client-side events by name.

    Events already in the header are kept. If the header holds JSON the
    names are added to the object with a null detail.

    Example:
        R.set_headers(response, R.trigger("itemAdded", "cartChanged"))
        R.set_headers(response, R.trigger("done", when=TriggerHeader.AFTER_SWAP))

    https://htmx.org/headers/hx-trigger/
    """
    return _merge_into(when.header, tuple(event(name) for name in names))


def trigger_after_settle(*names: str) -> HeaderDecorator:
    return trigger(*names, when=TriggerHeader.AFTER_SETTLE)


def trigger_after_swap(*names: str) -> HeaderDecorator:
    return trigger(*names, when=TriggerHeader.AFTER_SWAP)


def trigger_with_detail(
    *events: TriggerEvent,
    when: TriggerHeader = TriggerHeader.IMMEDIATELY,
) -> HeaderDecorator:
    """
    Trigger client-side events carrying details.

    A comma separated list already in the header is converted to a JSON
    object with null details. Fails with SERIALIZATION if a detail has no
    JSON representation.

    Example:
        R.trigger_with_detail(event("showMessage", {"level": "info", "text": "Saved"}))
    """
    return _merge_into(when.header, events)


def trigger_after_settle_with_detail(*events: TriggerEvent) -> HeaderDecorator:
    return trigger_with_detail(*events, when=TriggerHeader.AFTER_SETTLE)


def trigger_after_swap_with_detail(*events: TriggerEvent) -> HeaderDecorator:
    return trigger_with_detail(*events, when=TriggerHeader.AFTER_SWAP)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "set_header",
    "location",
    "push_url",
    "prevent_push_url",
    "redirect",
    "refresh",
    "prevent_refresh",
    "replace_url",
    "prevent_replace_url",
    "reselect",
    "reswap",
    "retarget",
    "trigger",
    "trigger_after_settle",
    "trigger_after_swap",
    "trigger_with_detail",
    "trigger_after_settle_with_detail",
    "trigger_after_swap_with_detail",
)
