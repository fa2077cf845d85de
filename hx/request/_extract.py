"""
Extraction — request headers to HTMXRequest.
"""

from __future__ import annotations

from collections.abc import Mapping

from hx import headers as H
from hx.request._types import HTMXRequest


def _flag(headers: Mapping[str, str], name: str) -> bool:
    # Only the exact literal counts; "True" or "1" do not.
    return headers.get(name) == "true"


def from_headers(headers: Mapping[str, str]) -> HTMXRequest:
    """
    Read the HTMX request headers.

    Lookup is delegated to the mapping, so pass a case-insensitive one
    (e.g. Starlette's request.headers) for HTTP semantics.
    """
    return HTMXRequest(
        current_url=headers.get(H.CURRENT_URL, ""),
        is_boosted=_flag(headers, H.BOOSTED),
        is_history_restore_request=_flag(headers, H.HISTORY_RESTORE_REQUEST),
        is_htmx_request=_flag(headers, H.REQUEST),
        target=headers.get(H.TARGET, ""),
        trigger=headers.get(H.TRIGGER, ""),
        trigger_name=headers.get(H.TRIGGER_NAME, ""),
    )


__all__ = ("from_headers",)
