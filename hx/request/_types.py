"""
Request types.
"""

from __future__ import annotations

from dataclasses import dataclass

# ═══════════════════════════════════════════════════════════════════════════════
# HTMXRequest — Parsed Request Headers
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HTMXRequest:
    """
    HTMX request header values.

    For a request not made by HTMX every field keeps its default.
    https://htmx.org/reference/#request_headers
    """

    current_url: str = ""  # Current URL of the browser
    is_boosted: bool = False  # Request made via an element using hx-boost
    is_history_restore_request: bool = False  # History restoration after a local cache miss
    is_htmx_request: bool = False  # HX-Request header was "true"
    target: str = ""  # id of the target element, if it exists
    trigger: str = ""  # id of the triggered element, if it exists
    trigger_name: str = ""  # name of the triggered element, if it exists


__all__ = ("HTMXRequest",)
