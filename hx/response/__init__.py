"""
Response — set HTMX response headers through a decorator chain.

    from hx import response as R

    R.set_headers(response, R.retarget("#login"), R.reswap(Swap.OUTER_HTML))
"""

from __future__ import annotations

from hx.response._chain import set_headers
from hx.response._decorators import (
    set_header,
    location,
    push_url,
    prevent_push_url,
    redirect,
    refresh,
    prevent_refresh,
    replace_url,
    prevent_replace_url,
    reselect,
    reswap,
    retarget,
    trigger,
    trigger_after_settle,
    trigger_after_swap,
    trigger_with_detail,
    trigger_after_settle_with_detail,
    trigger_after_swap_with_detail,
)

__all__ = (
    "set_headers",
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
