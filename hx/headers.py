"""
HTMX header names.

    from hx import headers as H

    response.headers[H.RETARGET] = "#main"

Response headers: https://htmx.org/reference/#response_headers
Request headers: https://htmx.org/reference/#request_headers
"""

from __future__ import annotations

from typing import Final

# ═══════════════════════════════════════════════════════════════════════════════
# Response Headers
# ═══════════════════════════════════════════════════════════════════════════════

LOCATION: Final = "HX-Location"
PUSH_URL: Final = "HX-Push-Url"
REDIRECT: Final = "HX-Redirect"
REFRESH: Final = "HX-Refresh"
REPLACE_URL: Final = "HX-Replace-Url"
RESWAP: Final = "HX-Reswap"
RETARGET: Final = "HX-Retarget"
RESELECT: Final = "HX-Reselect"
TRIGGER: Final = "HX-Trigger"
TRIGGER_AFTER_SETTLE: Final = "HX-Trigger-After-Settle"
TRIGGER_AFTER_SWAP: Final = "HX-Trigger-After-Swap"

# ═══════════════════════════════════════════════════════════════════════════════
# Request Headers
# ═══════════════════════════════════════════════════════════════════════════════

CURRENT_URL: Final = "HX-Current-URL"
BOOSTED: Final = "HX-Boosted"
HISTORY_RESTORE_REQUEST: Final = "HX-History-Restore-Request"
REQUEST: Final = "HX-Request"
TARGET: Final = "HX-Target"
TRIGGER_NAME: Final = "HX-Trigger-Name"
# HX-Trigger is shared: on requests it is the id of the triggered element.

__all__ = (
    "LOCATION",
    "PUSH_URL",
    "REDIRECT",
    "REFRESH",
    "REPLACE_URL",
    "RESWAP",
    "RETARGET",
    "RESELECT",
    "TRIGGER",
    "TRIGGER_AFTER_SETTLE",
    "TRIGGER_AFTER_SWAP",
    "CURRENT_URL",
    "BOOSTED",
    "HISTORY_RESTORE_REQUEST",
    "REQUEST",
    "TARGET",
    "TRIGGER_NAME",
)
