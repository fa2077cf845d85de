"""
Trigger — client-side events via HX-Trigger headers.

    from hx import trigger as T

    T.merge("refresh", [T.event("notify", {"msg": "saved"})])
    # Ok('{"refresh":null,"notify":{"msg":"saved"}}')
"""

from __future__ import annotations

from hx.trigger._types import TriggerHeader, TriggerEvent, event
from hx.trigger._merge import merge

__all__ = (
    "TriggerHeader",
    "TriggerEvent",
    "event",
    "merge",
)
