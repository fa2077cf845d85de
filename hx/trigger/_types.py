"""
Trigger types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from hx._types import Option, Some, Nothing
from hx import headers as H

# ═══════════════════════════════════════════════════════════════════════════════
# TriggerHeader — Which Header Carries The Events
# ═══════════════════════════════════════════════════════════════════════════════


class TriggerHeader(Enum):
    """
    When the client dispatches the events.

    The value is the header name.
    https://htmx.org/headers/hx-trigger/
    """

    IMMEDIATELY = H.TRIGGER  # As soon as the response is received
    AFTER_SETTLE = H.TRIGGER_AFTER_SETTLE  # After the settle step
    AFTER_SWAP = H.TRIGGER_AFTER_SWAP  # After the swap step

    @property
    def header(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


# ═══════════════════════════════════════════════════════════════════════════════
# TriggerEvent — Name + Optional Detail
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class TriggerEvent:
    """
    A client-side event to dispatch.

    detail is Nothing() when absent; Some(None) is an explicit JSON null
    and forces the JSON form of the header.
    """

    name: str
    detail: Option[Any] = field(default_factory=Nothing)

    @property
    def has_detail(self) -> bool:
        return isinstance(self.detail, Some)


class _Absent:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<absent>"


_ABSENT: Any = _Absent()


def event(name: str, detail: Any = _ABSENT) -> TriggerEvent:
    """
    Create a trigger event.

    Example:
        event("closeModal")                       # no detail
        event("showMessage", {"level": "info"})   # with detail
        event("reset", None)                      # explicit null detail
    """
    if detail is _ABSENT:
        return TriggerEvent(name=name)
    return TriggerEvent(name=name, detail=Some(detail))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("TriggerHeader", "TriggerEvent", "event")
