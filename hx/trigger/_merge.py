"""
Trigger merge — add events to a trigger header without losing existing ones.

A trigger header has two wire forms:

    HX-Trigger: closeModal, refreshList
    HX-Trigger: {"closeModal": null, "showMessage": {"level": "info"}}

The list form is kept for as long as no event carries a detail. Once a detail
appears (or the header already holds JSON) the header is upgraded to the
object form, existing names mapping to null.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from hx._types import Result, Ok, Error, Some, HeaderError, HeaderErrorKind
from hx.settings import HXSettings, get_settings
from hx.trigger._types import TriggerEvent

logger = logging.getLogger(__name__)

_LIST_SEPARATOR = ", "

# ═══════════════════════════════════════════════════════════════════════════════
# Parsing the current value
# ═══════════════════════════════════════════════════════════════════════════════


class _NotJSON(ValueError):
    pass


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are accepted by json.loads but are not JSON.
    raise _NotJSON(name)


def _parse_json(raw: str) -> tuple[bool, Any]:
    """(parsed?, value). Failing to parse is not an error: it means list form."""
    try:
        return True, json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        return False, None


def _split_names(raw: str) -> list[str]:
    return [name.strip() for name in raw.split(",")]


def _detail_of(ev: TriggerEvent) -> Any:
    match ev.detail:
        case Some(value):
            return value
        case _:
            return None


# ═══════════════════════════════════════════════════════════════════════════════
# Serializing the object form
# ═══════════════════════════════════════════════════════════════════════════════


def _jsonable(value: Any) -> Any:
    # NaN/Infinity stay floats here, including inside models, so allow_nan=False rejects them.
    if isinstance(value, BaseModel):
        return value.model_dump(mode="python", by_alias=True)
    return to_jsonable_python(value, inf_nan_mode="constants")


def _dumps(events: dict[str, Any], settings: HXSettings) -> Result[str, HeaderError]:
    try:
        return Ok(json.dumps(
            events,
            separators=(",", ":"),
            ensure_ascii=settings.json_ensure_ascii,
            allow_nan=False,
            default=_jsonable,
        ))
    except (TypeError, ValueError, PydanticSerializationError) as e:
        return Error(HeaderError(
            kind=HeaderErrorKind.SERIALIZATION,
            message=f"trigger detail is not JSON serializable: {e}",
        ))


def _as_object(
    existing: dict[str, Any],
    events: Sequence[TriggerEvent],
    settings: HXSettings,
) -> Result[str, HeaderError]:
    merged = dict(existing)
    for ev in events:
        # Last write wins; new names are used as-is.
        merged[ev.name] = _detail_of(ev)
    return _dumps(merged, settings)


def _as_list(existing: list[str], events: Sequence[TriggerEvent]) -> Result[str, HeaderError]:
    names = [*existing, *(ev.name.strip() for ev in events)]
    return Ok(_LIST_SEPARATOR.join(names))


# ═══════════════════════════════════════════════════════════════════════════════
# merge() — The Engine
# ═══════════════════════════════════════════════════════════════════════════════


def merge(
    current: str | None,
    events: Sequence[TriggerEvent],
    *,
    settings: HXSettings | None = None,
) -> Result[str, HeaderError]:
    """
    Compute the new raw value of a trigger header.

    Args:
        current: The header's current raw value; None or "" when unset
        events: Events to add, in order
        settings: Serialization settings (defaults to get_settings())

    Returns:
        Ok(new raw value), or Error(HeaderError) when a detail cannot be
        serialized (SERIALIZATION) or the current value is JSON but not an
        object (NOT_AN_OBJECT). Nothing is written on error.

    Example:
        merge("", [event("a"), event("b")])        # Ok("a, b")
        merge("a", [event("b", "d")])              # Ok('{"a":null,"b":"d"}')
        merge('{"a":1}', [event("b")])             # Ok('{"a":1,"b":null}')
    """
    settings = settings or get_settings()
    with_detail = any(ev.has_detail for ev in events)

    if not current:
        if with_detail:
            logger.debug("trigger header empty, writing object form")
            return _as_object({}, events, settings)
        return _as_list([], events)

    parsed, value = _parse_json(current)
    if parsed:
        if not isinstance(value, dict):
            return Error(HeaderError(
                kind=HeaderErrorKind.NOT_AN_OBJECT,
                message=(
                    "trigger header holds JSON that is not an object: "
                    f"{type(value).__name__}"
                ),
            ))
        return _as_object(value, events, settings)

    existing = _split_names(current)
    if with_detail:
        logger.debug(
            "upgrading trigger list to object form",
            extra={"existing": len(existing), "added": len(events)},
        )
        return _as_object(dict.fromkeys(existing), events, settings)
    return _as_list(existing, events)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("merge",)
