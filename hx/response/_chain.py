"""
Decorator chain — apply header decorators in order.
"""

from __future__ import annotations

import logging

from hx._types import Result, Ok, Error, HeaderSink, HeaderDecorator, HeaderError

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# set_headers() — Sequential, Stops At First Error
# ═══════════════════════════════════════════════════════════════════════════════


def set_headers(
    sink: HeaderSink,
    *decorators: HeaderDecorator,
) -> Result[None, HeaderError]:
    """
    Apply decorators to sink, strictly in order.

    Later decorators may overwrite headers set by earlier ones. On the first
    error the chain stops and returns it; headers already written stay in
    place (no rollback), removing them is up to the caller.

    Example:
        from hx import response as R

        result = R.set_headers(
            response,
            R.retarget("#login"),
            R.reswap(Swap.OUTER_HTML),
            R.trigger_with_detail(event("flash", {"msg": "Please sign in"})),
        )

        match result:
            case Ok(_):
                ...
            case Error(e):
                print(f"Could not set headers: {e}")
    """
    for index, decorate in enumerate(decorators):
        match decorate(sink):
            case Ok(_):
                continue
            case Error(e):
                logger.debug(
                    "header chain stopped",
                    extra={"step": index, "skipped": len(decorators) - index - 1},
                )
                return Error(e)
    return Ok(None)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("set_headers",)
