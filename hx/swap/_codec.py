"""
Swap codec — enum to wire string and back.
"""

from __future__ import annotations

from hx._types import Result, Ok, Error, HeaderError, HeaderErrorKind
from hx.headers import RESWAP
from hx.swap._types import Swap, DEFAULT_SWAP

_BY_WIRE: dict[str, Swap] = {swap.value: swap for swap in Swap}

# ═══════════════════════════════════════════════════════════════════════════════
# encode() — Total
# ═══════════════════════════════════════════════════════════════════════════════


def encode(swap: Swap) -> str:
    """Wire form of a swap, e.g. Swap.OUTER_HTML -> "outerHTML"."""
    return swap.value


# ═══════════════════════════════════════════════════════════════════════════════
# decode() — Partial
# ═══════════════════════════════════════════════════════════════════════════════


def decode(value: str) -> Result[Swap, HeaderError]:
    """
    Parse a wire string into a Swap.

    Matching is exact and case-sensitive. Unknown values fail with
    INVALID_SWAP; the error carries the default swap as `fallback`.

    Example:
        match S.decode(request.headers.get("HX-Reswap", "")):
            case Ok(swap):
                ...
            case Error(e):
                swap = e.fallback
    """
    swap = _BY_WIRE.get(value)
    if swap is None:
        return Error(HeaderError(
            kind=HeaderErrorKind.INVALID_SWAP,
            message=f"invalid Swap value: {value!r}",
            header=RESWAP,
            fallback=DEFAULT_SWAP,
        ))
    return Ok(swap)


def decode_or_default(value: str) -> tuple[Swap, HeaderError | None]:
    """Parse a wire string, returning the default swap paired with the error on failure."""
    match decode(value):
        case Ok(swap):
            return swap, None
        case Error(e):
            return DEFAULT_SWAP, e


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("encode", "decode", "decode_or_default")
