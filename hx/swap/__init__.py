"""
Swap — the HX-Reswap enumeration and its wire codec.

    from hx import swap as S

    S.encode(S.Swap.OUTER_HTML)   # "outerHTML"
    S.decode("beforeend")         # Ok(Swap.BEFORE_END)
"""

from __future__ import annotations

from hx.swap._types import Swap, DEFAULT_SWAP
from hx.swap._codec import encode, decode, decode_or_default

__all__ = (
    "Swap",
    "DEFAULT_SWAP",
    "encode",
    "decode",
    "decode_or_default",
)
