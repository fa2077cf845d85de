"""Unit tests for the swap codec."""

from __future__ import annotations

import pytest
from kungfu import Error, Ok

from hx import HeaderErrorKind
from hx.swap import DEFAULT_SWAP, Swap, decode, decode_or_default, encode


@pytest.mark.parametrize(
    ("swap", "wire"),
    [
        (Swap.INNER_HTML, "innerHTML"),
        (Swap.OUTER_HTML, "outerHTML"),
        (Swap.BEFORE_BEGIN, "beforebegin"),
        (Swap.AFTER_BEGIN, "afterbegin"),
        (Swap.BEFORE_END, "beforeend"),
        (Swap.AFTER_END, "afterend"),
        (Swap.DELETE, "delete"),
        (Swap.NONE, "none"),
    ],
)
def test_encode_and_decode(swap: Swap, wire: str) -> None:
    assert encode(swap) == wire
    assert str(swap) == wire

    result = decode(wire)
    assert isinstance(result, Ok)
    assert result.value is swap


@pytest.mark.parametrize("wire", ["", "innerhtml", "OUTERHTML", "outerHTML ", "swap"])
def test_decode_unknown_value(wire: str) -> None:
    result = decode(wire)

    assert isinstance(result, Error)
    assert result.value.kind is HeaderErrorKind.INVALID_SWAP
    assert result.value.fallback is Swap.INNER_HTML
    assert repr(wire) in result.value.message


def test_decode_or_default() -> None:
    assert decode_or_default("afterend") == (Swap.AFTER_END, None)

    swap, error = decode_or_default("sideways")
    assert swap is DEFAULT_SWAP
    assert error is not None
    assert error.kind is HeaderErrorKind.INVALID_SWAP
