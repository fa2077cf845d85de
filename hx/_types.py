"""
Core types for hx.

Re-exports from kungfu + the header sink protocol and error values.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Protocol

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing

if TYPE_CHECKING:
    from hx.swap import Swap

# ═══════════════════════════════════════════════════════════════════════════════
# Header Sink — Anything With Headers
# ═══════════════════════════════════════════════════════════════════════════════


class HeaderMap(Protocol):
    """Minimal mutable header mapping: get-by-name and overwrite-by-name."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def __setitem__(self, key: str, value: str) -> None: ...


class HeaderSink(Protocol):
    """
    Anything exposing mutable headers.

    A Starlette/FastAPI Response satisfies this directly.

    Example:
        @dataclass
        class Headers:
            headers: dict[str, str] = field(default_factory=dict)
    """

    @property
    def headers(self) -> HeaderMap: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class HeaderErrorKind(Enum):
    """Header error kinds."""

    SERIALIZATION = auto()  # Detail has no JSON representation
    NOT_AN_OBJECT = auto()  # Trigger header holds JSON that is not an object
    INVALID_SWAP = auto()  # Unknown swap wire value


@dataclass(frozen=True, slots=True)
class HeaderError:
    """
    Header operation error.

    Note: fallback is only set for INVALID_SWAP and holds the default swap.
    """

    kind: HeaderErrorKind
    message: str
    header: str | None = None
    fallback: Swap | None = None

    def __str__(self) -> str:
        return self.message


# ═══════════════════════════════════════════════════════════════════════════════
# Decorator Type
# ═══════════════════════════════════════════════════════════════════════════════

type HeaderDecorator = Callable[[HeaderSink], Result[None, HeaderError]]
"""A single header mutation. Most never fail."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    # Sink
    "HeaderMap",
    "HeaderSink",
    # Errors
    "HeaderError",
    "HeaderErrorKind",
    # Decorators
    "HeaderDecorator",
)
