"""
Swap types.
"""

from __future__ import annotations

from enum import Enum

# ═══════════════════════════════════════════════════════════════════════════════
# Swap — How Returned Content Is Placed
# ═══════════════════════════════════════════════════════════════════════════════


class Swap(Enum):
    """
    How HTMX swaps returned content into the DOM.

    The value is the canonical wire form.
    https://htmx.org/attributes/hx-swap/
    """

    INNER_HTML = "innerHTML"  # Replace the inner html of the target element
    OUTER_HTML = "outerHTML"  # Replace the entire target element
    BEFORE_BEGIN = "beforebegin"  # Insert before the target element
    AFTER_BEGIN = "afterbegin"  # Insert before the first child of the target
    BEFORE_END = "beforeend"  # Insert after the last child of the target
    AFTER_END = "afterend"  # Insert after the target element
    DELETE = "delete"  # Delete the target element regardless of the response
    NONE = "none"  # Do not append content from the response

    def __str__(self) -> str:
        return self.value


DEFAULT_SWAP = Swap.INNER_HTML

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Swap", "DEFAULT_SWAP")
