"""
hx — HTMX request and response headers for Python web apps.

    from hx import response as R   # Set response headers
    from hx import trigger as T    # HX-Trigger events and merging
    from hx import swap as S       # HX-Reswap values
    from hx import request as Q    # Read request headers (FastAPI/Starlette)
"""

import logging

from hx import headers
from hx import swap
from hx import trigger
from hx import response
from hx import request
from hx._types import (
    Result,
    Ok,
    Error,
    Option,
    Some,
    Nothing,
    HeaderSink,
    HeaderDecorator,
    HeaderError,
    HeaderErrorKind,
)
from hx.swap import Swap
from hx.trigger import TriggerEvent, TriggerHeader, event
from hx.response import set_headers
from hx.request import HTMXRequest

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "headers",
    "swap",
    "trigger",
    "response",
    "request",
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "HeaderSink",
    "HeaderDecorator",
    "HeaderError",
    "HeaderErrorKind",
    "Swap",
    "TriggerEvent",
    "TriggerHeader",
    "event",
    "set_headers",
    "HTMXRequest",
)
