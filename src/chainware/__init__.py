"""Composable middleware chains for asynchronous request handlers.

``Chain(m1, m2, m3).then(handler)`` builds ``m1(m2(m3(handler)))``
and runs any endware once the handler has returned.
"""

from importlib.metadata import version as get_version

from chainware._internal.chain import Chain
from chainware._internal.common.types import (
    Constructor,
    EndwareFunc,
    ErrorHandler,
    Handler,
)
from chainware._internal.endware import Endware
from chainware._internal.handler import BaseHandler, HandlerFunc
from chainware._internal.router import Router, default_router

__version__ = get_version("chainware")
__all__ = (
    "BaseHandler",
    "Chain",
    "Constructor",
    "Endware",
    "EndwareFunc",
    "ErrorHandler",
    "Handler",
    "HandlerFunc",
    "Router",
    "default_router",
)
