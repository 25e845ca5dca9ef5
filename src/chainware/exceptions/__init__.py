"""Custom exceptions for the chainware package.

The composition core itself raises nothing: faults from middleware,
handlers and endware propagate unchanged. These exceptions belong to
the default routing handler.
"""

from chainware._internal.exceptions import (
    BaseChainwareError,
    RouteAlreadyRegisteredError,
    RouteNotFoundError,
)

__all__ = (
    "BaseChainwareError",
    "RouteAlreadyRegisteredError",
    "RouteNotFoundError",
)
