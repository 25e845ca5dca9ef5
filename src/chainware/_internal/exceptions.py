from __future__ import annotations

from typing import Any


class BaseChainwareError(Exception):
    pass


class RouteNotFoundError(BaseChainwareError, LookupError):
    """Raised when the router has no handler for a request."""

    def __init__(self, key: Any) -> None:  # noqa: ANN401
        self.key: Any = key
        super().__init__(
            f"No handler is registered for {key!r}"
            " and the router has no not_found handler."
        )


class RouteAlreadyRegisteredError(BaseChainwareError):
    """A route with this key has already been registered."""

    def __init__(self, key: Any) -> None:  # noqa: ANN401
        self.key: Any = key
        msg = f"A route with the key {key!r} has already been registered."
        super().__init__(msg)
