from __future__ import annotations

import logging
from operator import attrgetter
from typing import TYPE_CHECKING, Any, TypeVar

from typing_extensions import override

from chainware._internal.exceptions import (
    RouteAlreadyRegisteredError,
    RouteNotFoundError,
)
from chainware._internal.handler import BaseHandler, HandlerFunc

if TYPE_CHECKING:
    from collections.abc import Callable

    from chainware._internal.common.types import Handler, HandlerFn, RouteKey

logger = logging.getLogger("chainware.router")

FnT = TypeVar("FnT", bound="HandlerFn")


class Router(BaseHandler):
    """Dispatch requests to handlers registered under a key.

    The key is extracted from the request by ``key`` and defaults to
    ``request.path``. Requests with an unknown key go to ``not_found``,
    or raise `RouteNotFoundError` when no such handler is set.
    """

    __slots__: tuple[str, ...] = ("_key", "_not_found", "_routes")

    def __init__(
        self,
        *,
        key: RouteKey = attrgetter("path"),
        not_found: Handler | None = None,
    ) -> None:
        self._key: RouteKey = key
        self._not_found: Handler | None = not_found
        self._routes: dict[Any, Handler] = {}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} routes={len(self._routes)}>"

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, key: object) -> bool:
        return key in self._routes

    def add(self, key: Any, handler: Handler) -> None:  # noqa: ANN401
        if key in self._routes:
            raise RouteAlreadyRegisteredError(key)
        self._routes[key] = handler

    def route(self, key: Any) -> Callable[[FnT], FnT]:  # noqa: ANN401
        def wrapper(fn: FnT) -> FnT:
            self.add(key, HandlerFunc(fn))
            return fn

        return wrapper

    @override
    async def __call__(self, response: Any, request: Any) -> None:  # noqa: ANN401
        key = self._key(request)
        handler = self._routes.get(key)
        if handler is None:
            if self._not_found is None:
                raise RouteNotFoundError(key)
            logger.debug("No route for %r, using not_found handler", key)
            handler = self._not_found
        await handler(response, request)


default_router = Router()
