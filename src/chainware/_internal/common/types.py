# ruff: noqa: ANN401
from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

Handler: TypeAlias = Callable[[Any, Any], Awaitable[None]]
Constructor: TypeAlias = Callable[[Handler], Handler]
HandlerFn: TypeAlias = Callable[[Any, Any], Awaitable[None] | None]
EndwareFunc: TypeAlias = Callable[[Any, Any], Awaitable[None] | None]
ErrorHandler: TypeAlias = Callable[
    [Any, Any, Exception], Awaitable[None] | None
]
RouteKey: TypeAlias = Callable[[Any], Any]
