from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


async def call_maybe_async(
    func: Callable[..., Awaitable[Any] | Any],
    /,
    *args: Any,  # noqa: ANN401
) -> None:
    """Call `func` and await the result when it is awaitable."""
    result = func(*args)
    if inspect.isawaitable(result):
        await result
