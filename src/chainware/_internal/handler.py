from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, final, runtime_checkable

from typing_extensions import override

from chainware._internal.common.utils import call_maybe_async

if TYPE_CHECKING:
    from chainware._internal.common.types import HandlerFn


@runtime_checkable
class BaseHandler(Protocol, metaclass=ABCMeta):
    @abstractmethod
    async def __call__(self, response: Any, request: Any) -> None:  # noqa: ANN401
        pass


@final
@dataclass(slots=True, frozen=True)
class HandlerFunc(BaseHandler):
    """Adapt a plain function, sync or async, into a handler.

    The following are equivalent::

        chain.then(HandlerFunc(fn))
        chain.then_func(fn)
    """

    fn: HandlerFn

    @override
    async def __call__(self, response: Any, request: Any) -> None:  # noqa: ANN401
        await call_maybe_async(self.fn, response, request)
