from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, final

from chainware._internal.common.utils import call_maybe_async

if TYPE_CHECKING:
    from chainware._internal.common.types import EndwareFunc, ErrorHandler


@final
@dataclass(slots=True, frozen=True, kw_only=True)
class Endware:
    """Endware with an optional error handler.

    Endware runs after the terminal handler has produced a response.
    A plain ``(response, request)`` callable is already valid endware;
    wrap it in ``Endware`` only to route its failures to ``on_error``.

    When ``fn`` raises and ``on_error`` is set, the exception is passed
    to ``on_error(response, request, exc)`` and counts as handled.
    Without ``on_error`` the exception propagates.
    """

    fn: EndwareFunc = field(kw_only=False)
    on_error: ErrorHandler | None = None

    async def __call__(self, response: Any, request: Any) -> None:  # noqa: ANN401
        try:
            await call_maybe_async(self.fn, response, request)
        except Exception as exc:
            if self.on_error is None:
                raise
            await call_maybe_async(self.on_error, response, request, exc)
