from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, final

from typing_extensions import Self

from chainware._internal.common.utils import call_maybe_async
from chainware._internal.handler import HandlerFunc
from chainware._internal.router import default_router

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chainware._internal.common.types import (
        Constructor,
        EndwareFunc,
        Handler,
        HandlerFn,
    )

logger = logging.getLogger("chainware.chain")


@final
class Chain:
    """An immutable list of middleware constructors and endware.

    ``Chain(m1, m2, m3).then(h)`` is equivalent to ``m1(m2(m3(h)))``.
    A request is passed to m1, then m2, then m3 and finally to the
    handler, assuming every middleware calls the next one. Endware runs
    in order once the handler has returned.

    Every method that changes a chain returns a new one, so a chain can
    be shared and extended freely::

        std = Chain(m1, m2)
        ext = std.append(m3, m4)
        # requests in std go m1 -> m2
        # requests in ext go m1 -> m2 -> m3 -> m4
    """

    __slots__: tuple[str, ...] = (
        "_constructors",
        "_endware",
        "_endware_logging",
    )

    def __init__(
        self,
        *constructors: Constructor,
        endware: Iterable[EndwareFunc] = (),
        endware_logging: bool = False,
    ) -> None:
        self._constructors: tuple[Constructor, ...] = tuple(constructors)
        self._endware: tuple[EndwareFunc, ...] = tuple(endware)
        self._endware_logging: bool = endware_logging

    @property
    def constructors(self) -> tuple[Constructor, ...]:
        return self._constructors

    @property
    def endware(self) -> tuple[EndwareFunc, ...]:
        return self._endware

    @property
    def endware_logging(self) -> bool:
        return self._endware_logging

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(constructors={len(self._constructors)},"
            f" endware={len(self._endware)})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chain):
            return NotImplemented
        return (
            self._constructors == other._constructors
            and self._endware == other._endware
            and self._endware_logging == other._endware_logging
        )

    def __hash__(self) -> int:
        return hash((self._constructors, self._endware, self._endware_logging))

    def then(
        self,
        handler: Handler | None = None,
        *,
        fallback: Handler | None = None,
    ) -> Handler:
        """Build the final handler.

        Constructors are called on every call to ``then()``, so reusing
        a chain creates several instances of the same middleware::

            std = Chain(rate_limit, csrf)
            index = std.then(index_handler)
            auth = std.then(auth_handler)

        ``None`` is replaced by ``fallback``, or by ``default_router``
        when no fallback is given.
        """
        if handler is None:
            handler = fallback if fallback is not None else default_router
            logger.debug("No handler given, falling back to %r", handler)

        if self._endware:
            handler = self._with_endware(handler)

        for constructor in reversed(self._constructors):
            handler = constructor(handler)

        logger.debug(
            "Built handler with %d constructors and %d endware",
            len(self._constructors),
            len(self._endware),
        )
        return handler

    def then_func(
        self,
        fn: HandlerFn | None = None,
        *,
        fallback: Handler | None = None,
    ) -> Handler:
        """Work like `then`, but take a plain function.

        ``chain.then_func(fn)`` is equivalent to
        ``chain.then(HandlerFunc(fn))``.
        """
        if fn is None:
            return self.then(None, fallback=fallback)
        return self.then(HandlerFunc(fn), fallback=fallback)

    def append(self, *constructors: Constructor) -> Self:
        """Return a new chain with constructors added last in the flow."""
        return self._replace(constructors=(*self._constructors, *constructors))

    def append_endware(self, *endware: EndwareFunc) -> Self:
        """Return a new chain with endware added after the existing ones."""
        return self._replace(endware=(*self._endware, *endware))

    def after(self, *endware: EndwareFunc) -> Self:
        """Return a new chain whose endware is replaced by ``endware``.

        Unlike `append_endware`, the existing endware is dropped.
        """
        return self._replace(endware=endware)

    def extend(self, chain: Chain) -> Self:
        """Return a new chain running ``chain`` after this one.

        Constructors and endware of ``chain`` are appended to the ones
        of this chain::

            std = Chain(m1, m2)
            ext = std.extend(Chain(m3, m4))
            # requests in ext go m1 -> m2 -> m3 -> m4
        """
        return self.append(*chain.constructors).append_endware(*chain.endware)

    def with_endware_logging(self, enabled: bool = True) -> Self:  # noqa: FBT001, FBT002
        """Return a new chain that logs endware failures before raising."""
        return self._replace(endware_logging=enabled)

    def _replace(self, **changes: Any) -> Self:  # noqa: ANN401
        constructors = changes.get("constructors", self._constructors)
        return type(self)(
            *constructors,
            endware=changes.get("endware", self._endware),
            endware_logging=changes.get(
                "endware_logging",
                self._endware_logging,
            ),
        )

    def _with_endware(self, handler: Handler) -> Handler:
        endware = self._endware
        endware_logging = self._endware_logging

        async def run_with_endware(response: Any, request: Any) -> None:  # noqa: ANN401
            await handler(response, request)
            for index, fn in enumerate(endware):
                try:
                    await call_maybe_async(fn, response, request)
                except Exception:
                    if endware_logging:
                        logger.exception("Error in endware %d", index)
                    raise

        return run_with_endware
