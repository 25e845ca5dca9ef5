from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from chainware import Handler


@dataclass(slots=True)
class FakeRequest:
    path: str = "/"


@dataclass(slots=True)
class FakeResponse:
    body: list[str] = field(default_factory=list)

    def write(self, chunk: str) -> None:
        self.body.append(chunk)


def tag_middleware(tag: str) -> Callable[[Handler], Handler]:
    """Build a constructor writing ``tag`` before calling the next handler."""

    def constructor(handler: Handler) -> Handler:
        async def wrapped(response: FakeResponse, request: Any) -> None:
            response.write(tag)
            await handler(response, request)

        return wrapped

    return constructor


def tag_endware(tag: str) -> Callable[[FakeResponse, Any], None]:
    def endware(response: FakeResponse, _request: Any) -> None:
        response.write(tag)

    return endware


async def app_handler(response: FakeResponse, _request: Any) -> None:
    response.write("app")


@pytest.fixture
def fake_request() -> FakeRequest:
    return FakeRequest()


@pytest.fixture
def response() -> FakeResponse:
    return FakeResponse()
