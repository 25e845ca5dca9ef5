import logging
from typing import Any
from unittest import mock

import pytest

from chainware import Chain, Endware
from tests.conftest import FakeRequest, FakeResponse, app_handler, tag_endware


async def test_sync_and_async_endware_run_in_order(
    response: FakeResponse,
    fake_request: FakeRequest,
) -> None:
    async def async_endware(resp: FakeResponse, _req: Any) -> None:
        resp.write("async")

    chain = Chain().after(tag_endware("sync"), async_endware)
    await chain.then(app_handler)(response, fake_request)

    assert response.body == ["app", "sync", "async"]


async def test_endware_receives_same_context(
    response: FakeResponse,
    fake_request: FakeRequest,
) -> None:
    endware = mock.Mock(return_value="ignored")
    await Chain().after(endware).then(app_handler)(response, fake_request)

    endware.assert_called_once_with(response, fake_request)


async def test_endware_error_propagates(
    response: FakeResponse,
    fake_request: FakeRequest,
) -> None:
    failing = mock.Mock(side_effect=RuntimeError("endware failed"))
    later = mock.Mock()
    handler = Chain().after(failing, later).then(app_handler)

    with pytest.raises(RuntimeError, match="endware failed"):
        await handler(response, fake_request)

    assert response.body == ["app"]
    later.assert_not_called()


async def test_endware_logging(
    caplog: pytest.LogCaptureFixture,
    response: FakeResponse,
    fake_request: FakeRequest,
) -> None:
    failing = mock.Mock(side_effect=RuntimeError("endware failed"))
    chain = Chain().after(tag_endware("e0"), failing).with_endware_logging()

    with (
        caplog.at_level(logging.ERROR, logger="chainware.chain"),
        pytest.raises(RuntimeError),
    ):
        await chain.then(app_handler)(response, fake_request)

    assert [r.getMessage() for r in caplog.records] == ["Error in endware 1"]
    assert caplog.records[0].exc_info is not None


async def test_endware_not_logged_by_default(
    caplog: pytest.LogCaptureFixture,
    fake_request: FakeRequest,
) -> None:
    failing = mock.Mock(side_effect=RuntimeError)
    handler = Chain().after(failing).then(app_handler)

    with (
        caplog.at_level(logging.ERROR, logger="chainware.chain"),
        pytest.raises(RuntimeError),
    ):
        await handler(FakeResponse(), fake_request)

    assert caplog.records == []


async def test_endware_record_on_error(
    response: FakeResponse,
    fake_request: FakeRequest,
) -> None:
    exc = ValueError("bad")
    on_error = mock.Mock()
    endware = Endware(mock.Mock(side_effect=exc), on_error=on_error)
    chain = Chain().after(endware, tag_endware("e1"))

    await chain.then(app_handler)(response, fake_request)

    on_error.assert_called_once_with(response, fake_request, exc)
    assert response.body == ["app", "e1"]


async def test_endware_record_async_on_error(
    response: FakeResponse,
    fake_request: FakeRequest,
) -> None:
    async def failing(_resp: FakeResponse, _req: Any) -> None:
        raise KeyError

    on_error = mock.AsyncMock()
    await Endware(failing, on_error=on_error)(response, fake_request)

    on_error.assert_awaited_once_with(response, fake_request, mock.ANY)
    assert isinstance(on_error.await_args.args[2], KeyError)


async def test_endware_record_without_on_error_raises(
    response: FakeResponse,
    fake_request: FakeRequest,
) -> None:
    endware = Endware(mock.Mock(side_effect=ValueError("bad")))

    with pytest.raises(ValueError, match="bad"):
        await endware(response, fake_request)


async def test_endware_record_success(
    response: FakeResponse,
    fake_request: FakeRequest,
) -> None:
    on_error = mock.Mock()
    await Endware(tag_endware("e1"), on_error=on_error)(response, fake_request)

    assert response.body == ["e1"]
    on_error.assert_not_called()
