import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from osdbSubtitles.lib import errors, params
from tests.common.osdb import SESSION_CALLS, TOKEN, login_body, make_api, ok


def _run(coro):
    return asyncio.run(coro)


def _logged_in_api():
    api = make_api()
    api.session.authenticate(TOKEN)
    return api


@patch('osdbSubtitles.lib.transport.send_async', new_callable=AsyncMock)
def test_async_log_in_returns_status(send_async):
    api = make_api()
    send_async.return_value = (login_body(), 200, {})

    result, status = _run(api.log_in_async('user', 'secret', 'en'))

    assert status == 200
    assert result.token == TOKEN
    assert api.session.token == TOKEN


@patch('osdbSubtitles.lib.transport.send_async', new_callable=AsyncMock)
def test_too_many_requests_is_throttling(send_async):
    api = _logged_in_api()
    send_async.return_value = (ok(data=[]), 429, {'Retry-After': '10'})

    result, status = _run(api.search_subtitles_async([params.SubtitleSearchParameters(query='matrix')]))

    assert result.kind == errors.THROTTLING
    assert status == 429


@patch('osdbSubtitles.lib.transport.send_async', new_callable=AsyncMock)
def test_error_marker_beats_too_many_requests(send_async):
    api = _logged_in_api()
    send_async.return_value = (b'ERROR: 429 Too many requests', 429, {})

    result, status = _run(api.no_operation_async())

    assert result.kind == errors.PROTOCOL
    assert status == 429


@pytest.mark.parametrize('method,args', SESSION_CALLS)
@patch('osdbSubtitles.lib.transport.send_async', new_callable=AsyncMock)
def test_session_calls_need_a_token(send_async, method, args):
    api = make_api()

    result, status = _run(getattr(api, f"{method}_async")(*args))

    assert result.kind == errors.PRECONDITION
    assert status is None
    send_async.assert_not_called()


@patch('osdbSubtitles.lib.transport._post', new_callable=AsyncMock)
def test_cancelled_before_sending(post):
    api = make_api()

    async def scenario():
        cancel = asyncio.Event()
        cancel.set()
        return await api.log_in_async('user', 'secret', 'en', cancel_event=cancel)

    result, status = _run(scenario())

    assert result.kind == errors.CANCELLED
    assert status is None
    post.assert_not_called()
    assert not api.session.is_authenticated


@patch('osdbSubtitles.lib.transport._post')
def test_cancelled_while_waiting(post):
    api = make_api()
    reached = []

    async def slow_post(core, body, user_agent):
        reached.append(True)
        await asyncio.sleep(10)
        return login_body(), 200, {}

    post.side_effect = slow_post

    async def scenario():
        cancel = asyncio.Event()
        asyncio.get_running_loop().call_later(0.05, cancel.set)
        return await api.log_in_async('user', 'secret', 'en', cancel_event=cancel)

    result, status = _run(scenario())

    assert reached
    assert result.kind == errors.CANCELLED
    assert status is None
    assert not api.session.is_authenticated


@patch('osdbSubtitles.lib.transport._post', new_callable=AsyncMock)
def test_unset_cancel_event_does_not_interfere(post):
    api = _logged_in_api()
    post.return_value = (ok(), 200, {'Content-Type': 'text/xml'})

    async def scenario():
        return await api.log_out_async(cancel_event=asyncio.Event())

    result, status = _run(scenario())

    assert result.ok
    assert status == 200
    assert not api.session.is_authenticated
