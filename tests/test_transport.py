import asyncio
from unittest.mock import MagicMock, patch

import aiohttp
import pytest
import requests

from osdbSubtitles.lib import transport
from osdbSubtitles.lib.errors import TransportError
from tests.common.osdb import USER_AGENT, make_core


@patch('osdbSubtitles.lib.transport._get_session')
def test_send_posts_body_with_user_agent(mock_get_session):
    core = make_core(xmlrpc_url='https://example.com/xml-rpc', http_timeout=5)
    session = MagicMock()
    response = MagicMock()
    response.content = b'<methodResponse/>'
    response.status_code = 200
    session.post.return_value = response
    mock_get_session.return_value = session

    content = transport.send(core, b'<methodCall/>', USER_AGENT)

    assert content == b'<methodResponse/>'
    session.post.assert_called_once_with('https://example.com/xml-rpc', data=b'<methodCall/>',
                                         headers={'User-Agent': USER_AGENT, 'Content-Type': 'text/xml'},
                                         timeout=5)
    response.close.assert_called_once()


@patch('osdbSubtitles.lib.transport._get_session')
def test_send_timeout_is_transport_error(mock_get_session):
    core = make_core(xmlrpc_url='https://example.com/xml-rpc')
    mock_get_session.return_value.post.side_effect = requests.exceptions.Timeout()

    with pytest.raises(TransportError) as excinfo:
        transport.send(core, b'<methodCall/>', USER_AGENT)

    assert 'timed out' in excinfo.value.message
    core.logger.error.assert_called_once()


@patch('osdbSubtitles.lib.transport._get_session')
def test_send_connection_error_is_transport_error(mock_get_session):
    core = make_core(xmlrpc_url='https://example.com/xml-rpc')
    mock_get_session.return_value.post.side_effect = requests.exceptions.ConnectionError('refused')

    with pytest.raises(TransportError):
        transport.send(core, b'<methodCall/>', USER_AGENT)


@patch('osdbSubtitles.lib.transport._post')
def test_send_async_returns_status_and_headers(post):
    async def fake_post(core, body, user_agent):
        return b'<methodResponse/>', 503, {'Server': 'nginx'}

    post.side_effect = fake_post

    content, status, headers = asyncio.run(transport.send_async(make_core(), b'<methodCall/>', USER_AGENT))

    assert (content, status, headers) == (b'<methodResponse/>', 503, {'Server': 'nginx'})


@patch('osdbSubtitles.lib.transport._post')
def test_send_async_client_error_is_transport_error(post):
    async def failing_post(core, body, user_agent):
        raise aiohttp.ClientConnectionError('refused')

    post.side_effect = failing_post

    async def scenario():
        return await transport.send_async(make_core(), b'<methodCall/>', USER_AGENT, asyncio.Event())

    with pytest.raises(TransportError):
        asyncio.run(scenario())
