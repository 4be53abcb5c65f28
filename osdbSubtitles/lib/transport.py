# -*- coding: utf-8 -*-
# HTTP transport for the XML-RPC endpoint: requests for the blocking path,
# aiohttp for the cancellable one.

import asyncio
import threading

import aiohttp
import requests

from .errors import CancelledCallError, TransportError
from .settings import get_setting

_CONTENT_TYPE = 'text/xml'

_thread_local_session_storage = threading.local()


def _get_session():
    """
    Retrieves or creates a requests.Session instance for the current thread.
    """
    if not hasattr(_thread_local_session_storage, 'session'):
        session = requests.Session()
        session.headers.update({'Content-Type': _CONTENT_TYPE})
        _thread_local_session_storage.session = session
    return _thread_local_session_storage.session


def _request_headers(user_agent):
    return {'User-Agent': user_agent, 'Content-Type': _CONTENT_TYPE}


def send(core, body, user_agent):
    url = get_setting(core, 'xmlrpc_url')
    timeout = get_setting(core, 'http_timeout', 20)
    core.logger.debug(f"[transport] POST {url} ({len(body)} bytes, timeout {timeout}s)")
    response = None
    try:
        response = _get_session().post(url, data=body, headers=_request_headers(user_agent), timeout=timeout)
        content = response.content
        core.logger.debug(f"[transport] HTTP {response.status_code}, {len(content)} bytes received")
        return content
    except requests.exceptions.Timeout:
        core.logger.error(f"[transport] Timeout after {timeout}s posting to {url}")
        raise TransportError(f"Request to {url} timed out")
    except requests.exceptions.RequestException as exc:
        core.logger.error(f"[transport] RequestException posting to {url}: {exc}")
        raise TransportError(f"Request to {url} failed: {exc}")
    finally:
        if response is not None:
            response.close()


async def _post(core, body, user_agent):
    url = get_setting(core, 'xmlrpc_url')
    timeout = aiohttp.ClientTimeout(total=get_setting(core, 'http_timeout', 20))
    async with aiohttp.ClientSession(timeout=timeout) as http:
        async with http.post(url, data=body, headers=_request_headers(user_agent)) as response:
            content = await response.read()
            return content, response.status, dict(response.headers)


async def send_async(core, body, user_agent, cancel_event=None):
    """
    Posts the body with aiohttp and returns (body, status, headers).
    The only suspension point of an async call is here; if cancel_event is
    set before or while the request is in flight, CancelledCallError is raised.
    """
    url = get_setting(core, 'xmlrpc_url')
    if cancel_event is not None and cancel_event.is_set():
        core.logger.debug(f"[transport] Cancelled before posting to {url}")
        raise CancelledCallError('Call cancelled')

    request_task = asyncio.ensure_future(_post(core, body, user_agent))
    cancel_task = None
    try:
        if cancel_event is None:
            await asyncio.wait({request_task})
        else:
            cancel_task = asyncio.ensure_future(cancel_event.wait())
            await asyncio.wait({request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)

        if not request_task.done():
            request_task.cancel()
            await asyncio.gather(request_task, return_exceptions=True)
            core.logger.debug(f"[transport] Cancelled while waiting on {url}")
            raise CancelledCallError('Call cancelled')

        try:
            content, status, headers = request_task.result()
        except asyncio.TimeoutError:
            core.logger.error(f"[transport] Timeout posting to {url}")
            raise TransportError(f"Request to {url} timed out")
        except aiohttp.ClientError as exc:
            core.logger.error(f"[transport] ClientError posting to {url}: {exc}")
            raise TransportError(f"Request to {url} failed: {exc}")

        core.logger.debug(f"[transport] HTTP {status}, {len(content)} bytes received")
        return content, status, headers
    finally:
        if cancel_task is not None and not cancel_task.done():
            cancel_task.cancel()
        if not request_task.done():
            request_task.cancel()
