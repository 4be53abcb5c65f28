# -*- coding: utf-8 -*-
# Runs an Operation against a Session: precondition check, envelope build,
# transport, classification and mapping. Expected failures come back as
# ErrorResult; TypeCoercionError is left to propagate.

from .lib import classifier, codec, results, transport, wire
from .lib.errors import OSDbError


def _prepare(core, session, operation):
    if operation.requires_session:
        state = session.require_authenticated()
    else:
        state = session.require_user_agent()

    params = list(operation.build_params(state)) if operation.build_params is not None else []
    if operation.requires_session:
        params.insert(0, wire.Scalar(wire.STRING, state.token))
    return state, wire.MethodCall(operation.method_name, tuple(params))


def _complete(core, session, operation, struct):
    result = operation.mapper(core, struct)
    if operation.on_success is not None:
        was_authenticated = session.is_authenticated
        operation.on_success(session, result)
        if session.is_authenticated != was_authenticated:
            state = 'opened' if session.is_authenticated else 'closed'
            core.logger.notice(f"[{operation.method_name}] Session {state}")
    return result


def _error_result(core, operation, exc):
    core.logger.debug(f"[{operation.method_name}] Call failed ({exc.kind}): {exc.message[:200]}")
    return results.ErrorResult(kind=exc.kind, message=exc.message)


def execute(core, session, operation):
    method_name = operation.method_name
    try:
        state, call = _prepare(core, session, operation)
        core.logger.debug(f"[{method_name}] Sending {method_name} request to the server ...")
        body = transport.send(core, codec.generate(call), state.user_agent)
        struct = classifier.classify(core, method_name, body)
    except OSDbError as exc:
        return _error_result(core, operation, exc)
    return _complete(core, session, operation, struct)


async def execute_async(core, session, operation, cancel_event=None):
    """
    Same as execute() but awaits the aiohttp transport and returns
    (result, http_status). http_status is None when no HTTP exchange
    completed (precondition, validation, transport failure, cancellation).
    """
    method_name = operation.method_name
    try:
        state, call = _prepare(core, session, operation)
        payload = codec.generate(call)
        core.logger.debug(f"[{method_name}] Sending {method_name} request to the server ...")
        body, status, _headers = await transport.send_async(core, payload, state.user_agent, cancel_event)
    except OSDbError as exc:
        return _error_result(core, operation, exc), None

    try:
        struct = classifier.classify(core, method_name, body, status)
    except OSDbError as exc:
        return _error_result(core, operation, exc), exc.http_status
    return _complete(core, session, operation, struct), status
