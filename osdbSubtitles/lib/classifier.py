# -*- coding: utf-8 -*-

from . import codec, wire
from .errors import DecodeAmbiguityError, ProtocolError, ThrottlingError

ERROR_MARKER = 'ERROR:'
TOO_MANY_REQUESTS = 429


def body_text(body):
    if isinstance(body, str):
        return body
    return body.decode('utf-8', errors='replace')


def classify(core, method_name, body, status_code=None):
    """Returns the first response struct, or raises the matching OSDbError.

    Order: an 'ERROR:' marker anywhere in the body, then HTTP 429 (async path
    only, status_code is None on the sync path), then an empty decode.
    """
    text = body_text(body)
    if ERROR_MARKER in text:
        core.logger.error(f"[{method_name}] {text}")
        raise ProtocolError(text, http_status=status_code)

    if status_code == TOO_MANY_REQUESTS:
        core.logger.error(f"[{method_name}] HTTP 429 Too Many Requests")
        raise ThrottlingError(f"{method_name}: too many requests, try again later", http_status=status_code)

    try:
        calls = codec.decode(body)
    except ProtocolError as exc:
        core.logger.error(f"[{method_name}] {exc.message}")
        exc.http_status = status_code
        raise

    if not calls or not calls[0].params:
        core.logger.error(f"[{method_name}] Response decoded to nothing usable")
        raise DecodeAmbiguityError(f"{method_name} call failed !", http_status=status_code)

    return wire.expect_struct(calls[0].params[0], f"{method_name}.response")
