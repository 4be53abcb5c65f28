# -*- coding: utf-8 -*-
# XML-RPC codec: MethodCall <-> bytes, going through the wire value tree.

import xmlrpc.client
from xml.parsers.expat import ExpatError

from . import wire
from .errors import ProtocolError

_MAXINT = xmlrpc.client.MAXINT
_MININT = xmlrpc.client.MININT


def _to_python(value):
    if isinstance(value, wire.Struct):
        return {name: _to_python(member) for name, member in value.members}
    if isinstance(value, wire.Array):
        return [_to_python(item) for item in value.values]
    if not isinstance(value, wire.Scalar):
        raise TypeError(f"not a wire value: {value!r}")

    kind = value.kind
    if kind == wire.INT:
        number = int(value.value)
        # XML-RPC <int> is 32-bit; larger sizes travel as <double>
        if number > _MAXINT or number < _MININT:
            return float(number)
        return number
    if kind == wire.DOUBLE:
        return float(value.value)
    if kind == wire.BOOLEAN:
        return bool(value.value)
    if kind == wire.BASE64:
        return xmlrpc.client.Binary(value.value)
    if kind == wire.DATETIME:
        return xmlrpc.client.DateTime(value.value)
    if kind == wire.NIL:
        return None
    return '' if value.value is None else str(value.value)


def _from_python(value):
    if isinstance(value, dict):
        return wire.Struct(tuple((str(name), _from_python(member)) for name, member in value.items()))
    if isinstance(value, (list, tuple)):
        return wire.Array(tuple(_from_python(item) for item in value))
    if isinstance(value, xmlrpc.client.Binary):
        return wire.Scalar(wire.BASE64, value.data)
    if isinstance(value, xmlrpc.client.DateTime):
        return wire.Scalar(wire.DATETIME, value.value)
    return wire.Scalar.of(value)


def generate(call):
    params = tuple(_to_python(param) for param in call.params)
    payload = xmlrpc.client.dumps(params, methodname=call.method_name, encoding='utf-8', allow_none=True)
    return payload.encode('utf-8')


def decode(body):
    """Parses a response body into envelopes.

    An XML-RPC <fault> is reported as ProtocolError. A body that cannot be
    parsed yields no envelopes at all.
    """
    try:
        params, method_name = xmlrpc.client.loads(body, use_builtin_types=False)
    except xmlrpc.client.Fault as fault:
        raise ProtocolError(f"Fault {fault.faultCode}: {fault.faultString}")
    except (ExpatError, xmlrpc.client.ResponseError, ValueError, TypeError):
        return []
    return [wire.MethodCall(method_name or '', tuple(_from_python(param) for param in params))]
