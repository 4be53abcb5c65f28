# -*- coding: utf-8 -*-

PRECONDITION = 'precondition'
VALIDATION = 'validation'
TRANSPORT = 'transport'
THROTTLING = 'throttling'
PROTOCOL = 'protocol'
DECODE_AMBIGUITY = 'decode_ambiguity'
CANCELLED = 'cancelled'

TOKEN_NOT_SET_MESSAGE = "Can't do this call, 'token' value not set. Please use Log In method first."
USER_AGENT_NOT_SET_MESSAGE = "Can't do this call, user agent not set. Please set the user agent first."


class OSDbError(Exception):
    """Expected failure of a remote call.

    Raised inside the client and turned into an ErrorResult by the dispatcher,
    so callers only ever see it as data.
    """
    kind = None

    def __init__(self, message, http_status=None):
        super(OSDbError, self).__init__(message)
        self.message = message
        self.http_status = http_status


class PreconditionError(OSDbError):
    kind = PRECONDITION


class ValidationError(OSDbError):
    kind = VALIDATION


class TransportError(OSDbError):
    kind = TRANSPORT


class ThrottlingError(OSDbError):
    kind = THROTTLING


class ProtocolError(OSDbError):
    kind = PROTOCOL


class DecodeAmbiguityError(OSDbError):
    kind = DECODE_AMBIGUITY


class CancelledCallError(OSDbError):
    kind = CANCELLED


class TypeCoercionError(TypeError):
    """A wire value had a shape the response mapper cannot accept.

    This is a contract violation by the server (or the codec) and is left to
    propagate instead of being folded into an ErrorResult.
    """

    def __init__(self, where, expected, got):
        super(TypeCoercionError, self).__init__(f"{where}: expected {expected}, got {got}")
        self.where = where
        self.expected = expected
        self.got = got
