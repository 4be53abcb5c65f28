import xmlrpc.client

import pytest

from osdbSubtitles.lib import classifier
from osdbSubtitles.lib.errors import (DecodeAmbiguityError, ProtocolError, ThrottlingError,
                                      TypeCoercionError)
from tests.common.osdb import EMPTY_PARAMS_BODY, make_core, ok, response_body


def test_error_marker_wins_over_a_valid_struct():
    body = ok(token='ERROR: 401 Unauthorized')

    with pytest.raises(ProtocolError) as excinfo:
        classifier.classify(make_core(), 'LogIn', body, status_code=429)

    assert 'ERROR: 401 Unauthorized' in excinfo.value.message
    assert excinfo.value.http_status == 429


def test_too_many_requests_is_throttling():
    with pytest.raises(ThrottlingError) as excinfo:
        classifier.classify(make_core(), 'SearchSubtitles', ok(data=[]), status_code=429)

    assert excinfo.value.http_status == 429


@pytest.mark.parametrize('body', [EMPTY_PARAMS_BODY, b'', b'<html><body>Bad gateway</body></html>'])
def test_nothing_usable_is_ambiguous(body):
    with pytest.raises(DecodeAmbiguityError) as excinfo:
        classifier.classify(make_core(), 'GetSubLanguages', body)

    assert excinfo.value.message == 'GetSubLanguages call failed !'


def test_fault_is_protocol_error():
    body = xmlrpc.client.dumps(xmlrpc.client.Fault(3, 'boom'), methodresponse=True).encode('utf-8')

    with pytest.raises(ProtocolError):
        classifier.classify(make_core(), 'ServerInfo', body, status_code=200)


def test_first_param_must_be_a_struct():
    with pytest.raises(TypeCoercionError):
        classifier.classify(make_core(), 'ServerInfo', response_body(['not', 'a', 'struct']))


def test_valid_body_returns_first_struct():
    struct = classifier.classify(make_core(), 'LogOut', ok())

    assert struct.names() == ['status', 'seconds']
