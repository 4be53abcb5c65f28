import json

import pytest

from osdbSubtitles.lib import settings
from osdbSubtitles.lib.settings import SETTINGS_ENV_VAR, Settings, get_setting
from tests.common.osdb import make_core


def test_defaults_without_env(monkeypatch):
    monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)

    values = Settings()

    assert values.get('xmlrpc_url') == settings.DEFAULTS['xmlrpc_url']
    assert values.get('http_timeout') == 20
    assert values.get('missing', 'fallback') == 'fallback'


def test_env_json_sits_between_defaults_and_overrides(monkeypatch):
    monkeypatch.setenv(SETTINGS_ENV_VAR, json.dumps({'language': 'de', 'user_agent': 'from-env v1'}))

    values = Settings({'user_agent': 'explicit v2'})

    assert values.get('language') == 'de'
    assert values.get('user_agent') == 'explicit v2'
    assert values.get('text_encoding') == 'utf-8'


@pytest.mark.parametrize('raw,message', [
    ('{not json', 'is not valid JSON'),
    ('["a", "b"]', 'must hold a JSON object'),
])
def test_bad_env_value_is_rejected(monkeypatch, raw, message):
    monkeypatch.setenv(SETTINGS_ENV_VAR, raw)

    with pytest.raises(ValueError) as excinfo:
        Settings()

    assert message in str(excinfo.value)


def test_get_setting_reads_through_core():
    assert get_setting(make_core(http_timeout=5), 'http_timeout', 20) == 5
    assert get_setting(None, 'http_timeout', 20) == 20
