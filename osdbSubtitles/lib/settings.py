# -*- coding: utf-8 -*-

import json
import os

SETTINGS_ENV_VAR = 'OSDB_SUBTITLES_SETTINGS'

DEFAULTS = {
    'xmlrpc_url': 'https://api.opensubtitles.org/xml-rpc',
    'user_agent': '',
    'username': '',
    'password': '',
    'language': 'en',
    'http_timeout': 20,
    'text_encoding': 'utf-8',
    'debug': False,
}


def _from_env():
    raw = os.environ.get(SETTINGS_ENV_VAR)
    if not raw:
        return {}
    try:
        values = json.loads(raw)
    except ValueError as exc:
        raise ValueError(f"{SETTINGS_ENV_VAR} is not valid JSON: {exc}")
    if not isinstance(values, dict):
        raise ValueError(f"{SETTINGS_ENV_VAR} must hold a JSON object")
    return values


class Settings(object):
    def __init__(self, overrides=None):
        self._values = dict(DEFAULTS)
        self._values.update(_from_env())
        if overrides:
            self._values.update(overrides)

    def get(self, key, default=None):
        return self._values.get(key, default)


def get_setting(core, key, default=None):
    if core and hasattr(core, 'settings') and core.settings is not None:
        return core.settings.get(key, default)
    return default
