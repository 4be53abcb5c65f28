# -*- coding: utf-8 -*-
# Handlers are the host's business; with the `debug` setting on, the package
# logger is lowered to DEBUG so debug() and notice() are not filtered out.

import logging

LOGGER_NAME = 'osdbSubtitles'


class Logger(object):
    def __init__(self, settings=None, name=LOGGER_NAME):
        self._settings = settings
        self._log = logging.getLogger(name)
        if self._debug_enabled():
            self._log.setLevel(logging.DEBUG)

    def _debug_enabled(self):
        return bool(self._settings is not None and self._settings.get('debug', False))

    def error(self, message):
        self._log.error(message)

    def notice(self, message):
        self._log.info(message)

    def debug(self, message):
        if self._debug_enabled():
            self._log.debug(message)
