# -*- coding: utf-8 -*-

from .lib import logger, settings


class Core(object):
    def __init__(self, overrides=None):
        self.settings = settings.Settings(overrides)
        self.logger = logger.Logger(self.settings)
