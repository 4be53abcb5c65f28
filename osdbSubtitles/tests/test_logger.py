import logging

from osdbSubtitles.lib.logger import Logger
from osdbSubtitles.lib.settings import Settings


def test_debug_setting_lowers_logger_level(caplog):
    logger = Logger(Settings({'debug': True}), name='osdbSubtitles.tests.verbose')

    logger.debug('[SearchSubtitles] query= matrix')
    logger.notice('[LogIn] Session opened')

    assert logging.getLogger('osdbSubtitles.tests.verbose').level == logging.DEBUG
    messages = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert (logging.DEBUG, '[SearchSubtitles] query= matrix') in messages
    assert (logging.INFO, '[LogIn] Session opened') in messages


def test_debug_messages_are_dropped_when_disabled(caplog):
    logger = Logger(Settings({'debug': False}), name='osdbSubtitles.tests.quiet')

    with caplog.at_level(logging.DEBUG, logger='osdbSubtitles.tests.quiet'):
        logger.debug('[SearchSubtitles] query= matrix')
        logger.error('[SearchSubtitles] ERROR: 401')

    assert [record.getMessage() for record in caplog.records] == ['[SearchSubtitles] ERROR: 401']
