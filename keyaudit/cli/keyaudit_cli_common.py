"""
.. module: keyaudit.cli.keyaudit_cli_common
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
import logging
import sys

from keyaudit.config.keyaudit_config import KEYAUDIT_OPTIONS_SECTION, LOGGING_LEVEL_OPTION

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def set_logger(config, debug=False):
    logging_level = 'DEBUG' if debug else config.get(KEYAUDIT_OPTIONS_SECTION, LOGGING_LEVEL_OPTION)
    numeric_level = getattr(logging, logging_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError('Invalid log level: {}'.format(logging_level))

    logger = logging.getLogger()
    if not logger.handlers:
        # stdout carries the report
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(numeric_level)
    return logger


def error_message(message, stream=None):
    (stream or sys.stdout).write(message + '\n')
    return 1
