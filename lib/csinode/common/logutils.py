# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

import datetime
import logging
import sys

from dateutil import tz

DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)-5s (%(threadName)s) [%(name)s] %(message)s")

# Level names accepted on the driver command line. The panic levels have no
# logging counterpart, they are all reported as critical.
_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "dpanic": logging.CRITICAL,
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}


class SimpleLogAdapter(logging.LoggerAdapter):

    def __init__(self, logger, context):
        """
        Initialize an adapter with a logger and a dict-like object which
        provides contextual information. The contextual information is
        prepended to each log message.

        This adapter::

            log = SimpleLogAdapter(log, {"volume_id": "vol-1",
                                         "node": "worker-2"})
            log.info("Volume staged")

        Would produce this message::

            "(volume_id='vol-1', node='worker-2') Volume staged"
        """
        super(SimpleLogAdapter, self).__init__(logger, context)
        items = ", ".join("%s='%s'" % (k, v) for k, v in context.items())
        self.prefix = "(%s) " % items

    def process(self, msg, kwargs):
        return self.prefix + msg, kwargs


class TimezoneFormatter(logging.Formatter):
    def converter(self, timestamp):
        return datetime.datetime.fromtimestamp(timestamp, tz.tzlocal())

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        if datefmt:
            s = ct.strftime(datefmt)
        else:
            s = "%s,%03d%s" % (
                ct.strftime('%Y-%m-%d %H:%M:%S'),
                record.msecs,
                ct.strftime('%z')
            )
        return s


def level_from_name(level_name):
    """
    Return the logging level for a driver level name, INFO for unknown names.
    """
    return _LEVELS.get(level_name, logging.INFO)


def set_level(level_name, name=''):
    """
    Set the level of logger name (the root logger if empty) from a driver
    level name.

    Raises ValueError for names level_from_name does not know.
    """
    if level_name not in _LEVELS:
        raise ValueError("unknown log level: %r" % level_name)
    log_level = level_from_name(level_name)

    # getLogger() default argument is None, not ''
    logger = logging.getLogger(name or None)
    logger.info(
        'Setting log level on %r to %s (%d)',
        logger.name, level_name, log_level)
    logger.setLevel(log_level)


def configure(level_name="info", stream=None, name="csinode"):
    """
    Log to stream (default stderr) using the local timezone in timestamps.
    Unknown level names log at info.

    Returns the configured logger.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(TimezoneFormatter(DEFAULT_FORMAT))
    logger = logging.getLogger(name)
    logger.addHandler(handler)
    try:
        set_level(level_name, name)
    except ValueError:
        logger.setLevel(logging.INFO)
        logger.warning("Unknown log level %r, using info", level_name)
    return logger
