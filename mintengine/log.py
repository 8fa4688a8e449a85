"""Engine and application loggers writing to standard output."""

import logging
import sys

CORE_LOGGER_NAME = "CORE"
APP_LOGGER_NAME = "CLIENT"

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

_handlers = {}


class _StdoutHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stdout``."""

    def __init__(self):
        super().__init__(sys.stdout)

    def emit(self, record):
        self.stream = sys.stdout
        super().emit(record)


def init_logging():
    """Configure the engine and application loggers; safe to call again."""
    formatter = logging.Formatter(_FORMAT, _DATE_FORMAT)
    for name in (CORE_LOGGER_NAME, APP_LOGGER_NAME):
        logger = logging.getLogger(name)
        previous = _handlers.pop(name, None)
        if previous is not None:
            logger.removeHandler(previous)
        handler = _StdoutHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        _handlers[name] = handler

    core_logger().info("Logger initialized!")


def core_logger():
    """Return the engine logger."""
    return logging.getLogger(CORE_LOGGER_NAME)


def app_logger():
    """Return the application logger."""
    return logging.getLogger(APP_LOGGER_NAME)