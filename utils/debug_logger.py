"""
Logging setup for the hand tracking application.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Package loggers configured together
LOGGER_NAMES = ('detection', 'tracking', 'visualization', 'camera', 'handpose')


def configure_logging(debug=False, log_to_file=False, filename="hand_tracking_debug.log"):
    """Send package logs to stdout, and optionally a file.

    Returns the application logger.
    """
    level = logging.DEBUG if debug else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_to_file:
        handlers.append(logging.FileHandler(filename))

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        logger.propagate = False

    return logging.getLogger('handpose')


def log_performance(logger, component, duration_ms):
    """Log a timing measurement at debug level."""
    logger.debug("[PERF] %s: %.2fms", component, duration_ms)
