"""
Configuration for the smtp_envelope package, read from the environment.
"""

import logging
import os

DEFAULT_LOG_LEVEL = 'WARNING'

# Level for the "smtp_envelope" logger (DEBUG shows every rejected address)
LOG_LEVEL = os.environ.get('SMTP_ENVELOPE_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()


def get_log_level() -> int:
    """
    Resolve LOG_LEVEL to a logging level number.

    Returns:
        int: logging level, DEFAULT_LOG_LEVEL's value if the name is unknown
    """
    level = logging.getLevelName(LOG_LEVEL)
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)
