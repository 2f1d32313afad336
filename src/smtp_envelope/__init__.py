"""
SMTP envelope address parsing and formatting.

Validates and normalizes the restricted address syntax of MAIL FROM and
RCPT TO arguments: "local@domain", "<local@domain>" and the null
reverse-path "<>".
"""

import logging

from . import config
from .errors import EnvelopeParseError, ParseErrorKind
from .models import Address
from .parser import ParseResult, parse_envelope, try_parse_envelope

# Library logging: silent unless the host application configures handlers
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
logger.setLevel(config.get_log_level())

__all__ = [
    'Address',
    'EnvelopeParseError',
    'ParseErrorKind',
    'ParseResult',
    'parse_envelope',
    'try_parse_envelope',
]
