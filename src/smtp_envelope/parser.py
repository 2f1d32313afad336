"""
SMTP envelope address parser.

Accepts only the forms used in MAIL FROM / RCPT TO arguments:

- local@domain
- <local@domain>
- <> (null reverse-path)

RFC 5322 mailbox syntax (display names, comments, quoted local parts) is
rejected, not interpreted. Callers hand over just the path token; the SMTP
verb and any ESMTP parameters must already be stripped off.
"""

import logging
import re
import string
from dataclasses import dataclass
from typing import NoReturn, Optional

from .errors import EnvelopeParseError, ParseErrorKind
from .models import Address

logger = logging.getLogger(__name__)

NULL_PATH = '<>'

# Brackets belong only around the whole path; quotes and parentheses start
# RFC 5322 quoted strings and comments. Control characters are never valid.
_DISALLOWED_RE = re.compile(r'[<>"()\x00-\x1f\x7f-\x9f]')

# Domain case-folding touches ASCII letters only (no Unicode lowercasing)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclass
class ParseResult:
    """
    Result of try_parse_envelope().

    Attributes:
        success: Whether the input parsed
        raw: The input as passed in
        address: Parsed Address (if parsing succeeded)
        error_kind: Rejection reason (if parsing failed)
        error_message: Error description (if parsing failed)
    """
    success: bool
    raw: str
    address: Optional[Address] = None
    error_kind: Optional[ParseErrorKind] = None
    error_message: Optional[str] = None

    def __repr__(self) -> str:
        if self.success:
            return f"ParseResult(success=True, address={self.address})"
        else:
            return f"ParseResult(success=False, raw={self.raw!r}, error={self.error_kind.value})"


def parse_envelope(raw: str) -> Address:
    """
    Parse an SMTP envelope address.

    Args:
        raw: Path token from a MAIL FROM or RCPT TO argument, bracketed or bare

    Returns:
        Address: Parsed address, domain lowercased (ASCII letters only)

    Raises:
        EnvelopeParseError: If raw is not a valid envelope address; the
            exception's kind says why

    Example:
        >>> parse_envelope(" <User@Example.COM> ").to_bracketed()
        '<User@example.com>'
        >>> parse_envelope("<>").is_null()
        True
    """
    token = raw.strip()
    if not token:
        _reject(ParseErrorKind.EMPTY_INPUT, raw)

    if token == NULL_PATH:
        return Address.null()

    # "Name <user@example.com>" and similar header mailbox forms
    if token.find('<') > 0:
        _reject(ParseErrorKind.DISPLAY_NAME_PRESENT, raw)

    opened = token.startswith('<')
    closed = token.endswith('>')
    if opened != closed:
        _reject(ParseErrorKind.UNBALANCED_BRACKETS, raw)
    addr_spec = token[1:-1] if opened else token

    _check_characters(addr_spec, raw)

    at_count = addr_spec.count('@')
    if at_count == 0:
        _reject(ParseErrorKind.MISSING_AT_SIGN, raw)
    if at_count > 1:
        _reject(ParseErrorKind.MULTIPLE_AT_SIGNS, raw)

    local, domain = addr_spec.split('@')
    if not local:
        _reject(ParseErrorKind.EMPTY_LOCAL_PART, raw)
    if not domain:
        _reject(ParseErrorKind.EMPTY_DOMAIN_PART, raw)

    return Address(local=local, domain=domain.translate(_ASCII_LOWER))


def try_parse_envelope(raw: str) -> ParseResult:
    """
    Parse an envelope address without raising on invalid input.

    Args:
        raw: Path token, as for parse_envelope()

    Returns:
        ParseResult with success=True and the address, or success=False
        and the rejection kind
    """
    try:
        address = parse_envelope(raw)
    except EnvelopeParseError as e:
        return ParseResult(
            success=False,
            raw=raw,
            error_kind=e.kind,
            error_message=str(e)
        )

    return ParseResult(success=True, raw=raw, address=address)


def normalize_domain(domain: str) -> str:
    """
    Validate a standalone domain and lowercase its ASCII letters.

    Used when an Address is built or rewritten outside parse_envelope().
    No trimming is done: surrounding whitespace is an error here.

    Raises:
        EnvelopeParseError: If domain is empty or contains whitespace,
            '@', brackets, quotes, parentheses or control characters
    """
    if not domain:
        _reject(ParseErrorKind.EMPTY_DOMAIN_PART, domain)
    _check_characters(domain, domain)
    if '@' in domain:
        _reject(ParseErrorKind.DISALLOWED_CHARACTER, domain)
    return domain.translate(_ASCII_LOWER)


def validate_local(local: str) -> None:
    """
    Validate a standalone local part. Case is never touched.

    Raises:
        EnvelopeParseError: If local is empty or contains whitespace,
            '@', brackets, quotes, parentheses or control characters
    """
    if not local:
        _reject(ParseErrorKind.EMPTY_LOCAL_PART, local)
    _check_characters(local, local)
    if '@' in local:
        _reject(ParseErrorKind.DISALLOWED_CHARACTER, local)


def _check_characters(value: str, raw: str) -> None:
    if any(ch.isspace() for ch in value):
        _reject(ParseErrorKind.WHITESPACE_IN_ADDRESS, raw)
    if _DISALLOWED_RE.search(value):
        _reject(ParseErrorKind.DISALLOWED_CHARACTER, raw)


def _reject(kind: ParseErrorKind, raw: str) -> NoReturn:
    logger.debug(f"Rejected envelope address {raw!r}: {kind.value}")
    raise EnvelopeParseError(kind, raw)
