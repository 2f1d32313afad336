"""
Rejection taxonomy for envelope address parsing.

Every failure carries a ParseErrorKind so callers can decide whether to
bounce, log, or reject the SMTP transaction without matching on message text.
"""

from enum import Enum


class ParseErrorKind(Enum):
    """Closed set of reasons an envelope address is rejected."""
    EMPTY_INPUT = 'empty_input'
    UNBALANCED_BRACKETS = 'unbalanced_brackets'
    MISSING_AT_SIGN = 'missing_at_sign'
    MULTIPLE_AT_SIGNS = 'multiple_at_signs'
    EMPTY_LOCAL_PART = 'empty_local_part'
    EMPTY_DOMAIN_PART = 'empty_domain_part'
    WHITESPACE_IN_ADDRESS = 'whitespace_in_address'
    DISALLOWED_CHARACTER = 'disallowed_character'
    DISPLAY_NAME_PRESENT = 'display_name_present'


_MESSAGES = {
    ParseErrorKind.EMPTY_INPUT: "address was empty",
    ParseErrorKind.UNBALANCED_BRACKETS: "address contained malformed brackets",
    ParseErrorKind.MISSING_AT_SIGN: "address did not contain '@'",
    ParseErrorKind.MULTIPLE_AT_SIGNS: "address contained more than one '@'",
    ParseErrorKind.EMPTY_LOCAL_PART: "address local part was empty",
    ParseErrorKind.EMPTY_DOMAIN_PART: "address domain was empty",
    ParseErrorKind.WHITESPACE_IN_ADDRESS: "address contained whitespace",
    ParseErrorKind.DISALLOWED_CHARACTER: "address contained a disallowed character",
    ParseErrorKind.DISPLAY_NAME_PRESENT: "address was preceded by a display name",
}


class EnvelopeParseError(ValueError):
    """
    Raised when a string is not a valid SMTP envelope address.

    Attributes:
        kind: ParseErrorKind identifying the rejection reason
        raw: The input exactly as the caller passed it
    """

    def __init__(self, kind: ParseErrorKind, raw: str):
        self.kind = kind
        self.raw = raw
        super().__init__(f"{_MESSAGES[kind]}: {raw!r}")

    @property
    def reason(self) -> str:
        """Human-readable description of the kind, without the input."""
        return _MESSAGES[self.kind]
