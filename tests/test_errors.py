"""
Tests for the parse error taxonomy.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from smtp_envelope import EnvelopeParseError, ParseErrorKind


class TestParseErrorKind:
    """Test the error kind enum."""

    def test_all_kinds_present(self):
        """Test the taxonomy has every rejection reason."""
        assert {kind.name for kind in ParseErrorKind} == {
            'EMPTY_INPUT',
            'UNBALANCED_BRACKETS',
            'MISSING_AT_SIGN',
            'MULTIPLE_AT_SIGNS',
            'EMPTY_LOCAL_PART',
            'EMPTY_DOMAIN_PART',
            'WHITESPACE_IN_ADDRESS',
            'DISALLOWED_CHARACTER',
            'DISPLAY_NAME_PRESENT',
        }

    def test_values_are_distinct(self):
        """Test every kind has its own value."""
        values = [kind.value for kind in ParseErrorKind]

        assert len(values) == len(set(values))


class TestEnvelopeParseError:
    """Test the parse exception."""

    def test_attributes(self):
        """Test kind and raw are exposed."""
        error = EnvelopeParseError(ParseErrorKind.MISSING_AT_SIGN, "nobody")

        assert error.kind is ParseErrorKind.MISSING_AT_SIGN
        assert error.raw == "nobody"
        assert error.reason == "address did not contain '@'"

    def test_message_includes_input(self):
        """Test str() names the reason and the input."""
        error = EnvelopeParseError(ParseErrorKind.EMPTY_INPUT, "  ")

        assert str(error) == "address was empty: '  '"

    def test_every_kind_has_message(self):
        """Test no kind is missing a message."""
        for kind in ParseErrorKind:
            assert EnvelopeParseError(kind, "x").reason

    def test_is_value_error(self):
        """Test subclass of ValueError."""
        assert issubclass(EnvelopeParseError, ValueError)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
