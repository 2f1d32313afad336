"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('SMTP_ENVELOPE_LOG_LEVEL', 'DEBUG')


@pytest.fixture
def bracketed_address():
    """Mixed-case bracketed path as it arrives in a MAIL FROM argument."""
    return " <User@Example.COM> "
