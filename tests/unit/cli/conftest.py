"""Shared fixtures for CLI tests."""

import re

import pytest

# Regex to strip ANSI escape codes
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def ansi_stripper():
    """Return a function removing ANSI escape codes from text."""
    return lambda text: ANSI_ESCAPE.sub("", text)
