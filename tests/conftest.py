"""Shared fixtures for runtype tests."""

from __future__ import annotations

import pytest

from runtypes_core import Number, String, Tuple


@pytest.fixture
def pair():
    """Tuple of a number followed by a string."""
    return Tuple(Number, String)
