"""Pytest fixtures shared across the Roman numeral test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from roman_numeral_api.app.main import app


ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def decode(numeral: str) -> int:
    """Decode a Roman numeral with the standard subtractive rule."""
    total = 0
    for current, following in zip(numeral, numeral[1:] + " "):
        value = ROMAN_VALUES[current]
        if following != " " and value < ROMAN_VALUES[following]:
            total -= value
        else:
            total += value
    return total


@pytest.fixture
def client() -> TestClient:
    """Return a test client bound to the application."""
    return TestClient(app)


@pytest.fixture(name="decode")
def decode_fixture():
    """Return the reference numeral decoder."""
    return decode
