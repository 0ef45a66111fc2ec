"""Tests for roman_numeral_client.py."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import requests

from roman_numeral_client import RomanNumeralClient


def make_response(status_code, payload=None, text=""):
    response = requests.Response()
    response.status_code = status_code
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.url = "http://testserver/romannumeral"
    return response


class TestRomanNumeralClient:
    def test_convert(self):
        session = MagicMock()
        session.get.return_value = make_response(200, {"input": "4", "output": "IV"})
        client = RomanNumeralClient(base_url="http://testserver/", session=session)

        data, error = client.convert(4)

        assert error is None
        assert data == {"input": "4", "output": "IV"}
        session.get.assert_called_once_with(
            "http://testserver/romannumeral", params={"query": "4"}, timeout=15
        )

    def test_convert_range_sends_bounds(self):
        session = MagicMock()
        session.get.return_value = make_response(
            200, {"conversions": [{"input": "1", "output": "I"}, {"input": "2", "output": "II"}]}
        )
        client = RomanNumeralClient(base_url="http://testserver/api/v1", session=session, timeout=3)

        data, error = client.convert_range(1, 2)

        assert error is None
        assert [c["output"] for c in data["conversions"]] == ["I", "II"]
        session.get.assert_called_once_with(
            "http://testserver/api/v1/romannumeral", params={"min": "1", "max": "2"}, timeout=3
        )

    def test_http_error_uses_detail(self):
        session = MagicMock()
        session.get.return_value = make_response(400, {"detail": "Error: Invalid input"})
        client = RomanNumeralClient(base_url="http://testserver", session=session)

        data, error = client.convert("abc")

        assert data is None
        assert error == {"status_code": 400, "message": "Error: Invalid input"}

    def test_http_error_without_json(self):
        session = MagicMock()
        session.get.return_value = make_response(502, text="Bad Gateway")
        client = RomanNumeralClient(base_url="http://testserver", session=session)

        data, error = client.convert(1)

        assert data is None
        assert error == {"status_code": 502, "message": "Bad Gateway"}

    def test_connection_error(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("refused")
        client = RomanNumeralClient(base_url="http://testserver", session=session)

        data, error = client.convert(1)

        assert data is None
        assert error == {"status_code": None, "message": "refused"}
