"""Tests for app/services/numeral_encoder.py."""

from __future__ import annotations

import pytest

from roman_numeral_api.app.services.numeral_encoder import (
    MAX_VALUE,
    MIN_VALUE,
    NUMERAL_TABLE,
    encode,
)


class TestNumeralTable:
    def test_strictly_descending(self):
        values = [value for value, _ in NUMERAL_TABLE]
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == len(values)

    def test_contains_subtractive_forms(self):
        table = dict(NUMERAL_TABLE)
        assert table[900] == "CM"
        assert table[400] == "CD"
        assert table[90] == "XC"
        assert table[40] == "XL"
        assert table[9] == "IX"
        assert table[4] == "IV"

    def test_is_immutable(self):
        assert isinstance(NUMERAL_TABLE, tuple)


class TestEncode:
    @pytest.mark.parametrize(
        "number, expected",
        [
            (1, "I"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (90, "XC"),
            (400, "CD"),
            (444, "CDXLIV"),
            (999, "CMXCIX"),
            (1994, "MCMXCIV"),
            (2024, "MMXXIV"),
            (3888, "MMMDCCCLXXXVIII"),
            (3999, "MMMCMXCIX"),
        ],
    )
    def test_known_values(self, number, expected):
        assert encode(number) == expected

    def test_deterministic(self):
        assert encode(1987) == encode(1987)

    def test_whole_domain_decodes_back(self, decode):
        numerals = set()
        for number in range(MIN_VALUE, MAX_VALUE + 1):
            numeral = encode(number)
            assert decode(numeral) == number
            numerals.add(numeral)
        assert len(numerals) == MAX_VALUE

    def test_no_symbol_repeated_four_times(self):
        for number in range(MIN_VALUE, MAX_VALUE + 1):
            numeral = encode(number)
            for symbol in "IXC":
                assert symbol * 4 not in numeral
