"""
Service layer for Roman numeral conversion.

Requests arrive as raw strings exactly as the client supplied them.
The service decides which mode the request is in (a single ``query``
or a ``min``/``max`` range), validates every number, and converts.

Range conversions are spread over a thread pool, one task per
integer.  Tasks finish in arbitrary order, so the collected results
are sorted by input before they are returned; the response never
depends on scheduling.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Union

from roman_numeral_api.app.core.config import settings
from roman_numeral_api.app.core.errors import (
    InvalidInput,
    InvalidParameters,
    InvalidRange,
    OutOfRange,
)
from roman_numeral_api.app.schemas.roman import ConversionRangeRead, ConversionRead
from roman_numeral_api.app.services.numeral_encoder import MAX_VALUE, MIN_VALUE, encode

logger = logging.getLogger(__name__)

# Unsigned decimal literal without leading zeros.  ASCII digits only:
# ``\d`` would also accept other Unicode digits.
INTEGER_PATTERN = re.compile(r"0|[1-9][0-9]*")


@dataclass(frozen=True)
class ConversionResult:
    """One converted number."""

    input: int
    output: str


@dataclass(frozen=True)
class SingleQuery:
    raw: str


@dataclass(frozen=True)
class RangeQuery:
    raw_min: str
    raw_max: str


ConversionRequest = Union[SingleQuery, RangeQuery]


class RomanNumeralService:
    """Service class converting request parameters to Roman numerals."""

    @staticmethod
    def validate_integer(raw: str) -> int:
        """Parse ``raw`` as an integer in the convertible domain.

        Raises ``InvalidInput`` if ``raw`` is not a plain unsigned
        integer literal (signs, expressions, leading zeros and
        whitespace are all rejected) and ``OutOfRange`` if the value
        lies outside 1..3999.
        """
        if not INTEGER_PATTERN.fullmatch(raw):
            raise InvalidInput()
        # Longer literals are out of range anyway, and int() refuses
        # very long digit strings.
        if len(raw) > len(str(MAX_VALUE)):
            raise OutOfRange()
        number = int(raw)
        if number < MIN_VALUE or number > MAX_VALUE:
            raise OutOfRange()
        return number

    @staticmethod
    def parse_request(
        query: Optional[str], min_value: Optional[str], max_value: Optional[str]
    ) -> ConversionRequest:
        """Classify the parameters as a single query or a range query."""
        if query is not None and min_value is None and max_value is None:
            return SingleQuery(query)
        if query is None and min_value is not None and max_value is not None:
            return RangeQuery(min_value, max_value)
        raise InvalidParameters()

    @classmethod
    def convert(cls, number: int) -> ConversionResult:
        numeral = encode(number)
        logger.debug("Converted %s to %s", number, numeral)
        return ConversionResult(input=number, output=numeral)

    @classmethod
    def convert_range(
        cls, low: int, high: int, max_workers: Optional[int] = None
    ) -> List[ConversionResult]:
        """Convert every integer in ``low..high`` inclusive.

        Each integer is submitted as its own task.  The call blocks
        until all tasks have finished and returns the results sorted
        by ascending input.  An exception in any task propagates.
        """
        numbers = range(low, high + 1)
        workers = max(1, min(max_workers or settings.max_workers, len(numbers)))
        logger.debug("Converting %s..%s with %s workers", low, high, workers)
        results: List[ConversionResult] = []
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(cls.convert, number) for number in numbers]
            for future in concurrent.futures.as_completed(futures):
                results.append(future.result())
        results.sort(key=lambda result: result.input)
        return results

    @classmethod
    async def process_request(
        cls,
        query: Optional[str] = None,
        min_value: Optional[str] = None,
        max_value: Optional[str] = None,
    ) -> Union[ConversionRead, ConversionRangeRead]:
        """Validate the raw parameters and perform the conversion.

        Returns a ``ConversionRead`` echoing the original query string
        in single mode, or a ``ConversionRangeRead`` in range mode.
        Raises a ``ConversionError`` subclass for any rejected input;
        there is never a partial result.
        """
        request = cls.parse_request(query, min_value, max_value)
        if isinstance(request, SingleQuery):
            number = cls.validate_integer(request.raw)
            result = cls.convert(number)
            return ConversionRead(input=request.raw, output=result.output)

        low = cls.validate_integer(request.raw_min)
        high = cls.validate_integer(request.raw_max)
        if low >= high:
            raise InvalidRange()
        # The pool blocks, so keep it off the event loop.
        results = await asyncio.to_thread(cls.convert_range, low, high)
        return ConversionRangeRead(
            conversions=[
                ConversionRead(input=str(result.input), output=result.output)
                for result in results
            ]
        )
