"""
Roman numeral endpoints for API v1.

``GET /romannumeral`` converts either a single number
(``?query=N``) or every number of an inclusive range
(``?min=A&max=B``).  Parameters are passed to the service as raw
strings; the service owns parsing and validation.  Rejected requests
are answered with HTTP 400 and an ``Error: ...`` detail message.
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from roman_numeral_api.app.core.errors import ConversionError
from roman_numeral_api.app.schemas.roman import ConversionRangeRead, ConversionRead
from roman_numeral_api.app.services.roman_service import RomanNumeralService

logger = logging.getLogger(__name__)

router = APIRouter()

WELCOME_MESSAGE = (
    "Welcome to the Roman Numeral Converter API.<br>"
    "Use /romannumeral?query=INPUT_NUMBER to convert a specific number to a Roman numeral.<br>"
    "Alternatively, use /romannumeral?min=INPUT_NUMBER&max=INPUT_NUMBER to convert a range of numbers."
)


@router.get("/", response_class=HTMLResponse)
async def home() -> str:
    """Return usage instructions."""
    return WELCOME_MESSAGE


@router.get("/romannumeral", response_model=Union[ConversionRead, ConversionRangeRead])
async def get_roman_numeral(
    query: Optional[str] = Query(None, description="Single number to convert"),
    min_value: Optional[str] = Query(None, alias="min", description="Lower bound of a range"),
    max_value: Optional[str] = Query(None, alias="max", description="Upper bound of a range"),
) -> Union[ConversionRead, ConversionRangeRead]:
    """Convert a number or a range of numbers to Roman numerals.

    Supply either ``query`` alone or both ``min`` and ``max``.  Range
    results are ordered by ascending input.
    """
    logger.info("Received request - query: %s, min: %s, max: %s", query, min_value, max_value)
    try:
        return await RomanNumeralService.process_request(query, min_value, max_value)
    except ConversionError as e:
        logger.info("Rejected request: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Error: {e}") from e
