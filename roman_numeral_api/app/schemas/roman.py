"""
Pydantic schemas for conversion responses.

A single conversion echoes the caller's query string next to the
numeral.  A range conversion wraps one entry per integer in
``conversions``, ordered by ascending input.  Inputs are serialised
as strings on the wire.
"""

from typing import List

from pydantic import BaseModel, Field


class ConversionRead(BaseModel):
    """Schema for one converted number."""

    input: str = Field(..., description="Decimal number as supplied by the client")
    output: str = Field(..., description="Roman numeral for the input")


class ConversionRangeRead(BaseModel):
    """Schema for a range of converted numbers."""

    conversions: List[ConversionRead] = Field(
        ..., description="Conversions ordered by ascending input value"
    )
