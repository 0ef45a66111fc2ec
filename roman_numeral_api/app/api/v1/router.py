"""
Top-level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, update this file to include them.
"""

from fastapi import APIRouter

from .endpoints import roman

router = APIRouter()

# The roman router defines its own paths ("/" and "/romannumeral").
# Do not add a prefix here or the converter would move under
# ``/roman/romannumeral``.
router.include_router(roman.router, tags=["roman numerals"])
