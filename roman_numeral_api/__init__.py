"""
Top-level package for the Roman Numeral Converter API.

All functionality lives in submodules under ``app``; run
``python -m roman_numeral_api`` for the command line converter.
"""

__all__ = []
