"""
Convert numbers to Roman numerals from the command line.

The arguments are handed to the service as raw strings, so the
command line accepts and rejects exactly what the HTTP API does.

Usage:
    python -m roman_numeral_api --query 2024
    python -m roman_numeral_api --min 1 --max 10

The response body is printed as JSON.  Rejected input is reported on
stderr with exit status 1.
"""

import argparse
import asyncio
import sys

from roman_numeral_api.app.core.errors import ConversionError
from roman_numeral_api.app.services.roman_service import RomanNumeralService


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Convert integers (1-3999) to Roman numerals.")
    ap.add_argument("--query", help="Single number to convert")
    ap.add_argument("--min", dest="min_value", help="Lower bound of an inclusive range")
    ap.add_argument("--max", dest="max_value", help="Upper bound of an inclusive range")
    args = ap.parse_args(argv)

    try:
        body = asyncio.run(
            RomanNumeralService.process_request(args.query, args.min_value, args.max_value)
        )
    except ConversionError as e:
        print(f"[!] Error: {e}", file=sys.stderr)
        return 1

    print(body.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
