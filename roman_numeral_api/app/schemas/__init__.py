"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON bodies returned by the API and are kept
apart from the service layer's internal result types.
"""
