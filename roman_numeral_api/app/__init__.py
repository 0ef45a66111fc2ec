"""
Application package initializer.

The package is split into ``core`` (settings, logging, errors),
``schemas`` (response bodies), ``services`` (the encoder and request
processing) and ``api`` (versioned HTTP routes).
"""

from .main import app  # noqa: F401
