"""
Service layer abstraction.

Services hold the conversion logic so that the API handlers, the
command line and tests all call the same code.
"""
