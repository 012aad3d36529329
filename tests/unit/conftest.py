"""Unit test configuration.

Unit tests exercise the calculation layer in-process and never load the
FastAPI app; HTTP tests live in tests/api with their own fixtures.
"""
