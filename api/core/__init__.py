"""
Core utilities shared across the records API.

This package hosts configuration, logging setup, the error taxonomy, the
request body pipeline and the response helpers. Feature-specific SQL lives in
``api.repositories``.
"""
