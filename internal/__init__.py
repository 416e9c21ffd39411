"""
Internal package.
Contains the HTTP API: routes, schemas and API-related utilities.
"""

from . import api

__all__ = [
    "api",
]
