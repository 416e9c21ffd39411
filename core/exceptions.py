"""
Application error taxonomy.
Each error carries the HTTP status it is rendered with at the API boundary.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors raised by services and repositories."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required request field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """No document matches the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(AppError):
    """Any failure reported by the document store."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DatabaseConnectionError(StoreError):
    """The document store could not be reached."""
