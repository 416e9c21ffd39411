"""
API utility functions for error mapping and response formatting.
"""

from typing import Dict

from fastapi import HTTPException, status

from core.exceptions import AppError
from core.logger import logger

SERVER_ERROR_MESSAGE = "Server error"


def message_response(message: str) -> Dict[str, str]:
    """Body used for confirmations and errors: {"message": ...}."""
    return {"message": message}


def to_http_exception(exception: Exception, action: str) -> HTTPException:
    """
    Convert an exception raised while handling a request into an HTTPException.

    Client errors keep their message; anything else is logged and
    reported as a generic server error.

    Args:
        exception: Exception raised by the service layer
        action: Short description of the failed operation, for logs
    """
    if isinstance(exception, AppError) and exception.status_code < 500:
        logger.warning(f"API: {action} rejected: {exception.message}")
        return HTTPException(status_code=exception.status_code, detail=exception.message)

    logger.error(f"API: Error {action}: {exception}")
    logger.exception(f"API {action} error details:")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=SERVER_ERROR_MESSAGE,
    )
