"""
Common API schemas shared across different endpoints.
"""

from pydantic import BaseModel, ConfigDict


class MessageResponse(BaseModel):
    """Plain message body, used for confirmations and for every error."""

    message: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"message": "Todo deleted"},
                {"message": "Todo not found"},
            ]
        }
    )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    service: str
    version: str
    database: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "service": "Todo & Catalog API",
                    "version": "1.0.0",
                    "database": "connected",
                }
            ]
        }
    )
