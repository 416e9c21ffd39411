"""
Pydantic schemas for the todo API.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TodoCreateRequest(BaseModel):
    """Request model for todo creation. Presence of `text` is checked by the service."""

    text: Optional[str] = Field(None, description="Todo text")

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"text": "buy milk"}]}
    )


class TodoResponse(BaseModel):
    """Response model for a todo."""

    id: str = Field(..., alias="_id", description="Generated identifier")
    text: str
    completed: bool

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "_id": "6541234abcdef0123456789a",
                    "text": "buy milk",
                    "completed": False,
                }
            ]
        },
    )


class TodoToggleResponse(BaseModel):
    """Response model for toggling a todo."""

    message: str
    completed: bool

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"message": "Todo status toggled", "completed": True}]
        }
    )
