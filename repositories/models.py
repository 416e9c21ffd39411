"""
MongoDB document models using Pydantic.
The MongoDB `_id` is exposed as a string field aliased to `_id`.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from repositories.objectid_utils import objectid_to_str


class DocumentModel(BaseModel):
    """Base for documents whose `_id` is generated by MongoDB."""

    id: Optional[str] = Field(None, alias="_id", description="MongoDB _id as string")

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for MongoDB insertion.
        Excludes the id (MongoDB generates `_id`) and unset optional fields.
        """
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Create from MongoDB document.
        Converts MongoDB _id (ObjectId) to its string form.
        """
        data = dict(data)
        if "_id" in data:
            data["_id"] = objectid_to_str(data["_id"])
        return cls.model_validate(data)


class TodoModel(DocumentModel):
    """Model for a todo item (MongoDB document)."""

    text: str = Field(..., description="Todo text")
    completed: bool = Field(default=False, description="Completion flag")


class ProjectModel(DocumentModel):
    """Model for a portfolio catalog entry (MongoDB document)."""

    name: str = Field(..., description="Project name")
    github_link: str = Field(..., alias="githubLink", description="Repository URL")
    report_link: Optional[str] = Field(
        None, alias="reportLink", description="Report URL"
    )
    media_link: Optional[str] = Field(None, alias="mediaLink", description="Media URL")
    owner: str = Field(..., description="Project owner")
