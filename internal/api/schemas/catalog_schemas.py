"""
Pydantic schemas for the portfolio catalog API.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProjectCreateRequest(BaseModel):
    """
    Request model for catalog entry creation.
    `name`, `githubLink` and `owner` are required; the service rejects them when empty.
    """

    name: Optional[str] = Field(None, description="Project name")
    github_link: Optional[str] = Field(
        None, alias="githubLink", description="Repository URL"
    )
    report_link: Optional[str] = Field(
        None, alias="reportLink", description="Report URL"
    )
    media_link: Optional[str] = Field(None, alias="mediaLink", description="Media URL")
    owner: Optional[str] = Field(None, description="Project owner")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Portfolio",
                    "githubLink": "https://github.com/octocat/portfolio",
                    "reportLink": "https://example.com/report.pdf",
                    "mediaLink": "https://example.com/demo.mp4",
                    "owner": "octocat",
                }
            ]
        },
    )


class ProjectResponse(BaseModel):
    """Response model for a catalog entry. Absent optional links are omitted."""

    id: str = Field(..., alias="_id", description="Generated identifier")
    name: str
    github_link: str = Field(..., alias="githubLink")
    report_link: Optional[str] = Field(None, alias="reportLink")
    media_link: Optional[str] = Field(None, alias="mediaLink")
    owner: str

    model_config = ConfigDict(populate_by_name=True)
