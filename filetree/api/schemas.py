"""
Pydantic models for API responses.
"""

from pydantic import BaseModel, ConfigDict, Field


class FileInfo(BaseModel):
    """Schema for one entry of a listing."""

    model_config = ConfigDict(populate_by_name=True)

    path: str = Field(..., description="Logical path built from the requested segments")
    name: str = Field(..., description="Entry name")
    type: str = Field(
        ..., description="'directory', a MIME type or '<unknown_type>'"
    )
    is_expandable: bool = Field(
        ...,
        alias="isExpandable",
        description="Whether the entry is a directory or a supported container type",
    )

    @classmethod
    def from_entity(cls, file_data):
        """Create a FileInfo schema from a FileData entity."""
        details = file_data.get_details()
        return cls(
            path=details["path"],
            name=details["name"],
            type=details["type"],
            is_expandable=details["isExpandable"],
        )


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
