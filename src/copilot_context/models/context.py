"""Pydantic models for context API requests and responses."""

from pydantic import BaseModel, Field


class AddContextRequest(BaseModel):
    """Request model for adding a context fragment."""

    text: str = Field(..., description="Fragment text")
    parent_id: str | None = Field(
        None,
        description="Optional id of an existing fragment to nest under",
    )


class AddContextResponse(BaseModel):
    """Response model for an added context fragment."""

    id: str = Field(..., description="Id of the new context fragment")


class ContextStringResponse(BaseModel):
    """Response model for the flattened context."""

    context: str = Field(..., description="All context fragments as one outline")
