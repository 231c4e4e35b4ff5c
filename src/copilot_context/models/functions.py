"""Pydantic models for function schema and function call API requests and responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ParameterSchemaModel(BaseModel):
    """Type and description of one function parameter."""

    type: str = Field(..., description="Parameter type, e.g. 'string'")
    description: str = Field("", description="Parameter description")


class FunctionSchemaModel(BaseModel):
    """A chat-completion function schema."""

    name: str = Field(..., description="Function name")
    description: str = Field("", description="Function description")
    parameters: dict[str, ParameterSchemaModel] = Field(
        default_factory=dict,
        description="Parameters keyed by argument name",
    )


class FunctionListResponse(BaseModel):
    """Response model for listing chat-completion functions."""

    functions: list[FunctionSchemaModel] = Field(
        default_factory=list,
        description="Schemas of all registered entry points",
    )


class ArgumentAnnotationModel(BaseModel):
    """Metadata for one positional argument of an entry point."""

    name: str
    type: str
    description: str

    model_config = ConfigDict(from_attributes=True)


class EntryPointListItem(BaseModel):
    """Metadata for a registered entry point."""

    entry_id: str = Field(..., description="Registration id")
    name: str = Field(..., description="Function name used by the model")
    description: str = Field("", description="Function description")
    argument_annotations: list[ArgumentAnnotationModel] = Field(
        default_factory=list,
        description="Positional arguments in call order",
    )


class EntryPointListResponse(BaseModel):
    """Response model for listing registered entry points."""

    entry_points: list[EntryPointListItem] = Field(default_factory=list)


class FunctionCallRequest(BaseModel):
    """Request model for dispatching a model-issued function call."""

    name: str = Field(..., description="Name of the function to call")
    arguments: str | None = Field(
        None,
        description="JSON array of positional arguments",
    )
    messages: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Conversation history at the time of the call",
    )
