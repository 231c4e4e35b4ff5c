"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from copilot_context.models.context import (
    AddContextRequest,
    AddContextResponse,
    ContextStringResponse,
)
from copilot_context.models.functions import (
    ArgumentAnnotationModel,
    EntryPointListItem,
    EntryPointListResponse,
    FunctionCallRequest,
    FunctionListResponse,
    FunctionSchemaModel,
    ParameterSchemaModel,
)
from copilot_context.models.health import HealthResponse

__all__ = [
    "AddContextRequest",
    "AddContextResponse",
    "ArgumentAnnotationModel",
    "ContextStringResponse",
    "EntryPointListItem",
    "EntryPointListResponse",
    "FunctionCallRequest",
    "FunctionListResponse",
    "FunctionSchemaModel",
    "HealthResponse",
    "ParameterSchemaModel",
]
