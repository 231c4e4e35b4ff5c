"""Entry point registration, schema translation, and call dispatch.

This package holds the registry of callable entry points, converts them to
chat-completion function schemas, and dispatches model-issued calls.
"""

from copilot_context.entry_points.dispatcher import (
    FunctionCallHandler,
    function_result_message,
    parse_arguments,
)
from copilot_context.entry_points.registry import EntryPointRegistry
from copilot_context.entry_points.schemas import to_schema, to_schemas
from copilot_context.entry_points.types import (
    AnnotatedFunction,
    ArgumentAnnotation,
    FunctionCall,
    FunctionSchema,
    ParameterSchema,
)

__all__ = [
    # Core classes
    "EntryPointRegistry",
    "FunctionCallHandler",
    # Functions
    "function_result_message",
    "parse_arguments",
    "to_schema",
    "to_schemas",
    # Data types
    "AnnotatedFunction",
    "ArgumentAnnotation",
    "FunctionCall",
    "FunctionSchema",
    "ParameterSchema",
]
