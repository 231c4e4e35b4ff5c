"""Conversion of annotated functions to chat-completion function schemas."""

from collections.abc import Iterable

from copilot_context.entry_points.types import (
    AnnotatedFunction,
    FunctionSchema,
    ParameterSchema,
)


def to_schema(function: AnnotatedFunction) -> FunctionSchema:
    """Translate one annotated function into its model-facing schema.

    Parameters are keyed by argument name, so argument order is not carried
    over. Metadata is passed through as given.
    """
    parameters: dict[str, ParameterSchema] = {}
    for annotation in function.argument_annotations:
        parameters[annotation.name] = ParameterSchema(
            type=annotation.type,
            description=annotation.description,
        )

    return FunctionSchema(
        name=function.name,
        description=function.description,
        parameters=parameters,
    )


def to_schemas(functions: Iterable[AnnotatedFunction]) -> list[FunctionSchema]:
    """Translate functions into schemas, one per function, preserving order."""
    return [to_schema(function) for function in functions]
