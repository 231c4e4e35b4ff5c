"""Data types for entry points and function calls.

This module defines the in-memory representation of a callable entry point,
the model-issued function call request, and the model-facing schema shape.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypedDict


@dataclass(frozen=True)
class ArgumentAnnotation:
    """Metadata for one positional argument of an entry point."""

    name: str
    type: str = "string"
    description: str = ""


@dataclass(frozen=True)
class AnnotatedFunction:
    """A callable operation plus metadata about its arguments.

    Attributes:
        name: Name the model uses to request this function
        description: Human-readable description, may be empty
        argument_annotations: One annotation per positional argument, in call order
        implementation: Callable invoked with the parsed positional arguments.
            May return a value or an awaitable.
    """

    name: str
    implementation: Callable[..., Any]
    description: str = ""
    argument_annotations: tuple[ArgumentAnnotation, ...] = field(
        default_factory=tuple
    )

    def __post_init__(self) -> None:
        """Validate the name and freeze the annotation sequence."""
        if not self.name:
            raise ValueError("AnnotatedFunction name cannot be empty")
        object.__setattr__(
            self, "argument_annotations", tuple(self.argument_annotations)
        )


@dataclass(frozen=True)
class FunctionCall:
    """A function call requested by the model.

    ``arguments`` is the JSON text of a positional argument list, or None
    when the model supplied no arguments.
    """

    name: str
    arguments: str | None = None


class ParameterSchema(TypedDict):
    """Type and description of a single function parameter."""

    type: str
    description: str


class FunctionSchema(TypedDict):
    """Chat-completion description of a callable function."""

    name: str
    description: str
    parameters: dict[str, ParameterSchema]
