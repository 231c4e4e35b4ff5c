"""copilot-context: entry points and prompt context for chat-completion copilots.

This package lets a host application register callable entry points and
hierarchical context fragments, exposes them as chat-completion function
schemas and a flattened context string, and dispatches model-issued
function calls back to the registered implementations.
"""

# Set before the submodule imports, which read it while the package initializes
__version__ = "0.1.0"

from copilot_context.app import create_app  # noqa: E402
from copilot_context.copilot import CopilotContext  # noqa: E402
from copilot_context.entry_points import (  # noqa: E402
    AnnotatedFunction,
    ArgumentAnnotation,
    FunctionCall,
    FunctionCallHandler,
)

__all__ = [
    "AnnotatedFunction",
    "ArgumentAnnotation",
    "CopilotContext",
    "FunctionCall",
    "FunctionCallHandler",
    "create_app",
    "__version__",
]
