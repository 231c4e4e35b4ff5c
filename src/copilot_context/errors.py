"""Exception types raised by copilot-context.

Implementation failures are deliberately absent: anything an entry point
implementation raises propagates to the caller unchanged.
"""


class CopilotContextError(Exception):
    """Base class for all copilot-context errors."""


class FunctionArgumentsParseError(CopilotContextError, ValueError):
    """Raised when a function call carries a malformed argument payload.

    Attributes:
        function_name: Name of the requested function
        arguments: The raw argument text that failed to parse
    """

    def __init__(self, function_name: str, arguments: str, reason: str) -> None:
        self.function_name = function_name
        self.arguments = arguments
        super().__init__(
            f"Invalid arguments for function '{function_name}': {reason}"
        )


class UnknownContextNodeError(CopilotContextError, LookupError):
    """Raised when a context node id does not exist in the tree."""

    def __init__(self, node_id: str, message: str | None = None) -> None:
        self.node_id = node_id
        super().__init__(message or f"Context node '{node_id}' not found")


class UnknownContextParentError(UnknownContextNodeError):
    """Raised when a context fragment is added under a missing parent."""

    def __init__(self, node_id: str) -> None:
        super().__init__(node_id, f"Parent context node '{node_id}' not found")
