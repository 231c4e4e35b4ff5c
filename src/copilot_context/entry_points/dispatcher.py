"""Dispatch of model-issued function calls to registered entry points.

A FunctionCallHandler is built from a fixed snapshot of annotated functions.
Registry changes made after construction are not visible to the handler;
build a new one to pick them up.
"""

import inspect
import json
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from copilot_context.entry_points.types import AnnotatedFunction, FunctionCall
from copilot_context.errors import FunctionArgumentsParseError

logger = logging.getLogger(__name__)


class FunctionCallHandler:
    """Resolves function calls by function name and invokes them.

    Lookups use ``AnnotatedFunction.name``, not the registration id. When two
    functions in the snapshot share a name, the later one wins.

    Calling the handler discards the implementation's result. Use ``invoke``
    to get the result back.
    """

    def __init__(self, functions: Iterable[AnnotatedFunction]) -> None:
        self._functions = tuple(functions)
        self._by_name: dict[str, AnnotatedFunction] = {}
        for function in self._functions:
            self._by_name[function.name] = function

    @property
    def functions(self) -> tuple[AnnotatedFunction, ...]:
        """The snapshot this handler was built from."""
        return self._functions

    @property
    def function_names(self) -> list[str]:
        """Names this handler can resolve."""
        return list(self._by_name)

    async def __call__(
        self,
        chat_messages: Sequence[Any],
        function_call: FunctionCall,
    ) -> None:
        """Handle a function call from the model.

        Args:
            chat_messages: Conversation history at the time of the call
            function_call: The requested call

        Raises:
            FunctionArgumentsParseError: If the argument payload is malformed
        """
        await self.invoke(function_call)

    async def invoke(self, function_call: FunctionCall) -> Any:
        """Invoke the function matching ``function_call`` and return its result.

        Unknown function names are ignored and yield None. Exceptions raised by
        the implementation propagate unchanged.

        Args:
            function_call: The requested call

        Returns:
            The implementation's result, or None for an unknown function

        Raises:
            FunctionArgumentsParseError: If the argument payload is malformed
        """
        function = self._by_name.get(function_call.name)
        if function is None:
            logger.debug(f"Ignoring call to unknown function '{function_call.name}'")
            return None

        arguments = parse_arguments(function_call)
        logger.debug(
            f"Invoking function '{function.name}' with {len(arguments)} argument(s)"
        )

        result = function.implementation(*arguments)
        if inspect.isawaitable(result):
            result = await result
        return result


def parse_arguments(function_call: FunctionCall) -> list[Any]:
    """Parse the positional argument list of a function call.

    Missing or empty argument text means no arguments.

    Raises:
        FunctionArgumentsParseError: If the text is not a JSON array
    """
    if not function_call.arguments:
        return []

    try:
        arguments = json.loads(function_call.arguments)
    except json.JSONDecodeError as e:
        raise FunctionArgumentsParseError(
            function_call.name, function_call.arguments, str(e)
        ) from e

    if not isinstance(arguments, list):
        raise FunctionArgumentsParseError(
            function_call.name,
            function_call.arguments,
            f"expected a JSON array, got {type(arguments).__name__}",
        )
    return arguments


def function_result_message(name: str, result: Any) -> dict[str, str]:
    """Wrap a function result as a chat message for the conversation.

    The handler never does this on its own; integrations that want the
    result fed back to the model call it with the value from ``invoke``.
    """
    return {
        "role": "function",
        "name": name,
        "content": json.dumps(result),
    }
