"""Aggregate facade over the entry point registry and the context tree.

This module provides the CopilotContext class, the single read/write surface
an integration layer uses to expose callable functions and prompt context to
a chat-completion service.
"""

import uuid
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from copilot_context.context import ContextTree
from copilot_context.entry_points import (
    AnnotatedFunction,
    EntryPointRegistry,
    FunctionCallHandler,
    FunctionSchema,
    to_schemas,
)


class CopilotContext:
    """Owns the entry point registry and the context tree.

    Both collaborators can be injected, which lets several facades share
    state or lets tests supply pre-populated instances.

    Attributes:
        registry: Registry of entry points keyed by registration id
        tree: Tree of context fragments
    """

    def __init__(
        self,
        registry: EntryPointRegistry | None = None,
        tree: ContextTree | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            registry: Optional registry, a new empty one is created if omitted
            tree: Optional context tree, a new empty one is created if omitted
        """
        self.registry = registry if registry is not None else EntryPointRegistry()
        self.tree = tree if tree is not None else ContextTree()

    # --- Entry points ---

    @property
    def entry_points(self) -> Mapping[str, AnnotatedFunction]:
        """Read-only view of the registered entry points by id."""
        return self.registry.entries

    def set_entry_point(self, entry_id: str, entry_point: AnnotatedFunction) -> None:
        self.registry.set_entry_point(entry_id, entry_point)

    def remove_entry_point(self, entry_id: str) -> None:
        self.registry.remove_entry_point(entry_id)

    def get_chat_completion_functions(self) -> list[FunctionSchema]:
        """Get schemas for every registered entry point."""
        return to_schemas(self.registry.snapshot())

    def get_function_call_handler(self) -> FunctionCallHandler:
        """Build a handler bound to the entry points registered right now."""
        return FunctionCallHandler(self.registry.snapshot())

    @contextmanager
    def actionable(
        self, entry_point: AnnotatedFunction, entry_id: str | None = None
    ) -> Iterator[str]:
        """Register an entry point for the duration of a ``with`` block.

        Args:
            entry_point: Function to register
            entry_id: Registration id, a fresh one is generated if omitted

        Yields:
            The registration id
        """
        entry_id = entry_id or uuid.uuid4().hex
        self.set_entry_point(entry_id, entry_point)
        try:
            yield entry_id
        finally:
            self.remove_entry_point(entry_id)

    # --- Context ---

    def get_context_string(self) -> str:
        return self.tree.print_tree()

    def add_context(self, text: str, parent_id: str | None = None) -> str:
        """Add a context fragment, optionally nested under ``parent_id``.

        Raises:
            UnknownContextParentError: If parent_id is not in the tree
        """
        return self.tree.add_element(text, parent_id)

    def remove_context(self, node_id: str) -> None:
        self.tree.remove_element(node_id)

    @contextmanager
    def readable(self, text: str, parent_id: str | None = None) -> Iterator[str]:
        """Add a context fragment for the duration of a ``with`` block.

        The fragment and anything added under it are removed on exit.

        Yields:
            The context node id
        """
        node_id = self.add_context(text, parent_id)
        try:
            yield node_id
        finally:
            self.remove_context(node_id)
