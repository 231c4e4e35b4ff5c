"""Hierarchical context fragments for prompt assembly."""

from copilot_context.context.tree import DEFAULT_INDENT, ContextNode, ContextTree

__all__ = [
    "DEFAULT_INDENT",
    "ContextNode",
    "ContextTree",
]
