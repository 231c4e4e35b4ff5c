"""Hierarchical tree of context fragments.

This module provides the ContextTree class which stores free-text fragments
as an ordered forest and flattens them into a single outline string that can
be prepended to a conversation.
"""

import logging
import uuid
from dataclasses import dataclass, field

from copilot_context.errors import UnknownContextNodeError, UnknownContextParentError

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 3


@dataclass
class ContextNode:
    """A single context fragment in the tree."""

    node_id: str
    text: str
    parent_id: str | None = None
    children: list[str] = field(default_factory=list)


class ContextTree:
    """Ordered forest of context fragments.

    Nodes are created under an existing parent (or as a root) and never
    modified afterwards. Removing a node removes its whole subtree, so a
    node's parent is always present in the tree.

    Attributes:
        indent: Number of spaces per depth level in ``print_tree`` output
    """

    def __init__(self, indent: int = DEFAULT_INDENT) -> None:
        """Initialize an empty tree.

        Args:
            indent: Number of spaces per depth level when printing
        """
        if indent < 0:
            raise ValueError("indent cannot be negative")
        self.indent = indent
        self._nodes: dict[str, ContextNode] = {}
        self._roots: list[str] = []

    def add_element(self, text: str, parent_id: str | None = None) -> str:
        """Add a context fragment.

        Args:
            text: Fragment text
            parent_id: Optional id of an existing node to nest under

        Returns:
            The id of the new node

        Raises:
            UnknownContextParentError: If parent_id is not in the tree
        """
        if parent_id is not None and parent_id not in self._nodes:
            raise UnknownContextParentError(parent_id)

        node_id = self.generate_node_id()
        self._nodes[node_id] = ContextNode(
            node_id=node_id, text=text, parent_id=parent_id
        )

        if parent_id is None:
            self._roots.append(node_id)
        else:
            self._nodes[parent_id].children.append(node_id)

        logger.debug(f"Added context node {node_id} (parent: {parent_id})")
        return node_id

    def remove_element(self, node_id: str) -> None:
        """Remove a node and all of its descendants.

        Unknown ids are ignored.
        """
        node = self._nodes.get(node_id)
        if node is None:
            return

        if node.parent_id is None:
            self._roots.remove(node_id)
        else:
            self._nodes[node.parent_id].children.remove(node_id)

        removed = 0
        stack = [node_id]
        while stack:
            current = self._nodes.pop(stack.pop())
            stack.extend(current.children)
            removed += 1

        logger.debug(f"Removed context node {node_id} ({removed} node(s) total)")

    def print_tree(self) -> str:
        """Flatten the tree into a numbered outline.

        Roots come in creation order, each followed depth-first by its
        descendants. Roots are numbered ``1.``, ``2.``; the second child of
        ``1.`` is ``1.2.``. Each depth level is indented by ``indent`` spaces
        and continuation lines of multi-line fragments are aligned with the
        first line's text.

        Returns:
            The outline, one line per text line, each ending with a newline
        """
        lines: list[str] = []
        stack = [
            (self._nodes[root_id], f"{index}.", 0)
            for index, root_id in reversed(list(enumerate(self._roots, start=1)))
        ]
        while stack:
            node, number, depth = stack.pop()
            label = f"{' ' * (self.indent * depth)}{number} "
            first_line, *other_lines = node.text.split("\n")
            lines.append(f"{label}{first_line}")

            continuation = " " * len(label)
            lines.extend(f"{continuation}{line}" for line in other_lines)

            # Reverse creation order so the first child is popped first
            for index in range(len(node.children), 0, -1):
                child = self._nodes[node.children[index - 1]]
                stack.append((child, f"{number}{index}.", depth + 1))

        return "".join(f"{line}\n" for line in lines)

    def get_text(self, node_id: str) -> str:
        """Get the text of a node.

        Raises:
            UnknownContextNodeError: If the node does not exist
        """
        node = self._nodes.get(node_id)
        if node is None:
            raise UnknownContextNodeError(node_id)
        return node.text

    def children(self, node_id: str) -> list[str]:
        """Get the ids of a node's direct children in creation order.

        Raises:
            UnknownContextNodeError: If the node does not exist
        """
        node = self._nodes.get(node_id)
        if node is None:
            raise UnknownContextNodeError(node_id)
        return list(node.children)

    @property
    def roots(self) -> list[str]:
        """Ids of the root nodes in creation order."""
        return list(self._roots)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    @staticmethod
    def generate_node_id() -> str:
        """Generate a unique node id.

        Returns:
            A 32-character hex string
        """
        return uuid.uuid4().hex
