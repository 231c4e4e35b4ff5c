"""In-memory registry of entry points keyed by registration id."""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from copilot_context.entry_points.types import AnnotatedFunction

logger = logging.getLogger(__name__)


class EntryPointRegistry:
    """Maps caller-chosen registration ids to annotated functions.

    The registration id does not have to match ``AnnotatedFunction.name``.
    Replacing an entry keeps its original position in iteration order.
    """

    def __init__(self) -> None:
        self._entries: dict[str, AnnotatedFunction] = {}

    @property
    def entries(self) -> Mapping[str, AnnotatedFunction]:
        """Read-only live view of the registered entry points."""
        return MappingProxyType(self._entries)

    def set_entry_point(self, entry_id: str, entry_point: AnnotatedFunction) -> None:
        """Insert or replace the entry point registered under ``entry_id``.

        Args:
            entry_id: Registration id
            entry_point: Function to register
        """
        replaced = entry_id in self._entries
        self._entries[entry_id] = entry_point
        logger.debug(
            f"{'Replaced' if replaced else 'Registered'} entry point "
            f"'{entry_id}' ({entry_point.name})"
        )

    def remove_entry_point(self, entry_id: str) -> None:
        """Remove the entry point registered under ``entry_id``, if any."""
        if self._entries.pop(entry_id, None) is not None:
            logger.debug(f"Removed entry point '{entry_id}'")

    def snapshot(self) -> tuple[AnnotatedFunction, ...]:
        """Return the registered functions in insertion order."""
        return tuple(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries
