"""Unit tests for EntryPointRegistry and AnnotatedFunction."""

import pytest

from copilot_context.entry_points import (
    AnnotatedFunction,
    ArgumentAnnotation,
    EntryPointRegistry,
)


def make_function(name: str, description: str = "") -> AnnotatedFunction:
    """Create an AnnotatedFunction with a no-op implementation."""
    return AnnotatedFunction(
        name=name,
        description=description,
        implementation=lambda *args: None,
    )


def test_annotated_function_requires_name():
    """Test that an empty function name is rejected."""
    with pytest.raises(ValueError, match="cannot be empty"):
        make_function("")


def test_annotated_function_freezes_annotations():
    """Test that argument annotations are stored as a tuple."""
    fn = AnnotatedFunction(
        name="greet",
        implementation=lambda name: None,
        argument_annotations=[ArgumentAnnotation(name="name")],
    )

    assert fn.argument_annotations == (ArgumentAnnotation(name="name"),)
    assert fn.argument_annotations[0].type == "string"
    assert fn.argument_annotations[0].description == ""


def test_registry_starts_empty():
    """Test that a new registry has no entries."""
    registry = EntryPointRegistry()
    assert len(registry) == 0
    assert registry.snapshot() == ()
    assert dict(registry.entries) == {}


def test_set_entry_point():
    """Test registering entry points under ids."""
    registry = EntryPointRegistry()
    first = make_function("first")
    second = make_function("second")

    registry.set_entry_point("id-1", first)
    registry.set_entry_point("id-2", second)

    assert registry.snapshot() == (first, second)
    assert registry.entries["id-1"] is first
    assert "id-2" in registry


def test_set_entry_point_overwrites_in_place():
    """Test that overwriting replaces the value and keeps its position."""
    registry = EntryPointRegistry()
    registry.set_entry_point("a", make_function("a"))
    registry.set_entry_point("b", make_function("b"))
    replacement = make_function("a", description="new")

    registry.set_entry_point("a", replacement)

    assert len(registry) == 2
    assert registry.snapshot()[0] is replacement
    assert registry.entries["a"].description == "new"


def test_registration_id_independent_of_name():
    """Test that ids and function names are not required to match."""
    registry = EntryPointRegistry()
    registry.set_entry_point("one", make_function("shared"))
    registry.set_entry_point("two", make_function("shared"))

    assert len(registry) == 2


def test_remove_entry_point():
    """Test removing an entry point."""
    registry = EntryPointRegistry()
    kept = make_function("kept")
    registry.set_entry_point("gone", make_function("gone"))
    registry.set_entry_point("kept", kept)

    registry.remove_entry_point("gone")

    assert registry.snapshot() == (kept,)
    assert "gone" not in registry


def test_remove_entry_point_is_idempotent():
    """Test that removing twice equals removing once, and unknown ids are ignored."""
    registry = EntryPointRegistry()
    registry.set_entry_point("a", make_function("a"))

    registry.remove_entry_point("a")
    registry.remove_entry_point("a")
    registry.remove_entry_point("never-registered")

    assert len(registry) == 0


def test_snapshot_reflects_latest_values():
    """Test that snapshot holds exactly the live entries with latest values."""
    registry = EntryPointRegistry()
    expected: dict[str, AnnotatedFunction] = {}
    operations = [
        ("set", "a", "v1"),
        ("set", "b", "v1"),
        ("set", "a", "v2"),
        ("remove", "b", None),
        ("set", "c", "v1"),
        ("remove", "x", None),
        ("set", "b", "v3"),
    ]

    for op, entry_id, version in operations:
        if op == "set":
            fn = make_function(entry_id, description=version)
            registry.set_entry_point(entry_id, fn)
            expected[entry_id] = fn
        else:
            registry.remove_entry_point(entry_id)
            expected.pop(entry_id, None)

    assert set(registry.snapshot()) == set(expected.values())
    assert dict(registry.entries) == expected


def test_snapshot_is_detached_from_registry():
    """Test that later mutations do not change an earlier snapshot."""
    registry = EntryPointRegistry()
    fn = make_function("a")
    registry.set_entry_point("a", fn)

    snapshot = registry.snapshot()
    registry.remove_entry_point("a")

    assert snapshot == (fn,)


def test_entries_view_is_read_only():
    """Test that the entries view cannot be mutated."""
    registry = EntryPointRegistry()

    with pytest.raises(TypeError):
        registry.entries["a"] = make_function("a")  # type: ignore[index]
