"""Unit tests for chat-completion schema translation."""

from copilot_context.entry_points import (
    AnnotatedFunction,
    ArgumentAnnotation,
    to_schema,
    to_schemas,
)


def test_to_schema_builds_parameters():
    """Test translating a function with annotated arguments."""
    fn = AnnotatedFunction(
        name="set_color",
        description="Change the page color",
        implementation=lambda color, opacity: None,
        argument_annotations=[
            ArgumentAnnotation(name="color", type="string", description="CSS color"),
            ArgumentAnnotation(name="opacity", type="number", description="0 to 1"),
        ],
    )

    assert to_schema(fn) == {
        "name": "set_color",
        "description": "Change the page color",
        "parameters": {
            "color": {"type": "string", "description": "CSS color"},
            "opacity": {"type": "number", "description": "0 to 1"},
        },
    }


def test_to_schema_without_arguments():
    """Test that a function without arguments has empty parameters."""
    fn = AnnotatedFunction(name="refresh", implementation=lambda: None)

    schema = to_schema(fn)

    assert schema["parameters"] == {}
    assert schema["description"] == ""


def test_to_schemas_preserves_order_and_count():
    """Test N functions give N schemas in matching order."""
    functions = [
        AnnotatedFunction(
            name=f"fn_{i}",
            implementation=lambda *args: None,
            argument_annotations=[
                ArgumentAnnotation(name=f"arg_{j}") for j in range(i)
            ],
        )
        for i in range(5)
    ]

    schemas = to_schemas(functions)

    assert len(schemas) == 5
    for fn, schema in zip(functions, schemas):
        assert schema["name"] == fn.name
        assert set(schema["parameters"]) == {
            a.name for a in fn.argument_annotations
        }


def test_to_schemas_empty():
    """Test translating no functions."""
    assert to_schemas([]) == []
