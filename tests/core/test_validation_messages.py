"""Validation Messages — pydantic error dicts to field → messages map."""

from task_api.core.validation_messages import (
    field_name, format_field_errors, format_message, is_path_error,
)


def test_field_name_strips_location():
    assert field_name(("body", "title")) == "title"


def test_field_name_joins_nested_parts():
    assert field_name(("body", "meta", "tags")) == "meta.tags"


def test_field_name_without_field_is_body():
    assert field_name(("body",)) == "body"
    assert field_name(("body", 7)) == "body"


def test_missing_is_required():
    msg = format_message({"type": "missing", "loc": ("body", "title")}, "title")
    assert msg == "The title field is required."


def test_null_input_is_required_for_any_type():
    msg = format_message({"type": "string_type", "input": None}, "title")
    assert msg == "The title field is required."


def test_too_long_uses_ctx_limit():
    msg = format_message(
        {"type": "string_too_long", "ctx": {"max_length": 255}, "input": "x"}, "title",
    )
    assert msg == "The title field must not be greater than 255 characters."


def test_unknown_type_falls_back_to_pydantic_message():
    msg = format_message({"type": "weird", "msg": "Something odd", "input": 1}, "x")
    assert msg == "Something odd"


def test_underscores_become_spaces_in_message():
    msg = format_message({"type": "missing"}, "due_date")
    assert msg == "The due date field is required."


def test_format_field_errors_groups_and_dedupes():
    errors = [
        {"type": "missing", "loc": ("body", "title")},
        {"type": "string_too_short", "loc": ("body", "title"), "input": ""},
        {"type": "bool_parsing", "loc": ("body", "completed"), "input": "x"},
    ]
    assert format_field_errors(errors) == {
        "title": ["The title field is required."],
        "completed": ["The completed field must be true or false."],
    }


def test_is_path_error():
    assert is_path_error([{"loc": ("path", "task_id"), "type": "int_parsing"}])
    assert not is_path_error([{"loc": ("body", "title"), "type": "missing"}])
