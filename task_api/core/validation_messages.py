"""Validation Messages — turns pydantic error dicts into a field → messages map.

Invariants:
    - Output keys are field names without the request location ("body", "path", ...)
    - Errors not tied to a field are reported under "body"
    - Messages per field keep the order pydantic reported them in, without duplicates
"""

from typing import Any, Iterable

_LOCATIONS = ("body", "query", "path", "header", "cookie")

_REQUIRED = "The {field} field is required."
_MESSAGES = {
    "string_too_long": "The {field} field must not be greater than {max_length} characters.",
    "string_type": "The {field} field must be a string.",
    "bool_type": "The {field} field must be true or false.",
    "bool_parsing": "The {field} field must be true or false.",
    "int_type": "The {field} field must be an integer.",
    "int_parsing": "The {field} field must be an integer.",
    "json_invalid": "The request body must be valid JSON.",
    "model_attributes_type": "The request body must be a JSON object.",
    "dict_type": "The request body must be a JSON object.",
}
_REQUIRED_TYPES = {"missing", "string_too_short"}


def field_name(loc: Iterable[Any]) -> str:
    """Drop the request location prefix and join nested parts with dots."""
    parts = [str(p) for p in loc]
    if parts and parts[0] in _LOCATIONS:
        parts = parts[1:]
    if not parts or parts[0].isdigit():
        return "body"
    return ".".join(parts)


def format_message(error: dict, field: str) -> str:
    """Human-readable message for a single pydantic error."""
    err_type = error.get("type", "")
    if err_type in _REQUIRED_TYPES or (
        "input" in error and error["input"] is None and err_type != "missing"
    ):
        return _REQUIRED.format(field=field.replace("_", " "))
    template = _MESSAGES.get(err_type)
    if template is None:
        return error.get("msg", "Invalid value.")
    ctx = error.get("ctx") or {}
    return template.format(field=field.replace("_", " "), **ctx)


def format_field_errors(errors: Iterable[dict]) -> dict[str, list[str]]:
    """Group pydantic errors by field, as human-readable sentences."""
    result: dict[str, list[str]] = {}
    for error in errors:
        field = field_name(error.get("loc", ()))
        message = format_message(error, field)
        messages = result.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return result


def is_path_error(errors: Iterable[dict]) -> bool:
    """True when any error concerns a path parameter (malformed identifier)."""
    return any(tuple(e.get("loc", ()))[:1] == ("path",) for e in errors)
