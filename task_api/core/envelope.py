"""Response Envelope — the {success, message, data} wrapper for successful responses."""

from typing import Any


def success(data: Any = None, message: str | None = None) -> dict:
    """Wrap a payload in the success envelope, omitting absent keys."""
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body
