# /schoolhub/core/errors.py

"""
Error types shared by the service layer and the routers.

Services raise these (or a plain `ValueError` for malformed input); routers
translate them into HTTP responses. Backend failures (`SQLAlchemyError`) are
never caught here: they travel up unchanged and are turned into a generic 500
by the application-level handler registered in `main.py`.
"""

import json

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class AccessDenied(Exception):
    """The caller is authenticated but the target lies outside their scope."""


class ResourceNotFound(LookupError):
    """
    The target does not exist OR the caller may not see it.

    Both cases are reported identically so that responses never reveal
    whether a resource the caller cannot read actually exists.
    """


def to_message(error) -> str:
    """Turns any error-ish object into a short, user-facing string."""
    if not error:
        return UNKNOWN_ERROR_MESSAGE
    if isinstance(error, str):
        return error

    message = getattr(error, "message", None)
    if isinstance(message, str) and message.strip():
        return message
    if isinstance(error, BaseException):
        text = str(error).strip()
        return text or error.__class__.__name__

    try:
        return json.dumps(error)
    except (TypeError, ValueError) as serialization_error:
        return f"Unexpected error: {serialization_error}"
