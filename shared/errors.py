"""
shared/errors.py

Exceptions raised at the chat turn boundary.

Each exception knows its HTTP status and the public message shown to the client, so the route can
convert it into an `ErrorResponse` without a lookup table. Anything that is not a `ChatError` is
treated as an unexpected server failure by the route.
"""

from typing import Optional


class ChatError(Exception):
    """Base class for failures that are reported to the client as structured errors."""

    status_code: int = 500
    public_message: str = "Server error"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        self.message = message or self.public_message
        self.details = details
        super().__init__(self.message)


class InvalidRequestError(ChatError):
    """The request has no usable `message` (missing, null, empty or not a string)."""

    status_code = 400
    public_message = "Message is required."


class ConfigurationError(ChatError):
    """A required setting such as the LLM API key is missing. Fatal until an operator fixes it."""

    status_code = 500
    public_message = "Server configuration error."
