"""Errors raised while relaying a chat request, each tied to an HTTP status."""

from __future__ import annotations


class RelayError(Exception):
    """Base class for failures surfaced to the caller as ``{"error": ...}``."""

    status_code: int = 500

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class InputValidationError(RelayError):
    status_code = 400

    def __init__(self, message: str = "Messages array is required"):
        super().__init__(message)


class UpstreamAuthError(RelayError):
    status_code = 401

    def __init__(self, message: str = "Invalid API key. Please check server configuration."):
        super().__init__(message)


class UpstreamRateLimitError(RelayError):
    status_code = 429

    def __init__(self, message: str = "Rate limit exceeded. Please wait and try again."):
        super().__init__(message)


class UpstreamServiceError(RelayError):
    """Any provider failure other than auth or rate limiting."""

    status_code = 500

    def __init__(self, message: str = "Failed to process request", details: str | None = None):
        super().__init__(message, details=details)
