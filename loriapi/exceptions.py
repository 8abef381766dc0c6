"""Custom exception hierarchy for loriapi."""

from typing import Any


class LoriApiError(Exception):
    """Base exception for all loriapi errors."""


class ConfigurationError(LoriApiError):
    """Invalid or missing API key."""


class ValidationError(LoriApiError):
    """Caller input rejected before any request was sent."""

    def __init__(
        self,
        message: str,
        invalid_tokens: list[str] | None = None,
        valid_tokens: tuple[str, ...] | None = None,
    ):
        self.invalid_tokens = invalid_tokens or []
        self.valid_tokens = valid_tokens or ()
        super().__init__(message)


class RemoteApiError(LoriApiError):
    """Provider returned an error response or could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: Any = None,
        endpoint: str | None = None,
    ):
        self.status_code = status_code
        self.detail = detail
        self.endpoint = endpoint
        super().__init__(message)
