# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for the TranslatePlus client."""

from __future__ import annotations

from typing import Any


class TranslatePlusError(Exception):
    """Base exception for all TranslatePlus errors."""

    pass


class ValidationError(TranslatePlusError):
    """Client-side validation error (missing API key, invalid arguments, etc.).

    Raised before any network call is made.
    """

    pass


class APIError(TranslatePlusError):
    """Error returned by the API or raised while talking to it.

    Attributes:
        status_code: HTTP status code, or None when no response was received.
        response: Decoded error body, or None.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class AuthenticationError(APIError):
    """Authentication failed (401, 403).

    This error type is NOT retryable - check the API key.
    """


class InsufficientCreditsError(APIError):
    """Account has run out of credits (402).

    This error type is NOT retryable.
    """


class RateLimitError(APIError):
    """Rate limit exceeded (429)."""
