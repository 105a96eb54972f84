"""Exceptions raised by the Hasukatsu provider."""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for provider failures surfaced to callers."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ProviderError):
    """No episodes exist for the requested media."""

    def __init__(
        self,
        message: str,
        *,
        media_id: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.media_id = media_id
        self.code = code


class UpstreamError(ProviderError):
    """The catalog API failed or answered with something unusable."""

    def __init__(self, reason: str, *, status_code: int | None = None) -> None:
        if status_code is not None:
            message = f"Upstream request failed: {status_code} {reason}".rstrip()
        else:
            message = f"Upstream request failed: {reason}"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class InvalidInputError(ProviderError, ValueError):
    """The caller supplied an identifier the provider cannot use."""
