"""Exceptions raised by the WeGene strategy."""

from typing import Optional

import httpx


class WegeneAuthError(Exception):
    """Base class for wegene_auth errors."""


class ConfigurationError(WegeneAuthError, ValueError):
    """Strategy options are missing or invalid; raised at construction."""


class InternalOAuthError(WegeneAuthError):
    """
    A call to WeGene failed at the transport or HTTP level.

    oauth_error holds the underlying exception (also chained as __cause__).
    """

    def __init__(self, message: str, oauth_error: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.oauth_error = oauth_error

    def __str__(self) -> str:
        err = self.oauth_error
        if isinstance(err, httpx.HTTPStatusError):
            return f"{self.message} (status: {err.response.status_code} data: {err.response.text})"
        if err is not None:
            return f"{self.message} ({err})"
        return self.message
