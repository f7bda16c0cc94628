"""
Capability protocols the host app uses to drive an OAuth strategy.

Implementations (e.g. WegeneStrategy) must support redirecting to the IdP and
handling the callback; profile retrieval and token-request augmentation are
separate capabilities a host can check for with isinstance().
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class OAuthProvider(Protocol):
    """Protocol for an OAuth 2.0 provider (e.g. WeGene)."""

    name: str

    async def login_redirect(self, request, redirect_uri: Optional[str] = None):
        """Redirect the user to the identity provider login page."""
        ...

    async def handle_callback(self, request) -> tuple[Any, Any]:
        """Handle the OAuth callback: exchange code for token, return (user, profile)."""
        ...


@runtime_checkable
class SupportsUserProfile(Protocol):
    """Provider can fetch and normalize the signed-in user's profile."""

    async def user_profile(self, access_token: str) -> Any:
        ...


@runtime_checkable
class SupportsTokenParams(Protocol):
    """Provider adds extra parameters to the token exchange request."""

    def token_params(self, params: Optional[dict] = None) -> dict:
        ...
