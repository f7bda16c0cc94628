"""
WeGene OAuth 2.0 provider.

Uses Authlib for the authorization-code flow (redirect, state, code exchange)
and fetches the user profile from the WeGene API with the resulting access
token. WeGene requires the token request to repeat the scope sent with the
authorization request, so token_params echoes it back.
"""

import inspect
import json
import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Mapping, Optional, Union

import httpx
from authlib.common.errors import AuthlibBaseError
from authlib.integrations.starlette_client import OAuth

from .config import USER_PROFILE_URL, WegeneConfig, resolve_config
from .errors import ConfigurationError, InternalOAuthError

logger = logging.getLogger(__name__)

PROVIDER_NAME = "Wegene"


@dataclass(frozen=True)
class WegeneProfile:
    """Normalized WeGene user profile. id/email are copied as-is and may be None."""

    provider: str
    id: Any = None
    email: Any = None

    def as_dict(self) -> dict:
        return asdict(self)


class WegeneStrategy:
    """
    OAuth provider that signs users in with WeGene.

    Applications supply a verify callback taking (access_token, refresh_token,
    profile) and returning the application user (or None/False if the
    credentials should be rejected). It may be a coroutine function.

        strategy = WegeneStrategy(
            {
                "client_id": "app key",
                "client_secret": "app secret",
                "callback_url": "https://www.example.net/auth/wegene/callback",
            },
            find_or_create_user,
        )
    """

    name: str = PROVIDER_NAME

    def __init__(
        self,
        options: Union[WegeneConfig, Mapping, None],
        verify: Callable,
        *,
        pass_request_to_callback: bool = False,
        skip_user_profile: bool = False,
    ):
        """Resolve options and register the Authlib client. No network I/O happens here."""
        if not callable(verify):
            raise ConfigurationError("WegeneStrategy requires a verify callback")
        self.config = options if isinstance(options, WegeneConfig) else resolve_config(options)
        self.verify = verify
        self.pass_request_to_callback = pass_request_to_callback
        self.skip_user_profile = skip_user_profile

        self._oauth = OAuth()
        self.oauth2 = self._oauth.register(
            name="wegene",
            client_id=self.config.client_id,
            client_secret=self.config.client_secret,
            authorize_url=self.config.authorization_url,
            access_token_url=self.config.token_url,
            client_kwargs={
                "scope": self.config.scope_string,
                "response_type": self.config.response_type,
                "token_placement": "header",
                "token_endpoint_auth_method": "client_secret_post",
            },
        )
        logger.debug(
            "Registered %s strategy (authorize=%s token=%s scope=%r)",
            self.name,
            self.config.authorization_url,
            self.config.token_url,
            self.config.scope_string,
        )

    async def login_redirect(self, request, redirect_uri: Optional[str] = None):
        """Return RedirectResponse to WeGene's authorization page."""
        redirect_uri = redirect_uri or self.config.callback_url
        if not redirect_uri:
            raise ConfigurationError("No redirect_uri given and no callback_url configured")
        return await self.oauth2.authorize_redirect(request, str(redirect_uri))

    def token_params(self, params: Optional[dict] = None) -> dict:
        """
        Return extra parameters for the token request.

        WeGene wants a scope parameter on the token request, identical to the one
        used when requesting the authorization code.
        """
        extra = dict(params or {})
        extra["scope"] = self.config.scope_string
        return extra

    async def user_profile(self, access_token: str) -> WegeneProfile:
        """
        Fetch the signed-in user's profile from WeGene.

        Raises InternalOAuthError on transport failure or a non-2xx response, and
        json.JSONDecodeError if the body is not JSON. Missing fields are None.
        """
        token = {"access_token": access_token, "token_type": "bearer"}
        try:
            resp = await self.oauth2.get(USER_PROFILE_URL, token=token)
            resp.raise_for_status()
        except (httpx.HTTPError, AuthlibBaseError) as e:
            logger.warning("Fetching %s profile failed: %s", self.name, e)
            raise InternalOAuthError("failed to fetch user profile", e) from e

        result = json.loads(resp.text)
        if not isinstance(result, dict):
            result = {}
        logger.debug("Fetched %s profile for id=%s", self.name, result.get("id"))
        return WegeneProfile(provider=PROVIDER_NAME, id=result.get("id"), email=result.get("email"))

    async def handle_callback(self, request) -> tuple[Any, Optional[WegeneProfile]]:
        """Exchange code for token, fetch the profile and run verify. Return (user, profile)."""
        token = await self.oauth2.authorize_access_token(request, **self.token_params())
        access_token = token["access_token"]
        refresh_token = token.get("refresh_token")

        profile = None
        if not self.skip_user_profile:
            profile = await self.user_profile(access_token)

        args = (access_token, refresh_token, profile)
        if self.pass_request_to_callback:
            args = (request,) + args
        user = self.verify(*args)
        if inspect.isawaitable(user):
            user = await user
        return user, profile
