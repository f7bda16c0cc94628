"""
Pytest fixtures for the WeGene strategy tests.
"""

import httpx
import pytest

from wegene_auth import USER_PROFILE_URL, WegeneStrategy


@pytest.fixture
def options():
    """Minimal strategy options."""
    return {
        "client_id": "app key",
        "client_secret": "app secret",
        "callback_url": "https://www.example.net/auth/wegene/callback",
    }


@pytest.fixture
def verify_calls():
    """Records the arguments each verify call receives."""
    return []


@pytest.fixture
def strategy(options, verify_calls):
    """Strategy whose verify callback records its arguments and returns a fixed user."""

    def verify(*args):
        verify_calls.append(args)
        return {"user_id": 1}

    return WegeneStrategy(options, verify)


@pytest.fixture
def profile_response():
    """Build httpx responses as returned by the WeGene user endpoint."""

    def _build(status_code=200, text='{"id": "u123", "email": "a@example.com"}'):
        return httpx.Response(status_code, text=text, request=httpx.Request("GET", USER_PROFILE_URL))

    return _build


@pytest.fixture
def wegene_transport(strategy):
    """
    Route the strategy's Authlib client through an httpx.MockTransport.

    Yields the list of requests sent; /token/ answers with a bearer token,
    /user/ with a profile, anything else with 500.
    """
    sent = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        if request.url.path == "/token/":
            return httpx.Response(200, json={"access_token": "tok", "token_type": "bearer", "refresh_token": "ref"})
        if request.url.path == "/user/":
            return httpx.Response(200, json={"id": "u123", "email": "a@example.com"})
        return httpx.Response(500, text="boom")

    strategy.oauth2.client_kwargs["transport"] = httpx.MockTransport(handler)
    return sent
