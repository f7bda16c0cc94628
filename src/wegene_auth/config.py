"""
Configuration for the WeGene OAuth strategy.

resolve_config fills in WeGene's endpoint URLs, response type and scope
defaults and returns an immutable WegeneConfig. The caller's options are
never modified. config_from_env builds the same thing from WEGENE_* env vars.
"""

import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple, Union

from .errors import ConfigurationError

AUTHORIZATION_URL = "https://api.wegene.com/authorize/"
TOKEN_URL = "https://api.wegene.com/token/"
# Not configurable; WeGene serves the profile from a single endpoint.
USER_PROFILE_URL = "https://api.wegene.com/user/"

DEFAULT_RESPONSE_TYPE = "code"
DEFAULT_SCOPE_SEPARATOR = " "
DEFAULT_SCOPE: Tuple[str, ...] = ("basic", "email")
# Always requested, whatever scope the caller passes.
REQUIRED_SCOPES: Tuple[str, ...] = ("basic", "email")

ScopeInput = Union[str, Iterable[str], None]


@dataclass(frozen=True)
class WegeneConfig:
    """
    Fully resolved strategy configuration, shared by every login attempt.

    Construction rejects missing credentials and appends "basic"/"email" to
    scope when absent.
    """

    client_id: str
    client_secret: str
    callback_url: Optional[str] = None
    authorization_url: str = AUTHORIZATION_URL
    token_url: str = TOKEN_URL
    response_type: str = DEFAULT_RESPONSE_TYPE
    scope: Tuple[str, ...] = DEFAULT_SCOPE
    scope_separator: str = DEFAULT_SCOPE_SEPARATOR

    def __post_init__(self):
        if not self.client_id:
            raise ConfigurationError("WegeneStrategy requires a client_id option")
        if not self.client_secret:
            raise ConfigurationError("WegeneStrategy requires a client_secret option")
        if not self.scope_separator:
            object.__setattr__(self, "scope_separator", DEFAULT_SCOPE_SEPARATOR)
        object.__setattr__(self, "scope", _resolve_scope(self.scope, self.scope_separator))

    @property
    def scope_string(self) -> str:
        """Scope as sent on the wire (authorize and token requests)."""
        return self.scope_separator.join(self.scope)


def _resolve_scope(scope: ScopeInput, separator: str) -> Tuple[str, ...]:
    if not scope:
        return DEFAULT_SCOPE
    if isinstance(scope, str):
        entries = [s for s in scope.split(separator) if s]
    else:
        entries = list(scope)
    for required in REQUIRED_SCOPES:
        if required not in entries:
            entries.append(required)
    return tuple(entries)


def resolve_config(options: Optional[Mapping] = None, **overrides) -> WegeneConfig:
    """
    Return a WegeneConfig from user options, filling in WeGene defaults.

    Empty values (None, "", []) count as unset. "basic" and "email" are
    appended to a custom scope when missing, without duplicating them.
    Raises ConfigurationError if client_id or client_secret is missing.
    """
    opts = dict(options or {})
    opts.update(overrides)

    return WegeneConfig(
        client_id=opts.get("client_id"),
        client_secret=opts.get("client_secret"),
        callback_url=opts.get("callback_url") or None,
        authorization_url=opts.get("authorization_url") or AUTHORIZATION_URL,
        token_url=opts.get("token_url") or TOKEN_URL,
        response_type=opts.get("response_type") or DEFAULT_RESPONSE_TYPE,
        scope=opts.get("scope"),
        scope_separator=opts.get("scope_separator") or DEFAULT_SCOPE_SEPARATOR,
    )


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> WegeneConfig:
    """Build a WegeneConfig from WEGENE_* environment variables (WEGENE_SCOPE is comma separated)."""
    env = os.environ if environ is None else environ
    raw_scope = env.get("WEGENE_SCOPE", "")
    return resolve_config(
        client_id=env.get("WEGENE_CLIENT_ID"),
        client_secret=env.get("WEGENE_CLIENT_SECRET"),
        callback_url=env.get("WEGENE_CALLBACK_URL"),
        authorization_url=env.get("WEGENE_AUTHORIZATION_URL"),
        token_url=env.get("WEGENE_TOKEN_URL"),
        response_type=env.get("WEGENE_RESPONSE_TYPE"),
        scope=[s.strip() for s in raw_scope.split(",") if s.strip()],
        scope_separator=env.get("WEGENE_SCOPE_SEPARATOR"),
    )
