"""
WeGene OAuth 2.0 strategy.

Exposes the strategy (WegeneStrategy, WegeneProfile), config helpers
(resolve_config, config_from_env), provider protocols and errors.
"""

from .config import (
    AUTHORIZATION_URL,
    TOKEN_URL,
    USER_PROFILE_URL,
    WegeneConfig,
    config_from_env,
    resolve_config,
)
from .errors import ConfigurationError, InternalOAuthError, WegeneAuthError
from .protocol import OAuthProvider, SupportsTokenParams, SupportsUserProfile
from .wegene import WegeneProfile, WegeneStrategy

__all__ = [
    "AUTHORIZATION_URL",
    "TOKEN_URL",
    "USER_PROFILE_URL",
    "WegeneConfig",
    "resolve_config",
    "config_from_env",
    "WegeneAuthError",
    "ConfigurationError",
    "InternalOAuthError",
    "OAuthProvider",
    "SupportsUserProfile",
    "SupportsTokenParams",
    "WegeneProfile",
    "WegeneStrategy",
]
