"""Riot Games SSO Client Library - OAuth 2.0 login with Riot Games.

This library implements the Riot Sign On (RSO) authorization code flow:
- Building the authorization URL to redirect users to
- Exchanging the authorization code for an access token
- Fetching the Riot account (puuid, gameName, tagLine) for that token
"""

from .config import (
    DEFAULT_SCOPES,
    ConfigProvider,
    EnvConfigProvider,
    MappingConfigProvider,
    NullConfigProvider,
    RiotGamesSettings,
    normalize_scopes,
)
from .exceptions import (
    ConfigurationError,
    ProviderError,
    ResponseFormatError,
    RiotGamesError,
    TransportError,
)
from .models import AccountProfile, TokenResponse
from .client import AsyncRiotGamesClient, RiotGamesClient

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SCOPES",
    "ConfigProvider",
    "EnvConfigProvider",
    "MappingConfigProvider",
    "NullConfigProvider",
    "RiotGamesSettings",
    "normalize_scopes",
    "RiotGamesError",
    "ConfigurationError",
    "TransportError",
    "ProviderError",
    "ResponseFormatError",
    "AccountProfile",
    "TokenResponse",
    "RiotGamesClient",
    "AsyncRiotGamesClient",
]
