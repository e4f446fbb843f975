# riot_sso_client/config.py
"""Configuration lookup for client credentials and default scopes."""

import re
from typing import (
    Annotated,
    Any,
    Iterable,
    Mapping,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_SCOPES: list[str] = ["openid", "offline_access", "email"]


def normalize_scopes(value: Union[str, Iterable[str]]) -> list[str]:
    """
    Turn a scope setting into a list of scopes.

    Strings are split on commas and whitespace, so ``"openid, email"`` and
    ``"openid email"`` both give ``["openid", "email"]``.
    """
    if isinstance(value, str):
        return [s for s in re.split(r"[,\s]+", value) if s]
    return [str(s) for s in value if s]


@runtime_checkable
class ConfigProvider(Protocol):
    """Anything that can resolve a configuration key to a value."""

    def get(self, key: str, default: Any = None) -> Any: ...


class NullConfigProvider:
    """Provider for standalone use: every lookup returns the default."""

    def get(self, key: str, default: Any = None) -> Any:
        return default


class MappingConfigProvider:
    """
    Resolve keys from a mapping supplied by the host application.

    Example:
        ```python
        config = MappingConfigProvider(
            {"client_id": "abc", "client_secret": "xyz", "default_scopes": ["openid"]}
        )
        ```
    """

    def __init__(self, values: Mapping[str, Any]):
        self._values = dict(values)

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)


class RiotGamesSettings(BaseSettings):
    """Riot Games credentials read from ``RIOT_GAMES_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RIOT_GAMES_", env_file=".env", extra="ignore"
    )

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    default_scopes: Annotated[Optional[list[str]], NoDecode] = None

    @field_validator("default_scopes", mode="before")
    @classmethod
    def split_scopes(cls, v):
        """Accept comma or whitespace separated scope strings."""
        if v is None:
            return v
        return normalize_scopes(v)


class EnvConfigProvider:
    """
    Resolve keys from environment variables through RiotGamesSettings.

    ``client_id`` reads ``RIOT_GAMES_CLIENT_ID``, ``client_secret`` reads
    ``RIOT_GAMES_CLIENT_SECRET`` and ``default_scopes`` reads
    ``RIOT_GAMES_DEFAULT_SCOPES``. A ``.env`` file in the working directory is
    read as well.
    """

    def __init__(self, prefix: str = "RIOT_GAMES_"):
        """
        Load settings from the environment.

        Args:
            prefix: Variable name prefix
        """
        self.prefix = prefix
        self.settings = RiotGamesSettings(_env_prefix=prefix)

    def get(self, key: str, default: Any = None) -> Any:
        value = getattr(self.settings, key, None)
        # Unset variables and blank scope lists resolve to the default
        if value is None or value == []:
            return default
        return value


__all__ = [
    "DEFAULT_SCOPES",
    "normalize_scopes",
    "ConfigProvider",
    "NullConfigProvider",
    "MappingConfigProvider",
    "RiotGamesSettings",
    "EnvConfigProvider",
]
