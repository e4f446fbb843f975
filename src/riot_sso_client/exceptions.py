# riot_sso_client/exceptions.py
"""Exceptions raised by the Riot Games SSO client."""

from typing import Optional


class RiotGamesError(Exception):
    """
    Base exception for all Riot Games SSO failures.

    Attributes:
        message: Human readable description of the failure
        code: HTTP status code, or None for failures that never reached HTTP
    """

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message


class ConfigurationError(RiotGamesError):
    """Client credentials are missing."""


class TransportError(RiotGamesError):
    """The request never produced an HTTP response (connection, TLS, timeout)."""


class ProviderError(RiotGamesError):
    """Riot Games answered with an HTTP status of 400 or above."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message, status_code)

    @property
    def status_code(self) -> int:
        return self.code  # type: ignore[return-value]


class ResponseFormatError(RiotGamesError):
    """A successful response carried a body that is not a JSON object."""


__all__ = [
    "RiotGamesError",
    "ConfigurationError",
    "TransportError",
    "ProviderError",
    "ResponseFormatError",
]
