# riot_sso_client/client.py
"""Riot Games SSO (RSO) client: authorization URL, token exchange, account lookup."""

from typing import Any, Dict, Optional, Sequence
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from .config import (
    DEFAULT_SCOPES,
    ConfigProvider,
    NullConfigProvider,
    normalize_scopes,
)
from .exceptions import ConfigurationError, ResponseFormatError
from .models import AccountProfile, TokenResponse
from .transport import arequest_json, default_client_options, request_json

AUTHORIZATION_BASE_URL = "https://auth.riotgames.com"
API_BASE_URL = "https://europe.api.riotgames.com"
ACCOUNT_ME_PATH = "/riot/account/v1/accounts/me"
CLIENT_ASSERTION_TYPE = "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"


class _BaseRiotGamesClient:
    """Credential handling and request construction shared by both clients."""

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        *,
        config: Optional[ConfigProvider] = None,
        auth_base_url: str = AUTHORIZATION_BASE_URL,
        api_base_url: str = API_BASE_URL,
    ):
        """
        Initialize the client.

        Args:
            client_id: RSO client ID (falls back to config key "client_id")
            client_secret: RSO client secret, sent as the client assertion
                (falls back to config key "client_secret")
            config: Configuration provider (default: NullConfigProvider)
            auth_base_url: Authorization server base URL
            api_base_url: Riot API base URL used for the account lookup

        Raises:
            ConfigurationError: If the resolved client ID or secret is empty
        """
        self.config: ConfigProvider = config or NullConfigProvider()

        self.client_id: str = (
            client_id if client_id is not None else self.config.get("client_id", "")
        ) or ""
        self.client_secret: str = (
            client_secret
            if client_secret is not None
            else self.config.get("client_secret", "")
        ) or ""

        if not self.client_id or not self.client_secret:
            raise ConfigurationError(
                "Riot Games Client ID and Client Secret are required. "
                "Provide them via constructor parameters or configuration "
                "(client_id and client_secret)."
            )

        scopes = self.config.get("default_scopes", DEFAULT_SCOPES) or DEFAULT_SCOPES
        self.default_scopes: list[str] = normalize_scopes(scopes) or list(
            DEFAULT_SCOPES
        )
        self.auth_base_url = auth_base_url.rstrip("/")
        self.api_base_url = api_base_url.rstrip("/")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(client_id={self.client_id!r})"

    def build_authorization_url(
        self, redirect_uri: str, scopes: Optional[Sequence[str]] = None
    ) -> str:
        """
        Build the URL to redirect the user to for Riot Games login.

        Args:
            redirect_uri: Callback URL Riot redirects to after authentication
            scopes: OAuth scopes (default: configured scopes, normally
                openid, offline_access, email)

        Returns:
            Full authorization URL
        """
        if scopes is None:
            scopes = self.default_scopes

        # Scopes are joined with a literal "+" which must not be re-encoded
        query = urlencode(
            {
                "redirect_uri": redirect_uri,
                "client_id": self.client_id,
                "response_type": "code",
            }
        )
        scope = "+".join(scopes)

        return f"{self.auth_base_url}/authorize?{query}&scope={scope}"

    def _token_request(self, code: str, redirect_uri: str) -> Dict[str, Any]:
        # client_secret is passed through as the assertion as-is; no JWT is built
        return {
            "method": "POST",
            "url": f"{self.auth_base_url}/token",
            "headers": {
                "Content-Type": "application/x-www-form-urlencoded",
                "Accept": "application/json",
            },
            "data": {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
                "client_id": self.client_id,
                "client_assertion_type": CLIENT_ASSERTION_TYPE,
                "client_assertion": self.client_secret,
            },
        }

    def _account_request(self, access_token: str) -> Dict[str, Any]:
        return {
            "method": "GET",
            "url": f"{self.api_base_url}{ACCOUNT_ME_PATH}",
            "headers": {
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            },
        }

    @staticmethod
    def _access_token(payload: Dict[str, Any]) -> Optional[str]:
        # Only access_token is read; the other token fields are not inspected
        access_token = payload.get("access_token")
        if access_token is not None and not isinstance(access_token, str):
            raise ResponseFormatError(
                "Invalid token response: access_token is not a string"
            )
        return access_token

    @staticmethod
    def _parse_token(payload: Dict[str, Any]) -> TokenResponse:
        try:
            return TokenResponse.model_validate(payload)
        except ValidationError as e:
            raise ResponseFormatError(f"Invalid token response: {e}") from e

    @staticmethod
    def _parse_profile(payload: Dict[str, Any]) -> AccountProfile:
        try:
            return AccountProfile.model_validate(payload)
        except ValidationError as e:
            raise ResponseFormatError(f"Invalid account response: {e}") from e


class RiotGamesClient(_BaseRiotGamesClient):
    """
    Blocking Riot Games SSO client.

    Every network operation performs exactly one HTTP round trip. Pass an
    ``httpx.Client`` to control pooling, timeouts and transport; otherwise a
    short-lived client is created per call.

    Example:
        ```python
        riot = RiotGamesClient("my-client-id", "my-client-secret")
        url = riot.build_authorization_url("https://app.example/callback")
        # ... user is redirected back with ?code=...
        token = riot.exchange_code_for_token(code, "https://app.example/callback")
        account = riot.fetch_account_data(token)
        ```
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        *,
        http_client: Optional[httpx.Client] = None,
        **kwargs: Any,
    ):
        super().__init__(client_id, client_secret, **kwargs)
        self.http_client = http_client

    def _request(self, method: str, url: str, **kwargs: Any) -> Dict[str, Any]:
        if self.http_client is not None:
            return request_json(self.http_client, method, url, **kwargs)

        with httpx.Client(**default_client_options()) as client:
            return request_json(client, method, url, **kwargs)

    def request_token(self, code: str, redirect_uri: str) -> TokenResponse:
        """
        Exchange an authorization code and return the full token payload.

        Args:
            code: Authorization code from the callback
            redirect_uri: Redirect URI used in the authorization request

        Returns:
            Parsed token response
        """
        payload = self._request(**self._token_request(code, redirect_uri))
        return self._parse_token(payload)

    def exchange_code_for_token(self, code: str, redirect_uri: str) -> Optional[str]:
        """
        Exchange an authorization code for an access token.

        Args:
            code: Authorization code from the callback
            redirect_uri: Redirect URI used in the authorization request

        Returns:
            The access token, or None if the response did not contain one

        Raises:
            TransportError: If the request could not be sent
            ProviderError: If Riot Games rejected the exchange
            ResponseFormatError: If the response was not a JSON object
        """
        payload = self._request(**self._token_request(code, redirect_uri))
        return self._access_token(payload)

    def fetch_account_data(self, access_token: str) -> Dict[str, Any]:
        """
        Fetch the Riot account for an access token.

        Args:
            access_token: OAuth access token

        Returns:
            Account data as returned by the API (puuid, gameName, tagLine, ...)
        """
        return self._request(**self._account_request(access_token))

    def fetch_account_profile(self, access_token: str) -> AccountProfile:
        """Fetch the Riot account as an AccountProfile."""
        return self._parse_profile(self.fetch_account_data(access_token))


class AsyncRiotGamesClient(_BaseRiotGamesClient):
    """Asyncio Riot Games SSO client, built on ``httpx.AsyncClient``."""

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        **kwargs: Any,
    ):
        super().__init__(client_id, client_secret, **kwargs)
        self.http_client = http_client

    async def _request(self, method: str, url: str, **kwargs: Any) -> Dict[str, Any]:
        if self.http_client is not None:
            return await arequest_json(self.http_client, method, url, **kwargs)

        async with httpx.AsyncClient(**default_client_options()) as client:
            return await arequest_json(client, method, url, **kwargs)

    async def request_token(self, code: str, redirect_uri: str) -> TokenResponse:
        """Exchange an authorization code and return the full token payload."""
        payload = await self._request(**self._token_request(code, redirect_uri))
        return self._parse_token(payload)

    async def exchange_code_for_token(
        self, code: str, redirect_uri: str
    ) -> Optional[str]:
        """
        Exchange an authorization code for an access token.

        Returns:
            The access token, or None if the response did not contain one
        """
        payload = await self._request(**self._token_request(code, redirect_uri))
        return self._access_token(payload)

    async def fetch_account_data(self, access_token: str) -> Dict[str, Any]:
        """Fetch the Riot account for an access token, as returned by the API."""
        return await self._request(**self._account_request(access_token))

    async def fetch_account_profile(self, access_token: str) -> AccountProfile:
        """Fetch the Riot account as an AccountProfile."""
        return self._parse_profile(await self.fetch_account_data(access_token))


__all__ = [
    "AUTHORIZATION_BASE_URL",
    "API_BASE_URL",
    "ACCOUNT_ME_PATH",
    "CLIENT_ASSERTION_TYPE",
    "RiotGamesClient",
    "AsyncRiotGamesClient",
]
