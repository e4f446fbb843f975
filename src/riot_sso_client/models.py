# riot_sso_client/models.py
"""Response models for the Riot Games SSO endpoints."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """Token endpoint payload. Only access_token is relied upon."""

    model_config = ConfigDict(extra="allow")

    access_token: Optional[str] = None
    token_type: Optional[str] = None
    expires_in: Optional[Union[int, float]] = None
    refresh_token: Optional[str] = None
    id_token: Optional[str] = None
    scope: Optional[Union[str, list[str]]] = None


class AccountProfile(BaseModel):
    """
    Riot account returned by ``/riot/account/v1/accounts/me``.

    Fields use the API's camelCase names as aliases; any additional fields the
    API returns are kept as extras.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    puuid: str
    game_name: str = Field(alias="gameName")
    tag_line: str = Field(alias="tagLine")

    @property
    def riot_id(self) -> str:
        """Display form of the account, e.g. ``Name#EUW``."""
        return f"{self.game_name}#{self.tag_line}"


__all__ = ["TokenResponse", "AccountProfile"]
