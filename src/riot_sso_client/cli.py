#!/usr/bin/env python3
"""
Simple CLI tool for the Riot Games SSO flow.

This tool makes it easy to:
- Print the authorization URL to send a user to
- Exchange an authorization code for an access token
- Look up the Riot account behind an access token
- Run the exchange and lookup in one go

Credentials come from --client-id/--client-secret or the
RIOT_GAMES_CLIENT_ID / RIOT_GAMES_CLIENT_SECRET environment variables.

Usage:
    riot-sso url <redirect_uri> [--scopes openid email]
    riot-sso token <code> <redirect_uri>
    riot-sso account <access_token>
    riot-sso login <code> <redirect_uri>
"""

import argparse
import asyncio
import sys
from typing import Any, Dict, Optional

from riot_sso_client import AsyncRiotGamesClient, EnvConfigProvider, RiotGamesError


def safe_display_token(token: str, prefix_len: int = 20, suffix_len: int = 6) -> str:
    """Safely display a token with most characters redacted."""
    if len(token) <= prefix_len + suffix_len:
        return f"{token[:10]}..."

    prefix = token[:prefix_len]
    suffix = token[-suffix_len:]
    redacted_len = len(token) - prefix_len - suffix_len

    return f"{prefix}...{'*' * min(redacted_len, 20)}...{suffix}"


def print_header(text: str):
    """Print a formatted header."""
    print("\n" + "=" * 60)
    print(text)
    print("=" * 60)


def print_error(error: RiotGamesError):
    """Print a RiotGamesError with its HTTP code when it has one."""
    print(f"\n❌ Error: {error.message}")
    if error.code is not None:
        print(f"HTTP Code: {error.code}")


def print_account(account: Dict[str, Any]):
    """Print the interesting fields of an account payload."""
    print(f"Player UUID: {account.get('puuid')}")
    print(f"Game Name: {account.get('gameName')}")
    print(f"Tag Line: {account.get('tagLine')}")


def build_client(
    client_id: Optional[str] = None, client_secret: Optional[str] = None
) -> AsyncRiotGamesClient:
    """Create a client from explicit credentials or the environment."""
    return AsyncRiotGamesClient(client_id, client_secret, config=EnvConfigProvider())


def cmd_url(client: AsyncRiotGamesClient, redirect_uri: str, scopes=None):
    """Print the authorization URL."""
    print_header("Riot Games Authorization URL")
    print(f"Redirect URI: {redirect_uri}")
    print(f"Scopes: {', '.join(scopes or client.default_scopes)}")
    print(f"\n{client.build_authorization_url(redirect_uri, scopes)}")
    return 0


async def cmd_token(client: AsyncRiotGamesClient, code: str, redirect_uri: str):
    """Exchange an authorization code for an access token."""
    print_header("Exchanging Authorization Code")

    try:
        tokens = await client.request_token(code, redirect_uri)
    except RiotGamesError as e:
        print_error(e)
        return 1

    if not tokens.access_token:
        print("❌ No access token in response")
        return 1

    print("✅ Token exchange successful!")
    print(f"Access Token: {safe_display_token(tokens.access_token)}")
    if tokens.token_type:
        print(f"Token Type: {tokens.token_type}")
    if tokens.expires_in is not None:
        print(f"Expires In: {tokens.expires_in} seconds")
    if tokens.refresh_token:
        print(f"Refresh Token: {safe_display_token(tokens.refresh_token)}")
    if tokens.scope:
        print(f"Scopes: {tokens.scope}")

    return 0


async def cmd_account(client: AsyncRiotGamesClient, access_token: str):
    """Look up the Riot account for an access token."""
    print_header("Riot Account")

    try:
        account = await client.fetch_account_data(access_token)
    except RiotGamesError as e:
        print_error(e)
        return 1

    print_account(account)
    return 0


async def cmd_login(client: AsyncRiotGamesClient, code: str, redirect_uri: str):
    """Exchange a code and look up the account it belongs to."""
    print_header("Riot Games Login")

    try:
        print("🔐 Exchanging authorization code...")
        access_token = await client.exchange_code_for_token(code, redirect_uri)
        if not access_token:
            print("❌ Failed to obtain access token")
            return 1
        print(f"✅ Access Token: {safe_display_token(access_token)}\n")

        print("👤 Fetching account...")
        account = await client.fetch_account_data(access_token)
    except RiotGamesError as e:
        print_error(e)
        return 1

    print_account(account)
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Riot Games SSO CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  riot-sso url https://app.example/callback
  riot-sso url https://app.example/callback --scopes openid email
  riot-sso token <code> https://app.example/callback
  riot-sso account <access_token>
  riot-sso login <code> https://app.example/callback
        """,
    )
    parser.add_argument(
        "--client-id", help="RSO client ID (default: $RIOT_GAMES_CLIENT_ID)"
    )
    parser.add_argument(
        "--client-secret",
        help="RSO client secret (default: $RIOT_GAMES_CLIENT_SECRET)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Url command
    url_parser = subparsers.add_parser("url", help="Print the authorization URL")
    url_parser.add_argument("redirect_uri", help="Callback URL")
    url_parser.add_argument(
        "--scopes", nargs="+", help="OAuth scopes (default: openid offline_access email)"
    )

    # Token command
    token_parser = subparsers.add_parser(
        "token", help="Exchange an authorization code for an access token"
    )
    token_parser.add_argument("code", help="Authorization code from the callback")
    token_parser.add_argument("redirect_uri", help="Callback URL used to authorize")

    # Account command
    account_parser = subparsers.add_parser(
        "account", help="Look up the Riot account for an access token"
    )
    account_parser.add_argument("access_token", help="OAuth access token")

    # Login command
    login_parser = subparsers.add_parser(
        "login", help="Exchange a code and look up the account"
    )
    login_parser.add_argument("code", help="Authorization code from the callback")
    login_parser.add_argument("redirect_uri", help="Callback URL used to authorize")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Execute command
    try:
        client = build_client(args.client_id, args.client_secret)

        if args.command == "url":
            return cmd_url(client, args.redirect_uri, args.scopes)
        elif args.command == "token":
            return asyncio.run(cmd_token(client, args.code, args.redirect_uri))
        elif args.command == "account":
            return asyncio.run(cmd_account(client, args.access_token))
        elif args.command == "login":
            return asyncio.run(cmd_login(client, args.code, args.redirect_uri))
        else:  # pragma: no cover
            # This should never be reached due to argparse validation
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\n\n❌ Interrupted by user")
        return 130
    except RiotGamesError as e:
        print_error(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
