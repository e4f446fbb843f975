#!/usr/bin/env python3
"""
Riot Games login in a plain Python application.

The example starts a tiny local callback server, prints the authorization URL,
and once Riot redirects back with a code it exchanges the code and prints the
account.

Usage:
    export RIOT_GAMES_CLIENT_ID=...
    export RIOT_GAMES_CLIENT_SECRET=...
    uv run examples/standalone_login.py
"""

from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import parse_qs, urlparse

from riot_sso_client import EnvConfigProvider, RiotGamesClient, RiotGamesError

CALLBACK_URL = "http://localhost:8080/callback"


def main():
    """Run the login flow once."""
    riot = RiotGamesClient(config=EnvConfigProvider())

    print("Open this URL in your browser to log in:\n")
    print(riot.build_authorization_url(CALLBACK_URL))

    received: dict = {}

    class CallbackHandler(BaseHTTPRequestHandler):
        def do_GET(self):
            params = parse_qs(urlparse(self.path).query)
            received["code"] = params.get("code", [None])[0]
            self.send_response(200)
            self.end_headers()
            self.wfile.write(b"You can close this window.")

        def log_message(self, format, *args):
            pass

    with HTTPServer(("localhost", 8080), CallbackHandler) as server:
        server.handle_request()

    code = received.get("code")
    if not code:
        print("\n❌ No authorization code received")
        return 1

    try:
        access_token = riot.exchange_code_for_token(code, CALLBACK_URL)
        if not access_token:
            print("\n❌ Failed to obtain access token")
            return 1

        account = riot.fetch_account_data(access_token)
    except RiotGamesError as e:
        print(f"\n❌ Error: {e.message}")
        if e.code is not None:
            print(f"HTTP Code: {e.code}")
        return 1

    print(f"\nPlayer UUID: {account['puuid']}")
    print(f"Game Name: {account['gameName']}")
    print(f"Tag Line: {account['tagLine']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
