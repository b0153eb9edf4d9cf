"""CSRF token extraction from the AtCoder session cookie."""

from typing import Iterable, Optional
from urllib.parse import unquote

SESSION_COOKIE_PREFIX = "REVEL_SESSION"
PAYLOAD_SEPARATOR = "%00"
CSRF_KEY = "csrf_token"


def extract_csrf_token(set_cookie_values: Iterable[str]) -> Optional[str]:
    """
    Find the CSRF token inside the session cookie payload.

    The payload is a percent-encoded, ``%00``-separated list of ``key:value``
    pairs. The first ``csrf_token`` pair found wins.

    Args:
        set_cookie_values: Raw Set-Cookie header values

    Returns:
        The token, or None when no session cookie carries one
    """
    for value in set_cookie_values:
        if not value.startswith(SESSION_COOKIE_PREFIX):
            continue

        for fragment in value.split(PAYLOAD_SEPARATOR):
            if not fragment.startswith(CSRF_KEY):
                continue

            decoded = unquote(fragment)
            _, colon, token = decoded.partition(":")
            if colon:
                return token

    return None


def cookie_pairs(set_cookie_values: Iterable[str]) -> list[str]:
    """Reduce Set-Cookie values to the ``name=value`` pairs a request sends back."""
    pairs = []
    for value in set_cookie_values:
        pair = value.split(";", 1)[0].strip()
        if "=" in pair:
            pairs.append(pair)
    return pairs
