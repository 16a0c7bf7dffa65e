from __future__ import annotations

from urllib.parse import urlparse

UNKNOWN_DOMAIN = "unknown"


def extract_domain(url: str) -> str:
    """Extract the normalized hostname: lowercased, without a leading ``www.``.

    Returns ``"unknown"`` when the URL cannot be parsed or has no host.
    """
    try:
        hostname = urlparse(url).hostname
    except (TypeError, ValueError, AttributeError):
        return UNKNOWN_DOMAIN
    if not hostname:
        return UNKNOWN_DOMAIN
    hostname = hostname.lower()
    if hostname.startswith("www."):
        hostname = hostname[4:]
    return hostname or UNKNOWN_DOMAIN


def url_key(url: str) -> str:
    """Identity key for a URL: lowercased, one trailing slash removed."""
    key = url.lower()
    if key.endswith("/"):
        key = key[:-1]
    return key
