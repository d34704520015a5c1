"""Absolute-URL parsing for host comparison.

Only absolute URLs are accepted: a relative reference, an empty string or a
malformed authority raises :class:`InvalidUrlError`.
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlsplit

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_WHITESPACE_RE = re.compile(r"\s")

# Schemes that must carry a host, with their default ports.
_SPECIAL_SCHEMES = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}


class InvalidUrlError(ValueError):
    """Raised when a string cannot be parsed as an absolute URL."""


def url_host(url: Optional[str]) -> str:
    """Return the host component of *url* (``hostname[:port]``).

    The port is only included when it differs from the scheme default,
    mirroring how browsers report ``URL.host``; internationalised domain
    names of web schemes are converted to punycode.  Schemes without an
    authority (``mailto:``, ``javascript:``) yield an empty host.

    Raises:
        InvalidUrlError: If *url* is absent or not an absolute URL.
    """
    if not url:
        raise InvalidUrlError(f"Invalid URL: {url!r}")

    value = url.strip()
    if not _SCHEME_RE.match(value):
        raise InvalidUrlError(f"Invalid URL: {url!r}")

    try:
        parts = urlsplit(value)
        port = parts.port
    except ValueError as exc:
        raise InvalidUrlError(f"Invalid URL: {url!r}") from exc

    scheme = parts.scheme.lower()
    hostname = parts.hostname or ""

    if scheme in _SPECIAL_SCHEMES:
        if not hostname or _WHITESPACE_RE.search(parts.netloc):
            raise InvalidUrlError(f"Invalid URL: {url!r}")
        if not hostname.isascii():
            try:
                hostname = hostname.encode("idna").decode("ascii")
            except UnicodeError as exc:
                raise InvalidUrlError(f"Invalid URL: {url!r}") from exc

    if ":" in hostname:
        # IPv6 literal; urlsplit drops the brackets.
        hostname = f"[{hostname}]"

    if port is not None and port != _SPECIAL_SCHEMES.get(scheme):
        return f"{hostname}:{port}"
    return hostname
