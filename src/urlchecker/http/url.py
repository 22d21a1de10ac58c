# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers used when resolving the probe target."""

from __future__ import annotations

import re

import httpx

KNOWN_SCHEMES = (
    "http",
    "https",
    "ftp",
    "file",
    "gopher",
    "nntp",
    "news",
    "mailto",
    "uuid",
    "telnet",
    "ldap",
    "net.tcp",
    "net.pipe",
    "vsmacros",
)
DEFAULT_SCHEME = "http"

_KNOWN_SCHEME_RE = re.compile(
    r"^(?:" + "|".join(re.escape(scheme) for scheme in KNOWN_SCHEMES) + r")://",
    re.IGNORECASE,
)


def has_known_scheme(url: str) -> bool:
    """Return True when ``url`` starts with one of KNOWN_SCHEMES followed by ``://``."""
    return bool(_KNOWN_SCHEME_RE.match(url or ""))


def ensure_scheme(url: str) -> str:
    """
    Prefix ``http://`` unless the URL already names a known scheme.

    Example:
      example.com/path -> http://example.com/path
    """
    if has_known_scheme(url):
        return url
    return f"{DEFAULT_SCHEME}://{url}"


def parse_absolute_url(url: str) -> httpx.URL | None:
    """Parse ``url`` as an absolute URL with a host, or return None."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError):
        return None
    if not parsed.is_absolute_url or not parsed.host:
        return None
    return parsed


__all__ = ["DEFAULT_SCHEME", "KNOWN_SCHEMES", "ensure_scheme", "has_known_scheme", "parse_absolute_url"]
