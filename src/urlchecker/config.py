# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for urlchecker."""

from dataclasses import dataclass, field

from .version import __version__

DEFAULT_TIMEOUT = 10
# Largest timeout the socket layer accepts on every platform (milliseconds fit in an int32).
MAX_TIMEOUT = 2**31 // 1000
DEFAULT_USER_AGENT = f"UrlChecker/{__version__}"
NO_CACHE_HEADERS = {
    "Pragma": "no-cache",
    "Cache-Control": "no-cache",
}


def effective_timeout(seconds: int, default: int = DEFAULT_TIMEOUT) -> int:
    """Return ``seconds`` when it is a usable socket timeout, ``default`` otherwise."""
    return seconds if 0 < seconds <= MAX_TIMEOUT else default


def parse_timeout(value: str | None, default: int = DEFAULT_TIMEOUT) -> int:
    """Parse a timeout in whole seconds, falling back to ``default`` instead of failing."""
    try:
        parsed = int(value) if value is not None else default
    except (TypeError, ValueError):
        return default
    return effective_timeout(parsed, default)


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = float(DEFAULT_TIMEOUT)
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = False
    no_cache_headers: dict[str, str] = field(default_factory=lambda: dict(NO_CACHE_HEADERS))


def load_http_settings() -> HttpSettings:
    """Return the HTTP settings used for a probe."""
    return HttpSettings()
