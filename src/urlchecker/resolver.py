# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn command-line arguments into a validated ProbeRequest."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .config import DEFAULT_TIMEOUT, parse_timeout
from .errors import MalformedUrl, UnsupportedScheme
from .http.url import DEFAULT_SCHEME, ensure_scheme, parse_absolute_url
from .models import ProbeRequest

logger = logging.getLogger(__name__)


def resolve_url(raw_url: str) -> str:
    """
    Normalize and validate the probe target.

    Raises MalformedUrl when the string is not an absolute URL and UnsupportedScheme
    for anything but plain ``http`` (``https`` included).
    """
    url = ensure_scheme(raw_url)
    if url != raw_url:
        logger.debug("No known scheme in %r, assuming %s", raw_url, DEFAULT_SCHEME)

    parsed = parse_absolute_url(url)
    if parsed is None:
        raise MalformedUrl(url)

    if parsed.scheme != DEFAULT_SCHEME:
        raise UnsupportedScheme(parsed.scheme)

    return url


def resolve(args: Sequence[str]) -> ProbeRequest | None:
    """
    Build a ProbeRequest from ``[url, timeout]``.

    Returns None when no arguments were given, meaning the caller should show usage.
    An unparsable timeout falls back to the default instead of failing.
    """
    if not args:
        return None

    url = resolve_url(args[0])

    timeout = DEFAULT_TIMEOUT
    if len(args) > 1 and args[1] is not None:
        timeout = parse_timeout(args[1], DEFAULT_TIMEOUT)
        logger.debug("Timeout argument %r resolved to %ss", args[1], timeout)

    return ProbeRequest(url=url, timeout=timeout)


__all__ = ["resolve", "resolve_url"]
