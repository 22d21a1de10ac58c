# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header collection utilities.

HTTP header field names are case-insensitive (RFC 9110). Reports keep the casing and
order the server used, so headers are collected from the raw header list rather than
from a lowercased view.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def collect_headers(items: Iterable[tuple[str, str]]) -> dict[str, str]:
    """
    Build an ordered ``name -> value`` mapping from received header pairs.

    Repeated names (compared case-insensitively) keep the position and spelling of
    their first occurrence and the value of the last one.
    """
    names: dict[str, str] = {}
    values: dict[str, str] = {}
    for key, value in items:
        if key is None:
            continue
        name = str(key).strip()
        if not name:
            continue
        lower = name.lower()
        names.setdefault(lower, name)
        values[lower] = "" if value is None else str(value)
    return {names[lower]: values[lower] for lower in names}


def header_value(headers: Mapping[str, str] | None, name: str, default: str | None = None) -> str | None:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    if name in headers:
        return headers[name].strip()

    lower = name.lower()
    for key, value in headers.items():
        if str(key).lower() == lower:
            return value.strip()

    return default


def parse_content_length(headers: Mapping[str, str] | None) -> int:
    """Return the advertised body length, or -1 when it is absent or unusable."""
    raw = header_value(headers, "Content-Length")
    if raw is None:
        return -1
    try:
        length = int(raw)
    except ValueError:
        return -1
    return length if length >= 0 else -1


__all__ = ["collect_headers", "header_value", "parse_content_length"]
