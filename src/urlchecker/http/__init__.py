# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .client import HttpClient, create_default_http_client
from .headers import collect_headers, header_value, parse_content_length
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import ensure_scheme, has_known_scheme, parse_absolute_url

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "collect_headers",
    "create_default_http_client",
    "ensure_scheme",
    "has_known_scheme",
    "header_value",
    "parse_absolute_url",
    "parse_content_length",
]
