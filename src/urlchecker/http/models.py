# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the probe."""

from __future__ import annotations

from dataclasses import dataclass, field

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "HEAD"
    headers: Headers | None = None
    timeout: float | None = None
    allow_redirects: bool = False


@dataclass
class HttpResponse:
    """
    Transport outcome.

    ``ok`` is True whenever the server answered, whatever the status code. When no
    response exists (DNS failure, timeout, refused connection) ``ok`` is False and the
    ``error_*`` fields describe what went wrong.
    """

    ok: bool
    status_code: int | None = None
    reason_phrase: str = ""
    headers: Headers = field(default_factory=dict)
    url: str | None = None
    http_version: str | None = None
    elapsed_ms: int | None = None
    error_category: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_detail: str | None = None

    @property
    def has_response(self) -> bool:
        return self.ok and self.status_code is not None
