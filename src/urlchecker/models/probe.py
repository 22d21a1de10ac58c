# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe request/result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus

from ..config import DEFAULT_TIMEOUT


@dataclass(frozen=True)
class ProbeRequest:
    url: str
    timeout: int = DEFAULT_TIMEOUT


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a completed HEAD request, whatever its status code."""

    original_url: str
    response_url: str
    status: int
    reason: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    content_length: int = -1
    server: str | None = None
    elapsed_ms: int = 0
    from_cache: bool = False

    @property
    def status_text(self) -> str:
        if self.reason:
            return self.reason
        try:
            return HTTPStatus(self.status).phrase
        except ValueError:
            return ""
