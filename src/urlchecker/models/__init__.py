# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for urlchecker."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import ProbeRequest, ProbeResult

__all__ = [
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeRequest",
    "ProbeResult",
]
