# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
urlchecker package entrypoint.

Sends one non-redirecting, no-cache HEAD request to an http:// url and reports
elapsed time, status and response headers. HTTP behavior sits behind an injectable
client interface so the probe can run against any transport.
"""

from .config import HttpSettings, load_http_settings
from .errors import (
    DnsResolutionFailure,
    ErrorCategory,
    MalformedUrl,
    NetworkError,
    ProbeFailure,
    ProbeTimeout,
    UnexpectedHttpFailure,
    UnsupportedScheme,
)
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, create_default_http_client
from .log import setup_logging
from .models import ProbeRequest, ProbeResult
from .report import report
from .resolver import resolve
from .runner import ProbeRunner, run_probe
from .version import __version__

__all__ = [
    "DnsResolutionFailure",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "MalformedUrl",
    "NetworkError",
    "ProbeFailure",
    "ProbeRequest",
    "ProbeResult",
    "ProbeRunner",
    "ProbeTimeout",
    "UnexpectedHttpFailure",
    "UnsupportedScheme",
    "create_default_http_client",
    "load_http_settings",
    "report",
    "resolve",
    "run_probe",
    "setup_logging",
    "__version__",
]
