# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Issue the HEAD request and turn the transport outcome into a ProbeResult."""

from __future__ import annotations

import logging
import time
from contextlib import suppress

from .config import effective_timeout, load_http_settings
from .errors import (
    DnsResolutionFailure,
    ErrorCategory,
    NetworkError,
    ProbeTimeout,
    UnexpectedHttpFailure,
)
from .http.client import HttpClient, create_default_http_client
from .http.headers import header_value, parse_content_length
from .http.models import HttpRequest, HttpResponse
from .models import ProbeRequest, ProbeResult

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def build_result(request: ProbeRequest, response: HttpResponse, elapsed_ms: int) -> ProbeResult:
    """Build a ProbeResult from any response the server sent back."""
    return ProbeResult(
        original_url=request.url,
        response_url=response.url or request.url,
        status=response.status_code if response.status_code is not None else 0,
        reason=response.reason_phrase,
        headers=dict(response.headers),
        content_length=parse_content_length(response.headers),
        server=header_value(response.headers, "Server"),
        elapsed_ms=elapsed_ms,
        from_cache=False,
    )


class ProbeRunner:
    """
    Sends exactly one HEAD request per ``run`` call.

    HTTP error statuses are ordinary results; only transport problems become
    ProbeFailure exceptions.
    """

    def __init__(self, http_client: HttpClient | None = None):
        self.http_settings = load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)

    def run(self, request: ProbeRequest) -> ProbeResult:
        http_request = HttpRequest(
            url=request.url,
            method="HEAD",
            timeout=float(effective_timeout(request.timeout)),
            allow_redirects=False,
        )

        started = time.perf_counter()
        response = self.http_client.request(http_request)
        # Prefer the client's own measurement, taken when the response head arrived.
        elapsed = response.elapsed_ms if response.elapsed_ms is not None else _elapsed_ms(started)

        if response.has_response:
            status = response.status_code
            if not 100 <= status <= 599:
                raise UnexpectedHttpFailure(
                    status,
                    response.reason_phrase,
                    response.error_message or f"Invalid HTTP status code {status}",
                )
            logger.info("%s answered %s in %sms", request.url, status, elapsed)
            return build_result(request, response, elapsed)

        category = response.error_category
        logger.info("%s failed after %sms: %s", request.url, elapsed, category)
        if category == ErrorCategory.DNS_ERROR.value:
            raise DnsResolutionFailure(request.url)
        if category == ErrorCategory.TIMEOUT.value:
            raise ProbeTimeout(response.error_message or "Timeout")
        raise NetworkError(
            response.error_message or "Request failed without a response",
            detail=response.error_detail,
        )

    def close(self) -> None:
        with suppress(Exception):
            self.http_client.close()

    def __enter__(self) -> ProbeRunner:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


def run_probe(request: ProbeRequest, http_client: HttpClient | None = None) -> ProbeResult:
    """Run a single probe, closing the HTTP client afterwards."""
    with ProbeRunner(http_client=http_client) as runner:
        return runner.run(request)


__all__ = ["ProbeRunner", "build_result", "run_probe"]
