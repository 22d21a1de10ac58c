# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
import time

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception, describe_exception
from .client import HttpClient
from .headers import collect_headers
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def _response_from_httpx(resp: httpx.Response) -> HttpResponse:
    encoding = resp.headers.encoding
    raw_headers = ((key.decode(encoding), value.decode(encoding)) for key, value in resp.headers.raw)
    return HttpResponse(
        ok=True,
        status_code=resp.status_code,
        reason_phrase=resp.reason_phrase,
        headers=collect_headers(raw_headers),
        url=str(resp.url),
        http_version=resp.http_version,
    )


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper that only ever reads the response head."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(self.settings.no_cache_headers)
        headers.update(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)

        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        logger.debug("Sending %s %s (timeout=%ss)", request.method, request.url, timeout)

        started = time.perf_counter()
        try:
            # Leaving the stream context closes the response without reading a body.
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                timeout=httpx.Timeout(timeout),
                follow_redirects=request.allow_redirects,
            ) as resp:
                elapsed_ms = _elapsed_ms(started)
                response = _response_from_httpx(resp)
                response.elapsed_ms = elapsed_ms
                return response
        except httpx.HTTPStatusError as exc:
            # Raised by clients configured to treat error statuses as exceptions; the
            # server still answered, so this is a response, not a transport failure.
            elapsed_ms = _elapsed_ms(started)
            logger.debug("HTTP status error carried a response: %s", exc)
            response = _response_from_httpx(exc.response)
            response.elapsed_ms = elapsed_ms
            response.error_message = str(exc)
            response.error_type = type(exc).__name__
            return response
        except (httpx.HTTPError, OSError, OverflowError) as exc:
            # OSError/OverflowError escape httpx when the socket layer rejects its arguments.
            category = categorize_exception(exc)
            logger.debug("Request to %s failed without a response (%s): %s", request.url, category.value, exc)
            return HttpResponse(
                ok=False,
                url=request.url,
                error_category=category.value,
                error_message=str(exc),
                error_type=type(exc).__name__,
                error_detail=describe_exception(exc),
            )

    def close(self) -> None:
        self._client.close()
