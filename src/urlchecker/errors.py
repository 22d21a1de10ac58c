# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
from enum import Enum

import httpx

# Resolver messages seen when getaddrinfo() fails (glibc, macOS, Windows).
_DNS_ERROR_MARKERS = (
    "name or service not known",
    "nodename nor servname provided",
    "temporary failure in name resolution",
    "no address associated with hostname",
    "getaddrinfo failed",
    "name resolution",
)


class ErrorCategory(str, Enum):
    MALFORMED_URL = "MALFORMED_URL"
    UNSUPPORTED_SCHEME = "UNSUPPORTED_SCHEME"
    DNS_ERROR = "DNS_ERROR"
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    UNEXPECTED_HTTP = "UNEXPECTED_HTTP"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ProbeFailure(Exception):
    """Base class for everything that stops a probe from producing a result."""

    category = ErrorCategory.UNKNOWN_ERROR

    @property
    def display_message(self) -> str:
        return str(self)


class MalformedUrl(ProbeFailure):
    category = ErrorCategory.MALFORMED_URL

    def __init__(self, url: str):
        super().__init__(f"Url is not well formed: {url}")
        self.url = url


class UnsupportedScheme(ProbeFailure):
    category = ErrorCategory.UNSUPPORTED_SCHEME

    def __init__(self, scheme: str):
        super().__init__(f"Url scheme '{scheme}' is not supported")
        self.scheme = scheme


class DnsResolutionFailure(ProbeFailure):
    category = ErrorCategory.DNS_ERROR

    def __init__(self, url: str):
        super().__init__(f"DNS failed to resolve the url: {url}")
        self.url = url


class ProbeTimeout(ProbeFailure):
    category = ErrorCategory.TIMEOUT

    def __init__(self, message: str = "Timeout"):
        super().__init__(message)

    @property
    def display_message(self) -> str:
        return "Timeout"


class NetworkError(ProbeFailure):
    """Response-less transport failure that is neither DNS nor timeout."""

    category = ErrorCategory.CONNECTION_ERROR

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    @property
    def display_message(self) -> str:
        return self.detail or self.message


class UnexpectedHttpFailure(ProbeFailure):
    """A response arrived but cannot be reported as a probe result."""

    category = ErrorCategory.UNEXPECTED_HTTP

    def __init__(self, status: int | None, description: str, message: str):
        super().__init__(message)
        self.status = status
        self.description = description
        self.message = message

    @property
    def display_message(self) -> str:
        return f"{self.status} :: {self.description} :: {self.message}"


def _exception_chain(exc: BaseException):
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def is_dns_failure(exc: BaseException) -> bool:
    """Return True when ``exc`` (or anything it was raised from) is a name resolution error."""
    for link in _exception_chain(exc):
        if isinstance(link, (socket.gaierror, socket.herror)):
            return True
        text = str(link).lower()
        if any(marker in text for marker in _DNS_ERROR_MARKERS):
            return True
    return False


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, TimeoutError):
        return ErrorCategory.TIMEOUT

    if is_dns_failure(exc):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCategory.MALFORMED_URL

    if isinstance(
        exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)
    ):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def describe_exception(exc: BaseException) -> str:
    """Full diagnostic text: every exception in the cause chain as ``Type: message``."""
    parts = []
    for link in _exception_chain(exc):
        message = str(link)
        name = type(link).__name__
        parts.append(f"{name}: {message}" if message else name)
    return " ---> ".join(parts)


__all__ = [
    "DnsResolutionFailure",
    "ErrorCategory",
    "MalformedUrl",
    "NetworkError",
    "ProbeFailure",
    "ProbeTimeout",
    "UnexpectedHttpFailure",
    "UnsupportedScheme",
    "categorize_exception",
    "describe_exception",
    "is_dns_failure",
]
