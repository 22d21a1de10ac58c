# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx

from urlchecker.errors import (
    DnsResolutionFailure,
    MalformedUrl,
    NetworkError,
    ProbeTimeout,
    UnexpectedHttpFailure,
    UnsupportedScheme,
)
from urlchecker.models import ProbeResult
from urlchecker.report import format_failure, format_result, report


def _result(**overrides):
    values = {
        "original_url": "http://example.com/",
        "response_url": "http://example.com/",
        "status": 200,
        "reason": "OK",
        "headers": {"Server": "nginx", "Content-Length": "1234"},
        "content_length": 1234,
        "server": "nginx",
        "elapsed_ms": 42,
    }
    values.update(overrides)
    return ProbeResult(**values)


def test_format_result_layout():
    assert format_result(_result()) == [
        "",
        "Elapsed: 42 milliseconds",
        "Response url: http://example.com/",
        "Status: 200 OK",
        "Content Length: 1234",
        "Is From Cache: False",
        "",
        "Server: nginx",
        "Content-Length: 1234",
        "",
    ]


def test_report_prints_headers_and_content_length(capsys):
    report(_result())
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert "Server: nginx" in lines
    assert "Content Length: 1234" in lines
    assert out.startswith("\n")
    assert out.endswith("\n\n")


def test_unknown_length_and_missing_reason():
    lines = format_result(_result(status=418, reason="", headers={}, content_length=-1))
    assert "Content Length: -1" in lines
    assert "Status: 418 I'm a Teapot" in lines or "Status: 418 I'm a teapot" in lines


def test_format_failure_messages():
    assert format_failure(MalformedUrl("http://")) == "Url is not well formed: http://"
    assert format_failure(UnsupportedScheme("https")) == "Url scheme 'https' is not supported"
    assert format_failure(DnsResolutionFailure("http://x.invalid/")) == "DNS failed to resolve the url: http://x.invalid/"
    assert format_failure(ProbeTimeout("read timed out")) == "Timeout"
    assert format_failure(UnexpectedHttpFailure(600, "Weird", "boom")) == "600 :: Weird :: boom"
    assert format_failure(NetworkError("refused", detail="ConnectError: refused")) == "ConnectError: refused"
    assert format_failure(httpx.ReadError("gone")) == "ReadError: gone"


def test_report_prints_failure_on_one_line(capsys):
    report(DnsResolutionFailure("http://x.invalid/" + "a" * 200))
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert "DNS failed to resolve the url: http://x.invalid/" in out


def test_report_failure_text_is_not_treated_as_markup(capsys):
    report(NetworkError("bad [bold]thing[/bold] :smile:"))
    out = capsys.readouterr().out
    assert "bad [bold]thing[/bold] :smile:" in out
