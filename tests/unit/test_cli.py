# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from urlchecker.cli import main as cli
from urlchecker.cli.main import USAGE, build_parser, main
from urlchecker.errors import DnsResolutionFailure, ProbeTimeout
from urlchecker.models import ProbeRequest, ProbeResult
from urlchecker.version import __version__


def _forbid_network(monkeypatch):
    def fail(*_, **__):
        raise AssertionError("no probe expected")

    monkeypatch.setattr(cli, "run_probe", fail)


def test_build_parser_optional_positionals():
    args = build_parser().parse_args(["example.com", "abc"])
    assert args.url == "example.com"
    assert args.timeout == "abc"
    args = build_parser().parse_args([])
    assert args.url is None
    assert args.timeout is None


def test_no_arguments_prints_usage_without_probing(monkeypatch, capsys):
    _forbid_network(monkeypatch)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == USAGE + "\n"
    assert "Usage: urlchecker <AbsoluteUrl> [Timeout]" in out


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_successful_probe_prints_report(monkeypatch, capsys):
    seen = []

    def fake_run_probe(request):
        seen.append(request)
        return ProbeResult(
            original_url=request.url,
            response_url=request.url,
            status=404,
            reason="Not Found",
            headers={"Server": "nginx"},
            content_length=-1,
            server="nginx",
            elapsed_ms=12,
        )

    monkeypatch.setattr(cli, "run_probe", fake_run_probe)
    assert main(["example.com/page", "5"]) == 0

    assert seen == [ProbeRequest(url="http://example.com/page", timeout=5)]
    lines = capsys.readouterr().out.splitlines()
    assert "Elapsed: 12 milliseconds" in lines
    assert "Status: 404 Not Found" in lines
    assert "Server: nginx" in lines


def test_bad_timeout_uses_default(monkeypatch):
    seen = []

    def fake_run_probe(request):
        seen.append(request)
        raise ProbeTimeout()

    monkeypatch.setattr(cli, "run_probe", fake_run_probe)
    assert main(["example.com", "soon"]) == 0
    assert seen[0].timeout == 10


def test_unsupported_scheme_is_reported_without_probing(monkeypatch, capsys):
    _forbid_network(monkeypatch)
    assert main(["https://example.com"]) == 0
    assert "Url scheme 'https' is not supported" in capsys.readouterr().out


def test_probe_failures_are_reported_and_exit_zero(monkeypatch, capsys):
    def fake_run_probe(request):
        raise DnsResolutionFailure(request.url)

    monkeypatch.setattr(cli, "run_probe", fake_run_probe)
    assert main(["nowhere.invalid"]) == 0
    assert "DNS failed to resolve the url: http://nowhere.invalid" in capsys.readouterr().out


def test_arguments_after_timeout_are_ignored(monkeypatch):
    seen = []

    def fake_run_probe(request):
        seen.append(request)
        raise ProbeTimeout()

    monkeypatch.setattr(cli, "run_probe", fake_run_probe)
    assert main(["example.com", "5", "extra", "more"]) == 0
    assert seen == [ProbeRequest(url="http://example.com", timeout=5)]


def test_usage_mentions_timeout_default():
    assert "defaults to 10" in USAGE
