# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Render probe results and failures for the terminal."""

from __future__ import annotations

from rich.console import Console

from .errors import ProbeFailure, describe_exception
from .models import ProbeResult

ERROR_STYLE = "red"


def format_result(result: ProbeResult) -> list[str]:
    """Return the report lines for a completed response, blank separators included."""
    status = f"{result.status} {result.status_text}".rstrip()
    lines = [
        "",
        f"Elapsed: {result.elapsed_ms} milliseconds",
        f"Response url: {result.response_url}",
        f"Status: {status}",
        f"Content Length: {result.content_length}",
        f"Is From Cache: {result.from_cache}",
        "",
    ]
    lines.extend(f"{name}: {value}" for name, value in result.headers.items())
    lines.append("")
    return lines


def format_failure(failure: BaseException) -> str:
    if isinstance(failure, ProbeFailure):
        return failure.display_message
    return describe_exception(failure)


def print_result(result: ProbeResult) -> None:
    for line in format_result(result):
        print(line)


def print_error(message: str, console: Console | None = None) -> None:
    console = console or Console(highlight=False)
    console.print(message, style=ERROR_STYLE, markup=False, emoji=False, highlight=False, soft_wrap=True)


def report(outcome: ProbeResult | BaseException, console: Console | None = None) -> None:
    """Print a ProbeResult as a full report, anything else as a single error line."""
    if isinstance(outcome, ProbeResult):
        print_result(outcome)
        return
    print_error(format_failure(outcome), console=console)


__all__ = ["format_failure", "format_result", "print_error", "print_result", "report"]
