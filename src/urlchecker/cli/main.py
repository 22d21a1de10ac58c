# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""urlchecker CLI."""

from __future__ import annotations

import argparse
import logging

from ..errors import ProbeFailure
from ..log import setup_logging
from ..report import report
from ..resolver import resolve
from ..runner import run_probe
from ..version import __version__

logger = logging.getLogger(__name__)

USAGE = "\n".join(
    [
        "urlchecker is a command-line utility that checks if a url is valid and what HTTP headers it returns.",
        "Usage: urlchecker <AbsoluteUrl> [Timeout]",
        "\t- <AbsoluteUrl> - required - the url to be checked",
        "\t- [Timeout] - optional - the amount of time (in seconds) to wait for the request to complete"
        " (not including DNS resolution); defaults to 10 when it is not a positive whole number",
    ]
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urlchecker",
        description="Send a single HEAD request to a url and report status, timing and headers",
    )
    parser.add_argument("url", nargs="?", help="Url to check; http:// is assumed when no scheme is given")
    # Kept as a string: an unparsable timeout falls back to the default instead of erroring.
    parser.add_argument("timeout", nargs="?", help="Seconds to wait for the response (default: 10)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_usage() -> None:
    print(USAGE)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    # Arguments past the timeout are ignored rather than rejected.
    args, _extra = parser.parse_known_args(argv)

    if args.url is None:
        print_usage()
        return 0

    resolver_args = [args.url] if args.timeout is None else [args.url, args.timeout]
    try:
        request = resolve(resolver_args)
        result = run_probe(request)
    except ProbeFailure as exc:
        logger.debug("Probe failed: %r", exc)
        report(exc)
        return 0

    report(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
