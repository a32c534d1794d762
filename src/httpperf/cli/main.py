# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""http-perf CLI."""

from __future__ import annotations

import argparse

from ..config import CheckConfig, load_check_config
from ..log import setup_logging
from ..runtime import HttpPerfCheck


def build_parser(defaults: CheckConfig | None = None) -> argparse.ArgumentParser:
    """Flags mirror the CHECK_* environment variables, which supply the defaults."""
    defaults = defaults or CheckConfig()
    parser = argparse.ArgumentParser(description="Time one HTTP GET and report DNS, connect, TLS and first-byte durations")
    parser.add_argument("-u", "--url", default=defaults.url, help=f"URL to test (default {defaults.url})")
    parser.add_argument("-T", "--timeout", type=float, default=defaults.timeout, help="Request timeout in seconds")
    parser.add_argument("-w", "--warning", type=float, default=defaults.warning, help="Warning threshold, in seconds")
    parser.add_argument("-c", "--critical", type=float, default=defaults.critical, help="Critical threshold, in seconds")
    parser.add_argument(
        "-m",
        "--output-in-ms",
        action="store_true",
        default=defaults.output_in_ms,
        help="Provide output in milliseconds (default: seconds)",
    )
    parser.add_argument(
        "-i",
        "--insecure-skip-verify",
        action="store_true",
        default=defaults.insecure_skip_verify,
        help="Skip TLS certificate verification (not recommended!)",
    )
    parser.add_argument(
        "-z",
        "--tls-timeout",
        type=int,
        default=defaults.tls_timeout,
        help="TLS handshake timeout in milliseconds",
    )
    parser.add_argument("--name", default=defaults.name, help="Check name printed at the start of the output")
    return parser


def config_from_args(args: argparse.Namespace) -> CheckConfig:
    return CheckConfig(
        name=args.name,
        url=args.url,
        timeout=args.timeout,
        tls_timeout=args.tls_timeout,
        warning=args.warning,
        critical=args.critical,
        output_in_ms=args.output_in_ms,
        insecure_skip_verify=args.insecure_skip_verify,
    )


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser(load_check_config())
    args = parser.parse_args(argv)
    return HttpPerfCheck(config_from_args(args)).execute()


if __name__ == "__main__":
    raise SystemExit(main())
