# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Check output line rendering."""

from __future__ import annotations

from ..models.status import CheckStatus
from ..models.timing import DurationMetrics

SECONDS_PRECISION = 6
MILLISECONDS_PRECISION = 2


def render_report_line(name: str, status: CheckStatus, metrics: DurationMetrics, output_in_ms: bool = False) -> str:
    """
    ``<name> <STATUS>: <total><unit> | dns_duration=..., ..., total_request_duration=...``

    The headline total always has 6 decimals; perf data uses 6 for seconds and 2 for milliseconds.
    """
    unit = "ms" if output_in_ms else "s"
    precision = MILLISECONDS_PRECISION if output_in_ms else SECONDS_PRECISION
    headline = metrics.total * 1000.0 if output_in_ms else metrics.total
    perfdata = ", ".join(f"{key}={value:.{precision}f}" for key, value in metrics.perfdata(output_in_ms).items())
    return f"{name} {status.value}: {headline:.6f}{unit} | {perfdata}"


def render_failure_line(name: str, status: CheckStatus, message: str) -> str:
    return f"{name} {status.value}: {message}"
