# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
http-perf package entrypoint.

An active-probe HTTP latency check. One GET request is timed phase by phase
(DNS, TCP connect, TLS handshake, first byte, total), the total is compared with
warning and critical thresholds, and a single performance-data line is printed
together with a 0/1/2 exit code.
"""

from .check import classify, render_report_line, run_probe, validate_config
from .config import CheckConfig, load_check_config
from .errors import ConfigurationError, ErrorCategory, HttpPerfError, TransportError
from .http import PhaseRecorder, TimedNetworkBackend, TimedTransport, build_client
from .log import setup_logging
from .models import CheckResult, CheckStatus, DurationMetrics, PhaseTimestamps
from .runtime import HttpPerfCheck
from .version import __version__

__all__ = [
    "CheckConfig",
    "CheckResult",
    "CheckStatus",
    "ConfigurationError",
    "DurationMetrics",
    "ErrorCategory",
    "HttpPerfCheck",
    "HttpPerfError",
    "PhaseRecorder",
    "PhaseTimestamps",
    "TimedNetworkBackend",
    "TimedTransport",
    "TransportError",
    "build_client",
    "classify",
    "load_check_config",
    "render_report_line",
    "run_probe",
    "setup_logging",
    "validate_config",
    "__version__",
]
