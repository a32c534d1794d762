# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Validation, probing and reporting for the latency check."""

from .probe import run_probe
from .report import render_failure_line, render_report_line
from .thresholds import classify
from .validate import validate_config

__all__ = [
    "classify",
    "render_failure_line",
    "render_report_line",
    "run_probe",
    "validate_config",
]
