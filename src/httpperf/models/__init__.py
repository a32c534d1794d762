# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Domain models for http-perf."""

from .result import CheckResult
from .status import CheckStatus
from .timing import PERFDATA_KEYS, PHASES, DurationMetrics, PhaseTimestamps

__all__ = [
    "CheckResult",
    "CheckStatus",
    "DurationMetrics",
    "PERFDATA_KEYS",
    "PHASES",
    "PhaseTimestamps",
]
