# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Outcome of one check invocation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .status import CheckStatus
from .timing import DurationMetrics


@dataclass(frozen=True)
class CheckResult:
    status: CheckStatus
    output: str
    metrics: DurationMetrics | None = None
    error: str | None = None

    @property
    def exit_code(self) -> int:
        return self.status.exit_code

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "output": self.output,
            "metrics": self.metrics.perfdata() if self.metrics is not None else None,
            "error": self.error,
        }
